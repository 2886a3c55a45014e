#!/usr/bin/env python3
"""Apply bold toggles to word-wrapped lines."""

from __future__ import annotations

from typing import Iterable, List, NamedTuple, Sequence

from toggles import ToggleCursor


class StyledSegment(NamedTuple):
    text: str
    bold: bool


StyledLine = List[StyledSegment]


def stylize_wrapped_lines(lines: Iterable[str], toggles: Sequence[int]) -> List[StyledLine]:
    """Split each wrapped line into plain and bold segments.

    ``toggles`` index into the text the lines were wrapped from, with one
    position per line break. Bold is switched off at the end of every line
    and not reopened on the next one; the pending toggle is left in place.
    """

    cursor = ToggleCursor(toggles)
    counter = 0
    bold = False
    styled: List[StyledLine] = []

    for line in lines:
        segments: StyledLine = []
        current: List[str] = []

        for ch in line:
            while cursor.at(counter):
                segments.append(StyledSegment("".join(current), bold))
                current = []
                bold = not bold
                cursor.advance()
            current.append(ch)
            counter += 1

        if current:
            segments.append(StyledSegment("".join(current), bold))

        # toggles sitting on the line break itself
        while cursor.at(counter):
            bold = not bold
            cursor.advance()
        if bold:
            bold = False

        styled.append(segments)
        counter += 1

    return styled


def plain_lines(styled: Iterable[StyledLine]) -> List[str]:
    return ["".join(segment.text for segment in line) for line in styled]


__all__ = ["StyledSegment", "StyledLine", "stylize_wrapped_lines", "plain_lines"]
