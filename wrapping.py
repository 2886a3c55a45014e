#!/usr/bin/env python3
"""Word wrapping that keeps character offsets stable."""

from __future__ import annotations

import textwrap
from typing import List

# textwrap only breaks on these characters
_BREAKABLE_WHITESPACE = "\t\x0b\x0c\r "


def _wrapper(width: int) -> textwrap.TextWrapper:
    return textwrap.TextWrapper(
        width=width,
        break_long_words=False,
        break_on_hyphens=False,
        drop_whitespace=False,
        replace_whitespace=False,
        expand_tabs=False,
    )


def _wrap_paragraph(wrapper: textwrap.TextWrapper, paragraph: str) -> List[str]:
    chunks = wrapper.wrap(paragraph)
    if not chunks:
        return [paragraph]

    # Each soft break stands in for exactly one whitespace character, either
    # the last one of the line or the first one of the next line. A line
    # that was only that character disappears into the break; trailing
    # whitespace at the end of a paragraph stays on the last line.
    lines: List[str] = []
    absorbed = False
    last = len(chunks) - 1
    for idx, chunk in enumerate(chunks):
        if lines and not absorbed:
            prev = lines[-1]
            if idx == last and not chunk.strip(_BREAKABLE_WHITESPACE):
                lines[-1] = prev + chunk
                break
            if prev[-1:] and prev[-1] in _BREAKABLE_WHITESPACE:
                lines[-1] = prev[:-1]
            elif chunk[:1] and chunk[0] in _BREAKABLE_WHITESPACE:
                chunk = chunk[1:]
                if not chunk:
                    absorbed = True
                    continue
        absorbed = False
        lines.append(chunk)
    return lines


def wrap_text(text: str, width: int) -> List[str]:
    """Greedily wrap ``text`` at word boundaries without hyphenation.

    Newlines are kept as paragraph breaks and blank lines survive as empty
    strings. Joining the result with newlines gives back ``text`` with
    the break-replaced spaces turned into newlines, so character offsets
    into ``text`` apply unchanged to the wrapped lines.
    """

    if width < 1:
        raise ValueError(f"Wrap width must be positive, got {width}")
    wrapper = _wrapper(width)
    lines: List[str] = []
    for paragraph in text.split("\n"):
        lines.extend(_wrap_paragraph(wrapper, paragraph))
    return lines


__all__ = ["wrap_text"]
