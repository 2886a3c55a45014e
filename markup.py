#!/usr/bin/env python3
"""Strip heading and inline emphasis markup, recording where bold toggles."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from toggles import ToggleRecorder

HEADING_MARKER = "#"
EMPHASIS_MARKER = "`"
KBD_OPEN_TAG = "<kbd>"
KBD_CLOSE_TAG = "</kbd>"


class HeadingState(Enum):
    OUTSIDE = "outside"
    IN_HEADING_PREFIX = "in_heading_prefix"


def normalize_kbd_tags(text: str) -> str:
    """Turn ``<kbd>`` keycaps into emphasis spans so they render bold."""
    return text.replace(KBD_OPEN_TAG, EMPHASIS_MARKER).replace(KBD_CLOSE_TAG, EMPHASIS_MARKER)


def strip_markup(text: str) -> Tuple[str, List[int]]:
    """Remove markup from ``text``.

    Returns the plain text and the ascending list of offsets into it at
    which bold flips. A heading is bold from its first character up to the
    end of its line; a backtick flips bold wherever it appears.
    """

    recorder = ToggleRecorder()
    out: List[str] = []
    state = HeadingState.OUTSIDE
    heading_start = 0
    prev: Optional[str] = None
    counter = 0

    for ch in text:
        at_line_start = prev is None or prev == "\n"
        in_prefix = state is HeadingState.IN_HEADING_PREFIX and counter == heading_start

        if ch == HEADING_MARKER and state is HeadingState.OUTSIDE and at_line_start:
            state = HeadingState.IN_HEADING_PREFIX
            heading_start = counter
            recorder.record(counter)
        elif ch == HEADING_MARKER and in_prefix and prev == HEADING_MARKER:
            # rest of the marker run
            pass
        elif ch == " " and in_prefix and prev == HEADING_MARKER:
            pass
        elif ch == "\n" and state is HeadingState.IN_HEADING_PREFIX:
            recorder.record(counter)
            state = HeadingState.OUTSIDE
            out.append(ch)
            counter += 1
        elif ch == EMPHASIS_MARKER:
            recorder.record(counter)
        else:
            out.append(ch)
            counter += 1
        prev = ch

    return "".join(out), recorder.offsets


__all__ = [
    "HeadingState",
    "HEADING_MARKER",
    "EMPHASIS_MARKER",
    "normalize_kbd_tags",
    "strip_markup",
]
