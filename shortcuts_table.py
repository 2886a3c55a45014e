#!/usr/bin/env python3
"""Keyboard shortcuts table justification."""

from __future__ import annotations

from typing import List, NamedTuple

from markup import EMPHASIS_MARKER

DIVIDER_PREFIX = ":--"
COLUMN_GAP = 2
DEFAULT_FIRST_COLUMN_WIDTH = 10


class ShortcutRow(NamedTuple):
    action: str
    shortcut: str


def _cells(line: str) -> List[str]:
    # cells[0] is whatever precedes the leading pipe, normally empty
    cells = line.split("|")
    while len(cells) < 3:
        cells.append("")
    return cells


def _is_divider(action: str) -> bool:
    return action.strip().startswith(DIVIDER_PREFIX)


def first_column_width(block: str) -> int:
    """Widest raw action cell, divider row included."""
    widths = [len(_cells(line)[1]) for line in block.splitlines()]
    if not widths:
        return DEFAULT_FIRST_COLUMN_WIDTH
    return max(widths)


def parse_rows(block: str) -> List[ShortcutRow]:
    rows: List[ShortcutRow] = []
    for line in block.splitlines():
        cells = _cells(line)
        if _is_divider(cells[1]):
            continue
        rows.append(ShortcutRow(cells[1].strip(), cells[2].strip()))
    return rows


def justify_table(block: str) -> str:
    """Render the table as two space-aligned columns.

    The header row is wrapped in emphasis markers. Padding is computed on
    the marked-up text but counts the markers back in, so the columns line
    up once the markers are stripped.
    """

    width = first_column_width(block)
    lines = block.splitlines()
    has_header = bool(lines) and not _is_divider(_cells(lines[0])[1])
    parts: List[str] = []

    for idx, (action, shortcut) in enumerate(parse_rows(block)):
        if idx == 0 and has_header:
            action = f"{EMPHASIS_MARKER}{action}{EMPHASIS_MARKER}"
            shortcut = f"{EMPHASIS_MARKER}{shortcut}{EMPHASIS_MARKER}"

        marker_count = action.count(EMPHASIS_MARKER)
        padding = width + marker_count + COLUMN_GAP - len(action)
        parts.append(f"{action}{' ' * padding}{shortcut}\n")

    parts.append("\n")
    return "".join(parts)


__all__ = [
    "ShortcutRow",
    "DIVIDER_PREFIX",
    "first_column_width",
    "parse_rows",
    "justify_table",
]
