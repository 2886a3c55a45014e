#!/usr/bin/env python3
"""Basic UI helpers for curses rendering."""

from __future__ import annotations

import curses
from typing import NamedTuple, Sequence

from stylize import StyledLine

_BOX_COLOR_PAIR: int | None = None
_BOX_PADDING = 2


class BoxGeometry(NamedTuple):
    height: int
    width: int
    y: int
    x: int

    @property
    def text_width(self) -> int:
        return max(1, self.width - 2 * _BOX_PADDING)

    @property
    def text_height(self) -> int:
        return max(0, self.height - 2)


def _box_color_attr() -> int:
    global _BOX_COLOR_PAIR
    if _BOX_COLOR_PAIR is not None:
        return _BOX_COLOR_PAIR
    if not curses.has_colors():
        _BOX_COLOR_PAIR = 0
        return _BOX_COLOR_PAIR
    try:
        curses.init_pair(1, curses.COLOR_WHITE, curses.COLOR_BLACK)
    except curses.error:
        _BOX_COLOR_PAIR = 0
        return _BOX_COLOR_PAIR
    _BOX_COLOR_PAIR = curses.color_pair(1)
    return _BOX_COLOR_PAIR


def draw_header(stdscr: "curses.window", text: str) -> None:  # type: ignore[name-defined]
    h, w = stdscr.getmaxyx()
    if w <= 0 or h <= 0:
        return
    stdscr.addnstr(0, 0, text.ljust(max(1, w - 1)), max(0, w - 1))


def draw_footer(stdscr: "curses.window", text: str) -> None:  # type: ignore[name-defined]
    h, w = stdscr.getmaxyx()
    if w <= 0 or h <= 0:
        return
    stdscr.addnstr(h - 1, 0, text.ljust(max(1, w - 1)), max(0, w - 1))


def overlay_geometry(screen_h: int, screen_w: int, margin: int) -> BoxGeometry:
    """Box centered on the screen, ``margin`` cells in from every edge.

    The header and footer rows are always left uncovered.
    """
    win_h = clamp(screen_h - 2 - 2 * margin, 3, max(3, screen_h - 2))
    win_w = clamp(screen_w - 2 * margin, 2 * _BOX_PADDING + 1, max(2 * _BOX_PADDING + 1, screen_w))
    win_y = max(1, (screen_h - win_h) // 2)
    win_x = max(0, (screen_w - win_w) // 2)
    return BoxGeometry(win_h, win_w, win_y, win_x)


def draw_styled_box(
    stdscr: "curses.window",  # type: ignore[name-defined]
    geometry: BoxGeometry,
    lines: Sequence[StyledLine],
    scroll: int,
    title: str = "",
) -> None:
    win = stdscr.derwin(geometry.height, geometry.width, geometry.y, geometry.x)
    attr = _box_color_attr()
    if attr:
        win.bkgd(" ", attr)
        win.attrset(attr)
    win.erase()
    win.border()
    if title:
        win.addnstr(0, _BOX_PADDING, f" {title} ", max(0, geometry.width - 2 * _BOX_PADDING))

    limit = geometry.text_width
    visible = lines[scroll : scroll + geometry.text_height]
    for row, line in enumerate(visible, start=1):
        col = 0
        for segment in line:
            if col >= limit:
                break
            if not segment.text:
                continue
            style = attr | (curses.A_BOLD if segment.bold else curses.A_NORMAL)
            win.addnstr(row, _BOX_PADDING + col, segment.text, limit - col, style)
            col += len(segment.text)
    win.refresh()


def clamp(value: int, min_value: int, max_value: int) -> int:
    return max(min_value, min(value, max_value))


__all__ = [
    "BoxGeometry",
    "draw_header",
    "draw_footer",
    "overlay_geometry",
    "draw_styled_box",
    "clamp",
]
