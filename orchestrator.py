#!/usr/bin/env python3
"""Orchestrator for helpwin."""
from __future__ import annotations

import curses
import logging
from typing import Optional

from config import Config, load_config
from help_content import render_help
from help_document import load_document
from keys import (
    KEY_CAP_G,
    KEY_CAP_Q,
    KEY_ESC,
    KEY_G,
    KEY_HELP,
    KEY_Q,
    PAGE_DOWN_KEYS,
    PAGE_UP_KEYS,
    SCROLL_DOWN_KEYS,
    SCROLL_UP_KEYS,
)
from state import AppState
from ui_base import BoxGeometry, clamp, draw_footer, draw_header, draw_styled_box, overlay_geometry

logger = logging.getLogger(__name__)

HEADER_TEXT = "helpwin"
FOOTER_TEXT = "q: quit   ?: help   j/k: scroll   Ctrl+d/u: page   g/G: top/bottom   Esc: close"


class Orchestrator:
    """Owns the help document and the curses lifecycle."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or load_config()
        self.state = AppState()
        # Raises HelpDocumentError before curses takes over the terminal.
        self.document = load_document(self.config.document_path)
        self.state.help_lines = render_help(self.config.print_width, self.document)
        self.state.help_width = self.config.print_width

    def run(self) -> int:
        try:
            curses.wrapper(self._curses_main)
        except curses.error:
            logger.exception("curses error")
            return 1
        return 0

    def _curses_main(self, stdscr: "curses.window") -> None:  # type: ignore[name-defined]
        curses.curs_set(0)
        stdscr.keypad(True)

        self._draw(stdscr)

        while True:
            ch = stdscr.getch()
            if ch in (-1, curses.ERR):
                continue
            if ch in (KEY_Q, KEY_CAP_Q):
                break
            if ch == curses.KEY_RESIZE:
                curses.update_lines_cols()
                self._draw(stdscr)
                continue
            if self._handle_key(stdscr, ch):
                self._draw(stdscr)

    # Rendering
    def _geometry(self, stdscr: "curses.window") -> BoxGeometry:  # type: ignore[name-defined]
        h, w = stdscr.getmaxyx()
        return overlay_geometry(h, w, self.config.overlay_margin)

    def _ensure_help_lines(self, width: int) -> None:
        if width == self.state.help_width and self.state.help_lines:
            return
        logger.debug("Re-rendering help for width %d", width)
        self.state.help_lines = render_help(width, self.document)
        self.state.help_width = width

    def _max_scroll(self, geometry: BoxGeometry) -> int:
        return max(0, len(self.state.help_lines) - geometry.text_height)

    def _draw(self, stdscr: "curses.window") -> None:  # type: ignore[name-defined]
        stdscr.erase()
        draw_header(stdscr, HEADER_TEXT)
        draw_footer(stdscr, FOOTER_TEXT)
        stdscr.refresh()

        if self.state.overlay == "help":
            geometry = self._geometry(stdscr)
            self._ensure_help_lines(geometry.text_width)
            self.state.help_scroll = clamp(self.state.help_scroll, 0, self._max_scroll(geometry))
            try:
                draw_styled_box(
                    stdscr,
                    geometry,
                    self.state.help_lines,
                    self.state.help_scroll,
                    title="help",
                )
            except curses.error:
                # terminal too small for the box
                logger.debug("Skipped help overlay at geometry %s", geometry)

    # Key handling
    def _handle_key(self, stdscr: "curses.window", ch: int) -> bool:  # type: ignore[name-defined]
        if ch == KEY_HELP:
            self.state.overlay = "none" if self.state.overlay == "help" else "help"
            return True

        if self.state.overlay != "help":
            return False

        if ch == KEY_ESC:
            self.state.overlay = "none"
            return True

        geometry = self._geometry(stdscr)
        page = max(1, geometry.text_height // 2)
        if ch in SCROLL_DOWN_KEYS:
            return self._scroll_to(geometry, self.state.help_scroll + 1)
        if ch in SCROLL_UP_KEYS:
            return self._scroll_to(geometry, self.state.help_scroll - 1)
        if ch in PAGE_DOWN_KEYS:
            return self._scroll_to(geometry, self.state.help_scroll + page)
        if ch in PAGE_UP_KEYS:
            return self._scroll_to(geometry, self.state.help_scroll - page)
        if ch == KEY_G:
            return self._scroll_to(geometry, 0)
        if ch == KEY_CAP_G:
            return self._scroll_to(geometry, self._max_scroll(geometry))
        return False

    def _scroll_to(self, geometry: BoxGeometry, target: int) -> bool:
        target = clamp(target, 0, self._max_scroll(geometry))
        if target == self.state.help_scroll:
            return False
        self.state.help_scroll = target
        return True


__all__ = ["Orchestrator", "HEADER_TEXT", "FOOTER_TEXT"]
