#!/usr/bin/env python3
"""Key constants and mappings."""
from __future__ import annotations

import curses

# Key constants
KEY_Q = ord("q")
KEY_CAP_Q = ord("Q")
KEY_HELP = ord("?")
KEY_ESC = 27

KEY_J = ord("j")
KEY_K = ord("k")
KEY_G = ord("g")
KEY_CAP_G = ord("G")

KEY_CTRL_D = 4
KEY_CTRL_U = 21

SCROLL_DOWN_KEYS = (KEY_J, curses.KEY_DOWN)
SCROLL_UP_KEYS = (KEY_K, curses.KEY_UP)
PAGE_DOWN_KEYS = (KEY_CTRL_D, curses.KEY_NPAGE)
PAGE_UP_KEYS = (KEY_CTRL_U, curses.KEY_PPAGE)


__all__ = [
    "KEY_Q",
    "KEY_CAP_Q",
    "KEY_HELP",
    "KEY_ESC",
    "KEY_J",
    "KEY_K",
    "KEY_G",
    "KEY_CAP_G",
    "KEY_CTRL_D",
    "KEY_CTRL_U",
    "SCROLL_DOWN_KEYS",
    "SCROLL_UP_KEYS",
    "PAGE_DOWN_KEYS",
    "PAGE_UP_KEYS",
]
