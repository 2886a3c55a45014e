#!/usr/bin/env python3
"""App state container for helpwin."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

from stylize import StyledLine

OverlayKind = Literal["none", "help"]


@dataclass
class AppState:
    overlay: OverlayKind = "help"

    # Help overlay, re-rendered whenever the box width changes
    help_lines: List[StyledLine] = field(default_factory=list)
    help_width: int = 0
    help_scroll: int = 0


__all__ = ["AppState", "OverlayKind"]
