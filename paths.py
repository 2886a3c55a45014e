#!/usr/bin/env python3
"""XDG and bundled-file path helpers for helpwin."""

from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "helpwin"
DOCUMENT_FILENAME = "README.md"


def xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME", "~/.config")).expanduser()


def xdg_state_home() -> Path:
    return Path(os.environ.get("XDG_STATE_HOME", "~/.local/state")).expanduser()


def bundled_document_path() -> Path:
    return Path(__file__).resolve().parent / DOCUMENT_FILENAME


__all__ = [
    "APP_NAME",
    "xdg_config_home",
    "xdg_state_home",
    "bundled_document_path",
]
