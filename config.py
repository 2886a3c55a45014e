#!/usr/bin/env python3
"""Configuration loading and path resolution for helpwin."""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from paths import APP_NAME, bundled_document_path, xdg_config_home, xdg_state_home


@dataclass
class Config:
    document_path: Path
    print_width: int = 80
    overlay_margin: int = 2
    log_file: Optional[Path] = None


CONFIG_FILENAME = "config.json"
LOG_FILE_ENV = "HELPWIN_LOG_FILE"


def config_path() -> Path:
    return (xdg_config_home() / APP_NAME / CONFIG_FILENAME).expanduser()


def load_config() -> Config:
    """Load config from XDG path, falling back to defaults.

    Invalid JSON is retried with trailing commas removed; anything still
    unreadable falls back to defaults.
    """

    path = config_path()
    raw: Dict[str, Any] = {}

    if path.exists():
        raw_text = path.read_text()
        try:
            raw = json.loads(raw_text)
        except json.JSONDecodeError:
            try:
                raw = json.loads(_strip_trailing_commas(raw_text))
            except json.JSONDecodeError:
                raw = {}
        if not isinstance(raw, dict):
            raw = {}

    document_value = raw.get("document_path")
    if not isinstance(document_value, str) or not document_value.strip():
        document_value = str(bundled_document_path())
    document_path = Path(document_value.strip()).expanduser()
    log_value = os.environ.get(LOG_FILE_ENV) or raw.get("log_file")

    return Config(
        document_path=document_path,
        print_width=_positive_int(raw.get("print_width"), 80),
        overlay_margin=_non_negative_int(raw.get("overlay_margin"), 2),
        log_file=_resolve_log_file(log_value),
    )


def _positive_int(value: Any, default: int) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return default


def _non_negative_int(value: Any, default: int) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    return default


def _resolve_log_file(value: Any) -> Optional[Path]:
    if not isinstance(value, str) or not value.strip():
        return None
    path = Path(value.strip()).expanduser()
    if not path.is_absolute():
        path = xdg_state_home() / APP_NAME / path
    return path


def _strip_trailing_commas(text: str) -> str:
    """Remove trailing commas before closing braces/brackets."""
    return re.sub(r",(\s*[}\]])", r"\1", text)


__all__ = ["Config", "load_config", "config_path", "CONFIG_FILENAME", "LOG_FILE_ENV"]
