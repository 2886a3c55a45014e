#!/usr/bin/env python3
"""Locate the user guide and the shortcuts table inside the bundled README."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import NamedTuple, Optional

from paths import bundled_document_path

logger = logging.getLogger(__name__)

GUIDE_START_MARKER = "## User guide"
GUIDE_END_MARKER = "## Similar projects"
TABLE_START_MARKER = "keyboard shortcuts:\n\n"
TABLE_END_MARKER = "\n\n"


class HelpDocumentError(Exception):
    """The help document does not have the structure the help screen needs."""


class ExtractedGuide(NamedTuple):
    head: str
    table: str
    rest: str


@lru_cache(maxsize=None)
def _read_document(path: Path) -> str:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise HelpDocumentError(f"Could not read help document {path}: {exc}") from exc
    logger.debug("Loaded help document %s (%d chars)", path, len(text))
    return text


def load_document(path: Optional[Path] = None) -> str:
    """Return the help document, reading it from disk only once per path."""
    return _read_document((path or bundled_document_path()).expanduser().resolve())


def _find(text: str, marker: str, start: int, what: str) -> int:
    idx = text.find(marker, start)
    if idx < 0:
        raise HelpDocumentError(f"Could not find {what} ({marker!r}) in help document")
    return idx


def extract_section(text: str, start_marker: str, end_marker: str) -> str:
    """Slice from ``start_marker`` up to the first ``end_marker`` after it."""
    start = _find(text, start_marker, 0, "start of section")
    end = _find(text, end_marker, start + len(start_marker), "end of section")
    return text[start:end]


def extract_guide(text: str) -> ExtractedGuide:
    guide = extract_section(text, GUIDE_START_MARKER, GUIDE_END_MARKER)

    table_start = _find(guide, TABLE_START_MARKER, 0, "keyboard shortcuts table") + len(
        TABLE_START_MARKER
    )
    table_end = _find(guide, TABLE_END_MARKER, table_start, "end of keyboard shortcuts table")

    extracted = ExtractedGuide(
        head=guide[:table_start],
        table=guide[table_start:table_end],
        rest=guide[table_end + len(TABLE_END_MARKER) :],
    )
    logger.debug(
        "Extracted guide: head=%d table=%d rest=%d chars",
        len(extracted.head),
        len(extracted.table),
        len(extracted.rest),
    )
    return extracted


__all__ = [
    "HelpDocumentError",
    "ExtractedGuide",
    "GUIDE_START_MARKER",
    "GUIDE_END_MARKER",
    "TABLE_START_MARKER",
    "TABLE_END_MARKER",
    "load_document",
    "extract_section",
    "extract_guide",
]
