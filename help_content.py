"""Help overlay content for the helpwin TUI."""

from __future__ import annotations

import logging
from typing import List, Optional

from help_document import extract_guide, load_document
from markup import normalize_kbd_tags, strip_markup
from shortcuts_table import justify_table
from stylize import StyledLine, stylize_wrapped_lines
from wrapping import wrap_text

logger = logging.getLogger(__name__)


def build_help_markup(document: str) -> str:
    """Guide text with the shortcuts table swapped for its justified form."""
    guide = extract_guide(document)
    logger.debug("Justifying keyboard shortcuts table (%d lines)", len(guide.table.splitlines()))
    return normalize_kbd_tags(guide.head + justify_table(guide.table) + guide.rest)


def render_help(width: int, document: Optional[str] = None) -> List[StyledLine]:
    """Word-wrap the user guide to ``width`` and mark its bold spans.

    Raises ``HelpDocumentError`` when the document lacks the guide or the
    shortcuts table.
    """

    if document is None:
        document = load_document()
    text, toggles = strip_markup(build_help_markup(document))
    lines = wrap_text(text, width)
    logger.debug("Rendered help at width %d: %d lines, %d toggles", width, len(lines), len(toggles))
    return stylize_wrapped_lines(lines, toggles)


__all__ = ["build_help_markup", "render_help"]
