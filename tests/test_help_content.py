import pytest

from help_content import build_help_markup, render_help
from help_document import HelpDocumentError
from markup import strip_markup
from stylize import plain_lines, stylize_wrapped_lines
from wrapping import wrap_text

DOCUMENT = (
    "# tool\n\n"
    "## User guide\n\n"
    "Press <kbd>?</kbd> anywhere. These are the keyboard shortcuts:\n\n"
    "| Action | Shortcut |\n"
    "| :-- | :-- |\n"
    "| Quit | q |\n"
    "| Scroll | j |\n"
    "\n"
    "### Notes\n\n"
    "A `very long emphasised span of text` here.\n\n"
    "## Similar projects\n"
)


def test_build_help_markup_inlines_justified_table() -> None:
    markup = build_help_markup(DOCUMENT)

    assert markup == (
        "## User guide\n\n"
        "Press `?` anywhere. These are the keyboard shortcuts:\n\n"
        "`Action`" + " " * 4 + "`Shortcut`\n"
        "Quit" + " " * 6 + "q\n"
        "Scroll" + " " * 4 + "j\n"
        "\n"
        "### Notes\n\n"
        "A `very long emphasised span of text` here.\n\n"
    )


def test_render_help_bolds_headings_and_table_header() -> None:
    lines = render_help(80, DOCUMENT)

    assert lines[0] == [("", False), ("User guide", True)]
    assert lines[1] == []
    assert lines[2] == [
        ("Press ", False),
        ("?", True),
        (" anywhere. These are the keyboard shortcuts:", False),
    ]
    assert lines[4] == [("", False), ("Action", True), ("    ", False), ("Shortcut", True)]
    assert lines[5] == [("Quit      q", False)]


def test_render_help_round_trips_wrapped_text() -> None:
    text, _ = strip_markup(build_help_markup(DOCUMENT))

    for width in range(3, 81):
        lines = render_help(width, DOCUMENT)
        assert plain_lines(lines) == wrap_text(text, width)
        joined = "\n".join(plain_lines(lines))
        assert len(joined) == len(text)
        assert joined.replace("\n", " ") == text.replace("\n", " ")


def test_render_help_is_idempotent() -> None:
    assert render_help(33, DOCUMENT) == render_help(33, DOCUMENT)


def test_bold_never_spans_a_wrapped_line_break() -> None:
    lines = render_help(20, DOCUMENT)
    span_lines = [idx for idx, line in enumerate(plain_lines(lines)) if "very" in line]
    assert span_lines

    start = span_lines[0]
    assert lines[start][-1].bold is True
    assert lines[start + 1][0].bold is False


def test_render_help_missing_marker_is_fatal() -> None:
    with pytest.raises(HelpDocumentError):
        render_help(80, DOCUMENT.replace("## Similar projects", "## See also"))


def test_render_help_bundled_readme() -> None:
    lines = render_help(60)

    assert lines[0] == [("", False), ("User guide", True)]
    assert all(len("".join(seg.text for seg in line)) <= 60 for line in lines)
    assert any(seg.bold and seg.text == "Keyboard shortcuts" for line in lines for seg in line)


def test_bold_lands_on_span_when_words_fill_the_width() -> None:
    text, toggles = strip_markup("aaa `bbb` ccc")
    lines = stylize_wrapped_lines(wrap_text(text, 3), toggles)

    assert lines == [
        [("aaa", False)],
        [("", False), ("bbb", True)],
        [("ccc", False)],
    ]
