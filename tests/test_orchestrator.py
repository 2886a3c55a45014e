import pytest

from config import Config
from help_content import render_help
from help_document import HelpDocumentError
from keys import KEY_CAP_G, KEY_ESC, KEY_G, KEY_HELP, KEY_J, KEY_K
from orchestrator import Orchestrator
from paths import bundled_document_path
from ui_base import overlay_geometry


class _FakeScreen:
    def __init__(self, height: int, width: int) -> None:
        self.height = height
        self.width = width

    def getmaxyx(self) -> tuple[int, int]:
        return self.height, self.width


def _orchestrator(margin: int = 2) -> Orchestrator:
    return Orchestrator(Config(document_path=bundled_document_path(), overlay_margin=margin))


def test_overlay_geometry_leaves_margin() -> None:
    geometry = overlay_geometry(24, 80, 2)

    assert (geometry.height, geometry.width) == (18, 76)
    assert (geometry.y, geometry.x) == (3, 2)
    assert geometry.text_width == 72
    assert geometry.text_height == 16


def test_overlay_geometry_on_tiny_screen() -> None:
    geometry = overlay_geometry(4, 4, 2)

    assert geometry.height >= 3
    assert geometry.text_width >= 1


def test_orchestrator_rejects_malformed_document(tmp_path) -> None:
    path = tmp_path / "bad.md"
    path.write_text("no guide here", encoding="utf-8")

    with pytest.raises(HelpDocumentError):
        Orchestrator(Config(document_path=path))


def test_scroll_keys_stay_in_range() -> None:
    orchestrator = _orchestrator()
    screen = _FakeScreen(12, 40)
    geometry = overlay_geometry(12, 40, 2)
    orchestrator._ensure_help_lines(geometry.text_width)

    assert not orchestrator._handle_key(screen, KEY_K)
    assert orchestrator._handle_key(screen, KEY_J)
    assert orchestrator.state.help_scroll == 1
    assert orchestrator._handle_key(screen, KEY_CAP_G)
    bottom = len(orchestrator.state.help_lines) - geometry.text_height
    assert orchestrator.state.help_scroll == bottom
    assert not orchestrator._handle_key(screen, KEY_J)
    assert orchestrator._handle_key(screen, KEY_G)
    assert orchestrator.state.help_scroll == 0


def test_help_key_toggles_overlay() -> None:
    orchestrator = _orchestrator()
    screen = _FakeScreen(24, 80)

    assert orchestrator.state.overlay == "help"
    assert orchestrator._handle_key(screen, KEY_HELP)
    assert orchestrator.state.overlay == "none"
    assert not orchestrator._handle_key(screen, KEY_J)
    assert orchestrator._handle_key(screen, KEY_HELP)
    assert orchestrator._handle_key(screen, KEY_ESC)
    assert orchestrator.state.overlay == "none"


def test_help_lines_follow_box_width() -> None:
    orchestrator = _orchestrator()

    orchestrator._ensure_help_lines(40)
    narrow = orchestrator.state.help_lines
    orchestrator._ensure_help_lines(40)
    assert orchestrator.state.help_lines is narrow
    orchestrator._ensure_help_lines(70)
    assert orchestrator.state.help_width == 70
    assert len(orchestrator.state.help_lines) < len(narrow)


def test_startup_render_is_kept_as_first_help_lines() -> None:
    orchestrator = Orchestrator(Config(document_path=bundled_document_path(), print_width=64))

    assert orchestrator.state.help_width == 64
    assert orchestrator.state.help_lines == render_help(64)
