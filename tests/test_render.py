import io

from rich.console import Console

from ghostpath.config import UIConfig
from interface.path_dialog import NewSessionDialog
from interface.render import render_dialog, render_path_field


def _to_text(renderable) -> str:
    console = Console(file=io.StringIO(), width=80, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


def test_ghost_is_appended_in_ghost_style(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "target").mkdir()
    dialog = NewSessionDialog(path="tar")

    text = render_path_field(dialog, ghost_style="dim")

    assert text.plain == "target/"
    assert text.spans[-1].start == 3
    assert text.spans[-1].style == "dim"


def test_field_without_ghost_is_plain_value():
    dialog = NewSessionDialog(path="/nonexistent-ghostpath-dir/x")
    text = render_path_field(dialog)
    assert text.plain == "/nonexistent-ghostpath-dir/x"
    assert text.spans == []


def test_dialog_shows_error_while_flashing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    dialog = NewSessionDialog(path="missing")
    dialog.submit()

    panel = render_dialog(dialog, UIConfig(error_style="red"))

    assert panel.border_style == "red"
    output = _to_text(panel)
    assert "New Session" in output
    assert "Not a directory: missing" in output


def test_dialog_marks_focused_field(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "target").mkdir()
    dialog = NewSessionDialog(path="tar", title="demo")

    output = _to_text(render_dialog(dialog, UIConfig()))

    assert "> Path: target/" in output
    assert "  Title: demo" in output
