from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from ghostpath.config import UIConfig
from interface.path_dialog import PATH_FIELD, TITLE_FIELD, NewSessionDialog


def render_path_field(dialog: NewSessionDialog, ghost_style: str = "dim", error_style: str = "bold red") -> Text:
    """The path value followed by its ghost text, if any."""
    style = error_style if dialog.is_path_invalid_flash_active() else ""
    text = Text(dialog.path.text, style=style)
    ghost = dialog.ghost_text()
    if ghost:
        text.append(ghost, style=ghost_style)
    return text


def _label(name: str, focused: bool) -> Text:
    marker = "> " if focused else "  "
    return Text(f"{marker}{name}: ", style="bold" if focused else "")


def render_dialog(dialog: NewSessionDialog, ui: UIConfig) -> Panel:
    path_line = _label("Path", dialog.focused_field == PATH_FIELD)
    path_line.append_text(render_path_field(dialog, ui.ghost_style, ui.error_style))

    title_line = _label("Title", dialog.focused_field == TITLE_FIELD)
    title_line.append(dialog.title.text)

    rows = [path_line, title_line]
    if dialog.error_message:
        rows.append(Text(dialog.error_message, style=ui.error_style))

    border = ui.error_style if dialog.is_path_invalid_flash_active() else "blue"
    return Panel(Group(*rows), title="New Session", border_style=border)
