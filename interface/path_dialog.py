"""New-session dialog state with a ghost-completing directory field.

The dialog owns the path field (a prompt_toolkit ``Buffer``), its pending
ghost completion and the invalid-path flash. Every edit or navigation of the
path field is followed by a recompute; accepting a ghost is refused when the
field no longer matches the state the ghost was computed against.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from prompt_toolkit.keys import Keys

from ghostpath.config import AppConfig
from ghostpath.ghost import GhostCompletion, compute_ghost
from ghostpath.navigation import Direction, cursor_steps
from interface.keys import KeySequence
from interface.shortcuts import build_editing_key_bindings, build_path_key_bindings, dispatch_keys

logger = logging.getLogger(__name__)

PATH_FIELD = 0
TITLE_FIELD = 1
FIELD_COUNT = 2


def _single_line_buffer(text: str) -> Buffer:
    return Buffer(document=Document(text, len(text)), multiline=False)


@dataclass
class SessionRequest:
    path: str
    title: str


class NewSessionDialog:
    def __init__(
        self,
        config: Optional[AppConfig] = None,
        path: Optional[str] = None,
        title: str = "",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or AppConfig()
        self.path = _single_line_buffer(self.config.dialog.start_path if path is None else path)
        self.title = _single_line_buffer(title)
        self.focused_field = PATH_FIELD
        self.path_ghost: Optional[GhostCompletion] = None
        self.error_message: Optional[str] = None
        self.path_invalid_flash_until: Optional[float] = None
        self._clock = clock
        self._path_bindings = build_path_key_bindings(self)
        self._editing_bindings = build_editing_key_bindings(self.focused_buffer)
        self.recompute_path_ghost()

    def path_has_focus(self) -> bool:
        return self.focused_field == PATH_FIELD

    def path_at_end(self) -> bool:
        return self.path.cursor_position >= len(self.path.text)

    def focused_buffer(self) -> Buffer:
        return self.path if self.path_has_focus() else self.title

    def handle_key(self, keys: KeySequence) -> bool:
        """Dispatch a key sequence to the path shortcuts, focus handling or the focused field."""
        if self.handle_path_shortcuts(keys):
            return True

        if len(keys) == 1 and keys[0].key in (Keys.Tab, Keys.BackTab):
            step = 1 if keys[0].key == Keys.Tab else -1
            self.focus_field((self.focused_field + step) % FIELD_COUNT)
            return True

        buffer = self.focused_buffer()
        before = (buffer.text, buffer.cursor_position)
        dispatch_keys(self._editing_bindings, keys)
        changed = (buffer.text, buffer.cursor_position) != before

        if self.path_has_focus():
            if changed:
                self._clear_path_error()
            self.recompute_path_ghost()
        return changed

    def focus_field(self, index: int) -> None:
        self.focused_field = index
        if index == PATH_FIELD:
            self.recompute_path_ghost()
        else:
            self.clear_path_ghost()

    def handle_path_shortcuts(self, keys: KeySequence) -> bool:
        return dispatch_keys(self._path_bindings, keys)

    def jump_path_cursor(self, target_char_idx: int) -> None:
        self.move_path_cursor_to(target_char_idx)
        self._clear_path_error()
        self.recompute_path_ghost()

    def move_path_cursor_to(self, target_char_idx: int) -> None:
        direction, count = cursor_steps(self.path.cursor_position, target_char_idx, len(self.path.text))
        step = self.path.cursor_left if direction == Direction.LEFT else self.path.cursor_right
        for _ in range(count):
            step()

    def set_path_value_with_cursor(self, value: str, cursor_char_idx: int) -> None:
        self.path.document = Document(value, len(value))
        self.move_path_cursor_to(cursor_char_idx)

    def recompute_path_ghost(self) -> None:
        self.path_ghost = None
        if not self.config.completion.enabled:
            return
        self.path_ghost = compute_ghost(self.path.text, self.path.cursor_position, self.config.completion.entry_cap)

    def accept_path_ghost(self) -> bool:
        ghost = self.path_ghost
        self.path_ghost = None
        if ghost is None:
            return False

        value = self.path.text
        if not ghost.matches(value, self.path.cursor_position):
            logger.debug("discarding stale ghost %r computed for %r", ghost.ghost_text, ghost.input_snapshot)
            return False

        new_value = value + ghost.ghost_text
        self.set_path_value_with_cursor(new_value, len(new_value))
        self._clear_path_error()
        self.recompute_path_ghost()
        return True

    def clear_path_ghost(self) -> None:
        self.path_ghost = None

    def ghost_text(self) -> Optional[str]:
        return self.path_ghost.ghost_text if self.path_ghost else None

    def is_path_invalid_flash_active(self) -> bool:
        return self.path_invalid_flash_until is not None and self._clock() < self.path_invalid_flash_until

    def submit(self) -> Optional[SessionRequest]:
        """Validate the chosen directory; flash the path field and return None when invalid."""
        raw = self.path.text.strip()
        try:
            target = Path(raw).expanduser() if raw else None
            is_dir = target is not None and target.is_dir()
        except (RuntimeError, OSError, ValueError):
            is_dir = False
        if not is_dir:
            self.error_message = f"Not a directory: {raw}" if raw else "Path is required"
            self.path_invalid_flash_until = self._clock() + self.config.dialog.flash_seconds
            logger.debug("submit rejected: %s", self.error_message)
            return None

        resolved = target.resolve()
        title = self.title.text.strip() or resolved.name or str(resolved)
        return SessionRequest(path=str(resolved), title=title)

    def _clear_path_error(self) -> None:
        self.error_message = None
        self.path_invalid_flash_until = None
