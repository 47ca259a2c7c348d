from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Callable

from prompt_toolkit.buffer import Buffer
from prompt_toolkit.filters import Condition
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent, KeyProcessor
from prompt_toolkit.keys import Keys

from ghostpath.navigation import previous_segment_start, start_of_value
from interface.keys import KeySequence

if TYPE_CHECKING:
    from interface.path_dialog import NewSessionDialog


def dispatch_keys(key_bindings: KeyBindings, keys: KeySequence) -> bool:
    """Run the binding for ``keys`` whose filter is active; False when none applies.

    Among eligible bindings the last one wins, which is how prompt_toolkit's
    key processor resolves overlaps (specific keys sort after ``Keys.Any``).
    """
    matches = [b for b in key_bindings.get_bindings_for_keys(tuple(k.key for k in keys)) if b.filter()]
    if not matches:
        return False

    processor = KeyProcessor(key_bindings)
    event = KeyPressEvent(
        weakref.ref(processor),
        arg=None,
        key_sequence=list(keys),
        previous_key_sequence=[],
        is_repeat=False,
    )
    matches[-1].handler(event)
    return True


def build_path_key_bindings(dialog: NewSessionDialog) -> KeyBindings:
    """Shortcuts of the path field: accept ghost, jump to start, previous segment."""
    kb = KeyBindings()
    path_focused = Condition(dialog.path_has_focus)
    ghost_ready = path_focused & Condition(lambda: dialog.path_at_end() and dialog.path_ghost is not None)

    # Right/End accept only without modifiers; otherwise the editing bindings move the cursor.
    @kb.add(Keys.Right, filter=ghost_ready)
    @kb.add(Keys.End, filter=ghost_ready)
    def _accept_ghost(event: KeyPressEvent) -> None:
        dialog.accept_path_ghost()

    @kb.add(Keys.Home, filter=path_focused)
    @kb.add(Keys.ShiftHome, filter=path_focused)
    @kb.add(Keys.ControlHome, filter=path_focused)
    @kb.add(Keys.ControlShiftHome, filter=path_focused)
    @kb.add(Keys.ControlA, filter=path_focused)
    def _jump_to_start(event: KeyPressEvent) -> None:
        dialog.jump_path_cursor(start_of_value())

    @kb.add(Keys.ControlLeft, filter=path_focused)
    @kb.add(Keys.ControlShiftLeft, filter=path_focused)
    @kb.add(Keys.Escape, "b", filter=path_focused)
    def _previous_segment(event: KeyPressEvent) -> None:
        dialog.jump_path_cursor(previous_segment_start(dialog.path.text, dialog.path.cursor_position))

    return kb


def build_editing_key_bindings(get_buffer: Callable[[], Buffer]) -> KeyBindings:
    """Plain single-line editing for whichever buffer ``get_buffer`` returns."""
    kb = KeyBindings()

    @kb.add(Keys.Any)
    def _self_insert(event: KeyPressEvent) -> None:
        key = event.key_sequence[0].key
        if not isinstance(key, Keys) and key.isprintable():
            get_buffer().insert_text(event.data)

    @kb.add(Keys.Backspace)
    def _backspace(event: KeyPressEvent) -> None:
        get_buffer().delete_before_cursor()

    @kb.add(Keys.Delete)
    def _delete(event: KeyPressEvent) -> None:
        get_buffer().delete()

    @kb.add(Keys.Left)
    def _left(event: KeyPressEvent) -> None:
        get_buffer().cursor_left()

    @kb.add(Keys.Right)
    def _right(event: KeyPressEvent) -> None:
        get_buffer().cursor_right()

    @kb.add(Keys.Home)
    def _home(event: KeyPressEvent) -> None:
        get_buffer().cursor_position = 0

    @kb.add(Keys.End)
    def _end(event: KeyPressEvent) -> None:
        buffer = get_buffer()
        buffer.cursor_position = len(buffer.text)

    return kb
