from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys

from interface.keys import char_key, parse_key_spec
from interface.shortcuts import build_editing_key_bindings, dispatch_keys


def _buffer(text, cursor=None):
    return Buffer(document=Document(text, len(text) if cursor is None else cursor), multiline=False)


def test_dispatch_prefers_last_eligible_binding():
    calls = []
    kb = KeyBindings()

    @kb.add(Keys.Any)
    def _any(event):
        calls.append("any")

    @kb.add(Keys.Right)
    def _right(event):
        calls.append("right")

    assert dispatch_keys(kb, (KeyPress(Keys.Right),)) is True
    assert dispatch_keys(kb, (char_key("x"),)) is True
    assert calls == ["right", "any"]


def test_dispatch_skips_inactive_filters():
    kb = KeyBindings()

    @kb.add(Keys.Right, filter=False)
    def _never(event):
        raise AssertionError("filtered binding ran")

    assert dispatch_keys(kb, (KeyPress(Keys.Right),)) is False
    assert dispatch_keys(kb, (KeyPress(Keys.Escape), char_key("b"))) is False


def test_editing_bindings_insert_and_delete_characters():
    buffer = _buffer("ac", cursor=1)
    kb = build_editing_key_bindings(lambda: buffer)

    dispatch_keys(kb, (char_key("ü"),))
    assert buffer.text == "aüc"
    assert buffer.cursor_position == 2

    dispatch_keys(kb, parse_key_spec("backspace"))
    assert buffer.text == "ac"
    dispatch_keys(kb, parse_key_spec("delete"))
    assert buffer.text == "a"


def test_editing_bindings_move_one_character_at_a_time():
    buffer = _buffer("ab")
    kb = build_editing_key_bindings(lambda: buffer)

    dispatch_keys(kb, parse_key_spec("right"))
    assert buffer.cursor_position == 2
    dispatch_keys(kb, parse_key_spec("left"))
    assert buffer.cursor_position == 1
    dispatch_keys(kb, parse_key_spec("home"))
    assert buffer.cursor_position == 0
    dispatch_keys(kb, parse_key_spec("left"))
    assert buffer.cursor_position == 0
    dispatch_keys(kb, parse_key_spec("end"))
    assert buffer.cursor_position == 2


def test_editing_bindings_ignore_control_keys():
    buffer = _buffer("abc")
    kb = build_editing_key_bindings(lambda: buffer)

    dispatch_keys(kb, parse_key_spec("c-a"))
    dispatch_keys(kb, parse_key_spec("enter"))

    assert buffer.text == "abc"
