"""
Key sequences in prompt_toolkit notation.

A key sequence is a tuple of ``KeyPress`` objects. Meta/Alt combinations
arrive from terminals as Escape followed by the key, so ``alt+b`` is the
two-press sequence ``escape b``.
"""

from __future__ import annotations

from typing import List, Tuple

from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import KEY_ALIASES, Keys

KeySequence = Tuple[KeyPress, ...]

_CHAR_NAMES = {"space": " ", "comma": ",", "slash": "/"}
_META_PREFIXES = ("m-", "alt-", "alt+")


def char_key(char: str) -> KeyPress:
    return KeyPress(char, char)


def parse_key_name(name: str) -> KeyPress:
    """Parse one key name (``right``, ``c-a``, ``s-tab``, ``x``) into a KeyPress."""
    if len(name) == 1:
        return char_key(name)

    lowered = name.lower()
    if lowered in _CHAR_NAMES:
        return char_key(_CHAR_NAMES[lowered])

    lowered = KEY_ALIASES.get(lowered, lowered)
    try:
        return KeyPress(Keys(lowered))
    except ValueError:
        raise ValueError(f"unknown key {name!r}") from None


def parse_key_spec(spec: str) -> KeySequence:
    """Parse ``c-left``, ``escape b`` or ``alt-b`` into a key sequence."""
    names = spec.split()
    if not names:
        raise ValueError("empty key spec")

    presses: List[KeyPress] = []
    for name in names:
        lowered = name.lower()
        prefix = next((p for p in _META_PREFIXES if lowered.startswith(p) and len(name) > len(p)), None)
        if prefix:
            presses.append(KeyPress(Keys.Escape))
            name = name[len(prefix):]
        presses.append(parse_key_name(name))
    return tuple(presses)


def parse_key_sequence(text: str) -> List[KeySequence]:
    """Parse a comma-separated list of key specs; blank items are ignored."""
    return [parse_key_spec(item) for item in text.split(",") if item.strip()]
