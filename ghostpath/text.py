from __future__ import annotations


def is_representable(name: str) -> bool:
    """Return True when ``name`` round-trips as UTF-8 text (no surrogate-escaped bytes)."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
