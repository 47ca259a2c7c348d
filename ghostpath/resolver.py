from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


def home_dir() -> Optional[Path]:
    """Return the user's home directory, or None when it cannot be determined."""
    try:
        return Path.home()
    except (RuntimeError, KeyError, OSError) as exc:
        logger.debug("home directory unavailable: %s", exc)
        return None


def split_at_cursor(value: str, cursor: int) -> Tuple[str, str]:
    """Split ``value[:cursor]`` into (parent_prefix, current_segment).

    The parent prefix runs up to and including the last ``/`` before the cursor;
    the segment is whatever follows it.
    """
    cursor = max(0, min(cursor, len(value)))
    head = value[:cursor]
    segment_start = head.rfind("/") + 1
    return head[:segment_start], head[segment_start:]


def resolve_completion_base(parent_prefix: str) -> Optional[Path]:
    """Map the text before the current segment to the directory that should be scanned."""
    if not parent_prefix:
        return Path(".")

    trimmed = parent_prefix.rstrip("/")
    if not trimmed:
        return Path("/")

    if trimmed == "~":
        return home_dir()

    if trimmed.startswith("~/"):
        home = home_dir()
        if home is None:
            return None
        return home / trimmed[2:]

    return Path(trimmed)
