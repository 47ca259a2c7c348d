"""Cursor destinations for path-aware navigation, all in character indexes."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"


def start_of_value() -> int:
    return 0


def previous_segment_start(value: str, cursor: int) -> int:
    """Index where the path segment before ``cursor`` begins.

    Slashes directly before the cursor are skipped first, then the segment name,
    so repeated calls walk ``/a/bb`` from 5 to 3, 1 and 0.
    """
    cursor = max(0, min(cursor, len(value)))
    while cursor > 0 and value[cursor - 1] == "/":
        cursor -= 1
    while cursor > 0 and value[cursor - 1] != "/":
        cursor -= 1
    return cursor


def cursor_steps(current: int, target: int, length: int) -> Tuple[Direction, int]:
    """Direction and number of single-character steps needed to reach ``target``."""
    target = max(0, min(target, length))
    current = max(0, min(current, length))
    if target < current:
        return Direction.LEFT, current - target
    return Direction.RIGHT, target - current
