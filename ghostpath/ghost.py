from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ghostpath.resolver import resolve_completion_base, split_at_cursor
from ghostpath.scanner import scan_candidates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GhostCompletion:
    """A suggested continuation plus the input state it was computed against."""

    input_snapshot: str
    cursor_snapshot: int
    ghost_text: str
    candidates: List[str] = field(default_factory=list)

    def matches(self, value: str, cursor: int) -> bool:
        return self.input_snapshot == value and self.cursor_snapshot == cursor


def longest_common_prefix(values: Sequence[str]) -> str:
    if not values:
        return ""

    prefix = values[0]
    for value in values[1:]:
        while not value.startswith(prefix):
            prefix = prefix[:-1]
        if not prefix:
            break
    return prefix


def compute_ghost_text(matches: Sequence[str], current_segment: str) -> Optional[str]:
    """Pick the continuation to show for ``current_segment`` given sorted ``matches``.

    A unique match completes to the full name plus ``/``. Several matches extend
    to their longest common prefix when that adds something; otherwise the first
    match is offered as if it were unique.
    """
    if not matches:
        return None

    if len(matches) == 1:
        ghost = matches[0][len(current_segment):] + "/"
    else:
        common_prefix = longest_common_prefix(matches)
        if len(common_prefix) > len(current_segment):
            ghost = common_prefix[len(current_segment):]
        else:
            ghost = matches[0][len(current_segment):] + "/"

    return ghost or None


def compute_ghost(value: str, cursor: int, max_entries: Optional[int] = None) -> Optional[GhostCompletion]:
    """Run resolve, scan and pick for the input state; None when no ghost applies."""
    cursor = max(0, min(cursor, len(value)))
    if cursor < len(value):
        return None

    parent_prefix, current_segment = split_at_cursor(value, cursor)
    base_dir = resolve_completion_base(parent_prefix)
    if base_dir is None:
        return None

    matches = scan_candidates(base_dir, current_segment, max_entries)
    ghost_text = compute_ghost_text(matches, current_segment)
    if ghost_text is None:
        return None

    logger.debug("ghost %r for %r from %d candidate(s)", ghost_text, value, len(matches))
    return GhostCompletion(
        input_snapshot=value,
        cursor_snapshot=cursor,
        ghost_text=ghost_text,
        candidates=list(matches),
    )
