from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from ghostpath.text import is_representable

logger = logging.getLogger(__name__)


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def scan_candidates(base_dir: Path, current_segment: str, max_entries: Optional[int] = None) -> List[str]:
    """List subdirectories of ``base_dir`` whose names start with ``current_segment``.

    Hidden directories are only offered once the segment itself starts with a dot.
    At most ``max_entries`` directory entries are examined when a cap is given.
    An unreadable directory, or a path the OS cannot accept (embedded NUL,
    unencodable characters), produces no candidates.
    """
    include_hidden = current_segment.startswith(".")
    matches: List[str] = []

    try:
        with os.scandir(base_dir) as entries:
            for seen, entry in enumerate(entries):
                if max_entries and seen >= max_entries:
                    logger.debug("scan of %s stopped after %d entries", base_dir, max_entries)
                    break
                name = entry.name
                if not is_representable(name):
                    continue
                if not include_hidden and name.startswith("."):
                    continue
                if not name.startswith(current_segment):
                    continue
                if _is_dir(entry):
                    matches.append(name)
    except (OSError, ValueError) as exc:
        logger.debug("cannot scan %s: %s", base_dir, exc)
        return []

    matches.sort()
    return matches
