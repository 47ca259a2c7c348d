from __future__ import annotations

import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler

TRACE_ENV_VAR = "GHOSTPATH_TRACE"
LOGGER_NAMES = ("ghostpath", "interface")


def build_console(use_rich: bool) -> Console:
    return Console(file=sys.stderr, force_terminal=use_rich, stderr=True)


def should_show_trace() -> bool:
    """Check if trace mode is enabled via environment variable."""
    return os.getenv(TRACE_ENV_VAR, "").lower() in ("1", "true", "yes")


def configure_logging(console: Console) -> None:
    """Route ghostpath loggers through rich; debug output only in trace mode."""
    level = logging.DEBUG if should_show_trace() else logging.WARNING
    handler = RichHandler(console=console, show_path=False, show_time=False)
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.handlers = [handler]
        logger.setLevel(level)
        logger.propagate = False
