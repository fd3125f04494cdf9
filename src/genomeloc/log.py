"""Logging setup for applications that use genomeloc."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    level: int = logging.INFO, console: Optional[Console] = None
) -> RichHandler:
    """
    Route log records through rich.

    Library modules only create ``logging.getLogger(__name__)`` loggers;
    this configures the root logger for an application or notebook.

    Args:
        level: Root logger level (use logging.DEBUG for distance tracing)
        console: Console to write to (default: a new stderr console)

    Returns:
        The installed handler
    """
    handler = RichHandler(console=console or Console(stderr=True), rich_tracebacks=True)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
    return handler
