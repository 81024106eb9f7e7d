"""Logging setup for the codeloc command line."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def configure_logging(level: str = "WARNING", *, console: Console | None = None) -> None:
    """Route every record to a rich handler on stderr.

    Output goes to stderr so that command results on stdout stay machine
    readable.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_path=False,
    )
    logging.basicConfig(level=level.upper(), format="%(message)s", handlers=[handler], force=True)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["LEVEL_NAMES", "configure_logging", "get_logger"]
