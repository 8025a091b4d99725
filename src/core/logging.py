"""Logging setup shared by every module.

All modules use:
    from core.logging import get_logger
    logger = get_logger(__name__)

Logs always go to standard error through Rich, so standard output carries
nothing but the rendered listing (JSON output stays parseable).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: int | str = logging.WARNING, console: Console | None = None) -> None:
    """Configure the root logger once; later calls only change the level."""

    root = logging.getLogger()
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Do NOT configure logging here; that happens in `configure_logging`."""

    return logging.getLogger(name)
