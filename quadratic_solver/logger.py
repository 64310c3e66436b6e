"""
Logging configuration for the quadratic solver.

Diagnostics go through a Rich handler on stderr so stdout stays reserved for
the solver report.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from . import config

console = Console(stderr=True)


def setup_logging(level: Optional[str] = None, *, show_time: bool = False) -> logging.Logger:
    """
    Set up the package logger with a Rich console handler.

    Args:
        level: One of ``config.LOG_LEVELS``; defaults to ``config.DEFAULT_LOG_LEVEL``
        show_time: Show timestamp in console output

    Returns:
        Configured package logger
    """
    level_name = (level or config.DEFAULT_LOG_LEVEL).upper()
    if level_name not in config.LOG_LEVELS:
        level_name = config.DEFAULT_LOG_LEVEL

    logger = logging.getLogger(config.LOGGER_NAME)
    logger.setLevel(getattr(logging, level_name))
    logger.handlers.clear()

    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(getattr(logging, level_name))
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger (``name`` is usually ``__name__``)."""
    if name.startswith(config.LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{config.LOGGER_NAME}.{name}")
