"""Logging setup (stdlib `logging` rendered by Rich).

Logs go to stderr so `--json` output on stdout stays machine-readable.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "hello_d2"

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def normalize_level(level: str | int) -> int:
    """Map a level name (case-insensitive) or number to a `logging` level."""

    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name not in _VALID_LEVELS:
        raise ValueError(f"unknown log level: {level!r}")
    return logging.getLevelName(name)


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Configure the application logger. Safe to call more than once."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(normalize_level(level))
    logger.propagate = False

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
