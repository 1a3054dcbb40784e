"""Logging setup for the command-line run."""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"
APP_LOGGER = "cardchallenge"


def configure_logging(
    level: str = "INFO", *, format: str = DEFAULT_FORMAT, datefmt: str = DEFAULT_DATEFMT
) -> logging.Logger:
    """Configure root logging once and return the package logger.

    Args:
        level: Level name such as ``"DEBUG"`` or ``"WARNING"``.
        format: Log format string.
        datefmt: Date format string.
    """
    resolved_level = level.upper()
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)
    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(resolved_level)
    app_logger.debug("Logging configured at %s", resolved_level)
    return app_logger
