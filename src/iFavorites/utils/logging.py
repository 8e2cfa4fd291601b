"""Package logger and console logging setup."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from ..config import DEFAULT_LOG_LEVEL

logger = logging.getLogger("iFavorites")


def configure_logging(level: str | int = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Attach a single rich console handler to the package logger."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


__all__ = ["configure_logging", "logger"]
