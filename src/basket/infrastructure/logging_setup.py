"""
Logging configuration for the basket CLI.

Domain and application modules only create module-level loggers with
``logging.getLogger(__name__)``; handlers and levels are set up here,
once, by the entry point.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_level(level_name: str) -> int:
    """Map a level name to its logging constant, defaulting to WARNING."""
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level_name: str = "WARNING") -> None:
    """Configure the root logger with a stderr handler.

    Does nothing if the root logger already has handlers, so an embedding
    application (or pytest) keeps its own setup.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level = _parse_level(level_name)
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
