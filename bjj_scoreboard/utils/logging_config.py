"""
Centralized logging configuration for the scoreboard.

Usage:
- Default: concise INFO-level logs.
- Debugging: set LOG_LEVEL=DEBUG (or call setup_logging(level="DEBUG")) to see
  every timer transition and score change.

Environment variables:
- LOG_LEVEL: DEBUG|INFO|WARNING|ERROR|CRITICAL
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Literal, Optional

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _level_from_env(default: LogLevel = "INFO") -> int:
    level_str = os.getenv("LOG_LEVEL", default).upper()
    return _LEVELS.get(level_str, logging.INFO)


def setup_logging(level: Optional[LogLevel] = None) -> None:
    """Configure the root logger.

    Args:
        level: Optional string level (e.g., "DEBUG"). If omitted, uses LOG_LEVEL env var or INFO.
    """
    numeric_level = _level_from_env() if level is None else _LEVELS.get(level.upper(), logging.INFO)

    # Avoid duplicate handlers if re-configuring
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    is_debug = numeric_level <= logging.DEBUG
    fmt_verbose = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
    fmt_concise = "%(levelname).1s %(message)s"

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt=fmt_verbose if is_debug else fmt_concise, datefmt="%H:%M:%S")
    )

    root.setLevel(numeric_level)
    root.addHandler(handler)
