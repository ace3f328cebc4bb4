"""
Utilities package for the BJJ Scoreboard.

This package contains clock, formatting, logging and configuration helpers.
"""
from .time_utils import fmt_mmss, fmt_remaining, now_ms
from .logging_config import setup_logging
from .constants import (
    APP_TITLE, DEFAULT_MATCH_DURATION_SECONDS, MIN_MATCH_DURATION_SECONDS,
    DEFAULT_TICK_SECONDS, SCORE_FIELD_MIN, SCORE_FIELD_MAX,
    MAX_COMMAND_HISTORY, TECHNIQUE_POINTS
)

__all__ = [
    "fmt_mmss", "fmt_remaining", "now_ms", "setup_logging",
    "APP_TITLE", "DEFAULT_MATCH_DURATION_SECONDS", "MIN_MATCH_DURATION_SECONDS",
    "DEFAULT_TICK_SECONDS", "SCORE_FIELD_MIN", "SCORE_FIELD_MAX",
    "MAX_COMMAND_HISTORY", "TECHNIQUE_POINTS"
]
