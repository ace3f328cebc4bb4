"""
Constants for the BJJ Scoreboard application.

This module contains configuration constants used throughout the application.
"""

# Application metadata
APP_TITLE = "BJJ Scoreboard"

# Match timing defaults
DEFAULT_MATCH_DURATION_SECONDS = 300
MIN_MATCH_DURATION_SECONDS = 1
DEFAULT_TICK_SECONDS = 1.0

# Score tallies are 8-bit counters; arithmetic clamps instead of wrapping
SCORE_FIELD_MIN = 0
SCORE_FIELD_MAX = 255

# Undo/redo
MAX_COMMAND_HISTORY = 50

# Points awarded per technique (IBJJF scale)
TECHNIQUE_POINTS = {
    "takedown": 2,
    "sweep": 2,
    "knee_on_belly": 2,
    "guard_pass": 3,
    "mount": 4,
    "back_control": 4,
}
