"""
Models package for the BJJ Scoreboard.

This package contains the core match, score, timer and competitor models.
"""
from .competitor import Team, Competitor
from .score import (
    CompetitorNumber, PointsKind, Points, WinMethod, CompetitorScore, MatchScore
)
from .match_timer import MatchTimer
from .match import Match

__all__ = [
    "Team", "Competitor", "CompetitorNumber", "PointsKind", "Points", "WinMethod",
    "CompetitorScore", "MatchScore", "MatchTimer", "Match"
]
