"""
BJJ Scoreboard

Match timer and score tracking for a single grappling match: two competitors,
a countdown clock that can be paused, point/advantage/penalty tallies and an
explicit winner record.
"""
from .models import (
    Team, Competitor, CompetitorNumber, Points, WinMethod, MatchTimer, Match
)
from .services import (
    RandomCompetitorGenerator, RosterFileGenerator, MatchCommandManager,
    MatchRunner, ServiceFactory
)
from .utils import fmt_mmss, now_ms, setup_logging, APP_TITLE

__version__ = "1.0.0"

__all__ = [
    "Team", "Competitor", "CompetitorNumber", "Points", "WinMethod", "MatchTimer", "Match",
    "RandomCompetitorGenerator", "RosterFileGenerator", "MatchCommandManager",
    "MatchRunner", "ServiceFactory", "fmt_mmss", "now_ms", "setup_logging", "APP_TITLE"
]
