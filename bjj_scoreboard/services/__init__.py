"""
Services package for the BJJ Scoreboard.

This package contains competitor sources, undoable match commands, the
driving loop and the factory that wires them together.
"""
from .competitor_generator import (
    CompetitorGenerator, RandomCompetitorGenerator, RosterFileGenerator, RosterError
)
from .match_commands import (
    Command, StartMatchCommand, StopMatchCommand, AddScoreCommand,
    RemoveScoreCommand, SetWinnerCommand, ClearWinnerCommand, MatchCommandManager
)
from .match_runner import MatchRunner
from .service_factory import ServiceFactory

__all__ = [
    "CompetitorGenerator", "RandomCompetitorGenerator", "RosterFileGenerator", "RosterError",
    "Command", "StartMatchCommand", "StopMatchCommand", "AddScoreCommand",
    "RemoveScoreCommand", "SetWinnerCommand", "ClearWinnerCommand", "MatchCommandManager",
    "MatchRunner", "ServiceFactory"
]
