"""
Undoable scoreboard actions.

Every operator action on a match (clock control, score entry, winner call) is
wrapped in a command that remembers just enough of the prior state to reverse
itself. Undo only touches what the command changed, so edits made directly on
the match in the meantime (e.g. from a runner callback) survive.
"""
import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, List, Optional, Tuple

from ..models import CompetitorNumber, Match, Points, WinMethod
from ..utils import MAX_COMMAND_HISTORY

logger = logging.getLogger(__name__)


class Command(ABC):
    """An operator action on a match that can be reversed."""

    # Commands that only make sense while the match is still live
    requires_live_match = False

    def __init__(self, match: Match):
        self.match = match

    @abstractmethod
    def execute(self) -> bool:
        """Apply the action; False means nothing was changed."""
        pass

    @abstractmethod
    def undo(self) -> bool:
        """Reverse the last execute; False if there is nothing to reverse."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass


class StartMatchCommand(Command):
    """Start the match clock."""

    requires_live_match = True

    def __init__(self, match: Match):
        super().__init__(match)
        self._was_running = False

    def execute(self) -> bool:
        if self.match.is_complete():
            return False
        self._was_running = self.match.is_running
        self.match.start()
        return True

    def undo(self) -> bool:
        if not self._was_running:
            self.match.stop()
        return True

    @property
    def description(self) -> str:
        return "Start Match"


class StopMatchCommand(Command):
    """Pause the match clock."""

    def __init__(self, match: Match):
        super().__init__(match)
        self._was_running = False

    def execute(self) -> bool:
        self._was_running = self.match.is_running
        self.match.stop()
        return True

    def undo(self) -> bool:
        if self._was_running:
            self.match.start()
        return True

    @property
    def description(self) -> str:
        return "Stop Match"


class _ScoreFieldCommand(Command):
    """Changes one field of one competitor's tally and restores only that field."""

    sign = "+"

    def __init__(self, match: Match, points: Points, competitor: CompetitorNumber):
        super().__init__(match)
        self.points = points
        self.competitor = competitor
        self._previous_value: Optional[int] = None

    def _field_value(self) -> int:
        return getattr(self.match.score.score_for(self.competitor), self.points.kind.value)

    def execute(self) -> bool:
        self._previous_value = self._field_value()
        self._apply()
        return True

    def undo(self) -> bool:
        if self._previous_value is None:
            return False
        tally = self.match.score.score_for(self.competitor)
        setattr(tally, self.points.kind.value, self._previous_value)
        self._previous_value = None
        return True

    @abstractmethod
    def _apply(self) -> None:
        pass

    @property
    def description(self) -> str:
        name = self.match.competitor(self.competitor).name
        return f"{self.sign}{self.points.amount} {self.points.kind.value} → {name}"


class AddScoreCommand(_ScoreFieldCommand):
    """Award points, advantages, penalties or a medical call."""

    def _apply(self) -> None:
        self.match.add_score(self.points, self.competitor)


class RemoveScoreCommand(_ScoreFieldCommand):
    """Take back a score entry."""

    sign = "-"

    def _apply(self) -> None:
        self.match.remove_score(self.points, self.competitor)


class _WinnerCommand(Command):
    """Changes the winner record and restores the previous one on undo."""

    _UNSET = object()

    def __init__(self, match: Match):
        super().__init__(match)
        self._previous_winner = self._UNSET

    def execute(self) -> bool:
        self._previous_winner = self.match.winner
        self._apply()
        return True

    def undo(self) -> bool:
        if self._previous_winner is self._UNSET:
            return False
        previous: Optional[Tuple[CompetitorNumber, WinMethod]] = self._previous_winner
        if previous is None:
            self.match.clear_winner()
        else:
            self.match.set_winner(*previous)
        self._previous_winner = self._UNSET
        return True

    @abstractmethod
    def _apply(self) -> None:
        pass


class SetWinnerCommand(_WinnerCommand):
    """Declare the winner of the match."""

    def __init__(self, match: Match, competitor: CompetitorNumber, method: WinMethod):
        super().__init__(match)
        self.competitor = competitor
        self.method = method

    def _apply(self) -> None:
        self.match.set_winner(self.competitor, self.method)

    @property
    def description(self) -> str:
        return f"Winner {self.match.competitor(self.competitor).name} by {self.method.value}"


class ClearWinnerCommand(_WinnerCommand):
    """Withdraw a winner call, e.g. after a referee overturns a decision."""

    def _apply(self) -> None:
        self.match.clear_winner()

    @property
    def description(self) -> str:
        return "Clear Winner"


class MatchCommandManager:
    """
    Operator console for one match with undo/redo.

    The manager owns the match's action history. Actions are issued through
    the helpers (``add_score``, ``set_winner``, ...) or as prebuilt commands
    via ``execute``. Restarting the clock is refused once the match is
    complete, including when redoing an earlier start.
    """

    def __init__(self, match: Match, max_history: int = MAX_COMMAND_HISTORY):
        self.match = match
        self._done: Deque[Command] = deque(maxlen=max(1, max_history))
        self._undone: List[Command] = []

    def _allowed(self, command: Command) -> bool:
        if command.match is not self.match:
            logger.warning("Rejected %s: command targets a different match", command.description)
            return False
        if command.requires_live_match and self.match.is_complete():
            logger.info("Rejected %s: match is complete", command.description)
            return False
        return True

    def execute(self, command: Command) -> bool:
        """Run a command and record it; a new action discards the redo stack."""
        if not self._allowed(command) or not command.execute():
            return False
        self._done.append(command)
        self._undone.clear()
        logger.debug("Executed: %s", command.description)
        return True

    # ------------------------------------------------------------------
    # Operator actions
    # ------------------------------------------------------------------
    def start(self) -> bool:
        return self.execute(StartMatchCommand(self.match))

    def stop(self) -> bool:
        return self.execute(StopMatchCommand(self.match))

    def add_score(self, points: Points, competitor: CompetitorNumber) -> bool:
        return self.execute(AddScoreCommand(self.match, points, competitor))

    def remove_score(self, points: Points, competitor: CompetitorNumber) -> bool:
        return self.execute(RemoveScoreCommand(self.match, points, competitor))

    def set_winner(self, competitor: CompetitorNumber, method: WinMethod) -> bool:
        return self.execute(SetWinnerCommand(self.match, competitor, method))

    def clear_winner(self) -> bool:
        return self.execute(ClearWinnerCommand(self.match))

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------
    def undo(self) -> bool:
        if not self._done:
            return False
        command = self._done.pop()
        if not command.undo():
            self._done.append(command)
            return False
        self._undone.append(command)
        logger.info("Undone: %s", command.description)
        return True

    def redo(self) -> bool:
        if not self._undone:
            return False
        command = self._undone[-1]
        if not self._allowed(command) or not command.execute():
            return False
        self._undone.pop()
        self._done.append(command)
        logger.info("Redone: %s", command.description)
        return True

    def can_undo(self) -> bool:
        return bool(self._done)

    def can_redo(self) -> bool:
        return bool(self._undone)

    def history(self) -> List[str]:
        """Descriptions of the actions that can be undone, oldest first."""
        return [command.description for command in self._done]

    def clear(self) -> None:
        self._done.clear()
        self._undone.clear()
