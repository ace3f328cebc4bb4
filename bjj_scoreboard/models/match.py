"""
Match model for the BJJ Scoreboard application.

A Match owns its two competitors, the score and the timer, and exposes the
lifecycle used by a scoreboard operator: start/stop the clock, adjust the
score, declare a winner and render the current snapshot.
"""
import logging
from typing import Optional, Tuple

from .competitor import Competitor
from .match_timer import MatchTimer
from .score import CompetitorNumber, MatchScore, Points, WinMethod
from ..utils import DEFAULT_MATCH_DURATION_SECONDS

logger = logging.getLogger(__name__)


class Match:
    """
    A single match between two competitors.

    The match is complete once the timer expires or a winner is declared.
    Score changes are still accepted after completion so officials can make
    late corrections; they are logged for auditing.
    """

    def __init__(
        self,
        competitor_one: Competitor,
        competitor_two: Competitor,
        duration_seconds: int = DEFAULT_MATCH_DURATION_SECONDS,
        timer: Optional[MatchTimer] = None,
    ):
        self.competitor_one = competitor_one
        self.competitor_two = competitor_two
        self.score = MatchScore()
        self.timer = timer if timer is not None else MatchTimer()
        if duration_seconds != self.timer.duration_seconds:
            self.timer.configure(duration_seconds)

    # ------------------------------------------------------------------
    # Timer controls
    # ------------------------------------------------------------------
    def start(self) -> None:
        self.timer.start()

    def stop(self) -> None:
        self.timer.stop()

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------
    def add_score(self, points: Points, competitor: CompetitorNumber) -> None:
        self._note_if_complete("add", points, competitor)
        self.score.add(points, competitor)

    def remove_score(self, points: Points, competitor: CompetitorNumber) -> None:
        self._note_if_complete("remove", points, competitor)
        self.score.subtract(points, competitor)

    def set_winner(self, competitor: CompetitorNumber, method: WinMethod) -> None:
        self.score.set_winner(competitor, method)

    def clear_winner(self) -> None:
        self.score.clear_winner()

    def _note_if_complete(self, action: str, points: Points, competitor: CompetitorNumber) -> None:
        if self.is_complete():
            logger.info(
                "Score %s on completed match: competitor %s %d %s",
                action, competitor.name, points.amount, points.kind.value,
            )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self.timer.running

    @property
    def winner(self) -> Optional[Tuple[CompetitorNumber, WinMethod]]:
        return self.score.winner

    def competitor(self, number: CompetitorNumber) -> Competitor:
        if number is CompetitorNumber.ONE:
            return self.competitor_one
        return self.competitor_two

    def remaining(self) -> int:
        """Milliseconds left on the match clock."""
        return self.timer.remaining()

    def is_complete(self) -> bool:
        return self.timer.is_complete() or self.score.is_winner()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self) -> str:
        """
        Produce the text snapshot shown on the scoreboard.

        Returns:
            One line per competitor followed by the remaining time, e.g.::

                Ana Silva: Pts: 2 - Adv: 0 - Pen: 0
                Bia Costa: Pts: 0 - Adv: 1 - Pen: 0
                04:58
        """
        lines = [
            f"{self.competitor_one.name}: {self.score.competitor_one}",
            f"{self.competitor_two.name}: {self.score.competitor_two}",
            str(self.timer),
        ]
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Match({self.competitor_one.name!r} vs {self.competitor_two.name!r}, "
            f"remaining={self.remaining()}ms, winner={self.winner})"
        )
