"""
Service Factory for wiring scoreboard components.

This module builds matches, runners and command managers with their
collaborators injected, so callers only choose where competitors come from.
"""
from typing import Callable, Dict, Optional

from ..models import Match, MatchTimer
from ..utils import DEFAULT_MATCH_DURATION_SECONDS, MAX_COMMAND_HISTORY
from .competitor_generator import CompetitorGenerator, RandomCompetitorGenerator
from .match_commands import MatchCommandManager
from .match_runner import MatchRunner


class ServiceFactory:
    """
    Factory for creating scoreboard services with dependency injection.
    """

    def __init__(
        self,
        generator: Optional[CompetitorGenerator] = None,
        duration_seconds: int = DEFAULT_MATCH_DURATION_SECONDS,
        clock: Optional[Callable[[], int]] = None,
    ):
        """
        Initialize factory.

        Args:
            generator: Source of competitors; random fixtures when omitted
            duration_seconds: Length of every match created
            clock: Optional monotonic millisecond clock for the timers
        """
        self._generator = generator
        self.duration_seconds = duration_seconds
        self.clock = clock

    def create_match(self) -> Match:
        """
        Create a not-yet-started match from the configured generator.

        Returns:
            New Match instance
        """
        competitor_one, competitor_two = self._get_generator().pair()
        return Match(
            competitor_one,
            competitor_two,
            duration_seconds=self.duration_seconds,
            timer=MatchTimer(clock=self.clock),
        )

    def create_command_manager(
        self, match: Match, max_history: int = MAX_COMMAND_HISTORY
    ) -> MatchCommandManager:
        return MatchCommandManager(match, max_history=max_history)

    def create_runner(self, match: Match, **kwargs) -> MatchRunner:
        """Create a MatchRunner; keyword arguments are passed through."""
        return MatchRunner(match, **kwargs)

    def create_complete_service_suite(self) -> Dict[str, object]:
        """
        Create a match with its command manager and runner.

        Returns:
            Dictionary containing all configured services
        """
        match = self.create_match()
        return {
            'match': match,
            'commands': self.create_command_manager(match),
            'runner': self.create_runner(match),
        }

    def configure_generator(self, generator: CompetitorGenerator) -> None:
        """Swap the competitor source."""
        self._generator = generator

    def _get_generator(self) -> CompetitorGenerator:
        if self._generator is None:
            self._generator = RandomCompetitorGenerator()
        return self._generator
