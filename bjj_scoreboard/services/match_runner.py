"""
Driving loop for a BJJ Scoreboard match.

The runner is the external collaborator that starts the clock, polls for
completion once per tick and hands each tick to a display callback. The
match itself never ticks on its own.
"""
import logging
import time
from typing import Callable, Optional

from ..models import Match
from ..utils import DEFAULT_TICK_SECONDS

logger = logging.getLogger(__name__)


class MatchRunner:
    """Runs a match tick by tick until it completes."""

    def __init__(
        self,
        match: Match,
        sleep: Callable[[float], None] = time.sleep,
        tick_seconds: float = DEFAULT_TICK_SECONDS,
        on_tick: Optional[Callable[[Match], None]] = None,
    ):
        self.match = match
        self.sleep = sleep
        self.tick_seconds = tick_seconds
        self.on_tick = on_tick

    def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Start the match and tick until it completes.

        Args:
            max_ticks: Optional cap on ticks; the match is paused when it is reached

        Returns:
            Number of ticks run
        """
        ticks = 0
        self.match.start()
        logger.info("Match started: %s vs %s",
                    self.match.competitor_one.name, self.match.competitor_two.name)
        try:
            while not self.match.is_complete():
                if max_ticks is not None and ticks >= max_ticks:
                    break
                self.sleep(self.tick_seconds)
                ticks += 1
                if self.on_tick is not None:
                    self.on_tick(self.match)
        finally:
            self.match.stop()

        if self.match.is_complete():
            logger.info("Match complete after %d tick(s), winner: %s", ticks, self.match.winner)
        else:
            logger.info("Match paused after %d tick(s)", ticks)
        return ticks
