"""
MatchTimer model for the BJJ Scoreboard application.

The timer is a countdown that can be paused. It never ticks on its own: remaining time is
computed on demand from the time folded in from closed running intervals plus
the live interval, read from a monotonic clock.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..utils import (
    DEFAULT_MATCH_DURATION_SECONDS, MIN_MATCH_DURATION_SECONDS, fmt_remaining, now_ms
)

logger = logging.getLogger(__name__)


@dataclass
class MatchTimer:
    """
    Countdown timer for a single match.

    The timer is running exactly while an interval is open, so `running` is
    derived from `last_running_at` rather than stored.

    Attributes:
        last_running_at: Clock reading (ms) when the current interval opened; None when stopped
        duration_seconds: Configured match length
        elapsed_milliseconds: Time folded in from closed running intervals
        clock: Optional callable returning monotonic milliseconds; defaults to now_ms
    """
    last_running_at: Optional[int] = None
    duration_seconds: int = DEFAULT_MATCH_DURATION_SECONDS
    elapsed_milliseconds: int = 0
    clock: Optional[Callable[[], int]] = field(default=None, repr=False, compare=False)

    @property
    def running(self) -> bool:
        """Whether the countdown is actively decrementing."""
        return self.last_running_at is not None

    def _now(self) -> int:
        if self.clock is not None:
            return self.clock()
        return now_ms()

    # ------------------------------------------------------------------
    # Configuration helpers
    # ------------------------------------------------------------------
    def configure(self, duration_seconds: int) -> None:
        """Set the match length before any time has been consumed.

        Raises:
            ValueError: If the timer is running, has already consumed time,
                        or the duration is below the minimum.
        """
        if self.running or self.elapsed_milliseconds > 0:
            raise ValueError("Cannot configure timer after the match has started")

        seconds = int(duration_seconds)
        if seconds < MIN_MATCH_DURATION_SECONDS:
            raise ValueError(
                f"Match duration must be at least {MIN_MATCH_DURATION_SECONDS} second(s)"
            )

        self.duration_seconds = seconds
        logger.debug("Timer configured for %ds", seconds)

    def reset(self) -> None:
        """Stop the timer and discard all consumed time."""
        self.last_running_at = None
        self.elapsed_milliseconds = 0

    # ------------------------------------------------------------------
    # Core timer controls
    # ------------------------------------------------------------------
    def start(self) -> None:
        """Open a running interval. Does nothing if one is already open."""
        if self.last_running_at is not None:
            return

        self.last_running_at = self._now()
        logger.debug("Timer started with %dms remaining", self.remaining())

    def stop(self) -> None:
        """Close the running interval and fold its elapsed time into the total."""
        if self.last_running_at is not None:
            self.elapsed_milliseconds += max(0, self._now() - self.last_running_at)
            self.last_running_at = None
            logger.debug("Timer stopped with %dms remaining", self.remaining())

    # ------------------------------------------------------------------
    # Query helpers
    # ------------------------------------------------------------------
    def running_for(self) -> int:
        """Milliseconds elapsed in the open interval, or 0 when stopped."""
        if self.last_running_at is None:
            return 0
        return max(0, self._now() - self.last_running_at)

    def remaining(self) -> int:
        """Milliseconds left on the clock, never below zero.

        Only whole seconds from closed intervals are counted; the open
        interval counts to the millisecond.
        """
        folded = (self.elapsed_milliseconds // 1000) * 1000
        return max(0, self.duration_seconds * 1000 - folded - self.running_for())

    def is_complete(self) -> bool:
        return self.remaining() == 0

    def __str__(self) -> str:
        return fmt_remaining(self.remaining())
