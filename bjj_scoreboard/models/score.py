"""
Score models for the BJJ Scoreboard application.

This module contains the per-competitor tally (CompetitorScore), the match-wide
score with its optional winner record (MatchScore), and the small value types
used to address them.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from ..utils import SCORE_FIELD_MAX, SCORE_FIELD_MIN, TECHNIQUE_POINTS

logger = logging.getLogger(__name__)


class CompetitorNumber(Enum):
    """Which side of the match an operation targets."""
    ONE = 1
    TWO = 2

    def other(self) -> 'CompetitorNumber':
        return CompetitorNumber.TWO if self is CompetitorNumber.ONE else CompetitorNumber.ONE


class PointsKind(Enum):
    """Score field selected by a Points value."""
    POINTS = "points"
    ADVANTAGES = "advantages"
    PENALTIES = "penalties"
    MEDICAL = "medical"


class WinMethod(Enum):
    """Reason a match ended."""
    SUBMISSION = "Submission"
    POINTS = "Points"
    REF_DECISION = "Referee Decision"
    DISQUALIFICATION = "Disqualification"
    WALK_OVER = "Walk Over"
    DOCTOR_STOPPAGE = "Doctor Stoppage"


@dataclass(frozen=True)
class Points:
    """
    An amount applied to one score field.

    Use the named constructors rather than building one directly:

        >>> Points.points(2)
        Points(kind=<PointsKind.POINTS: 'points'>, amount=2)

    Raises:
        ValueError: If the amount does not fit an 8-bit counter
    """
    kind: PointsKind
    amount: int

    def __post_init__(self) -> None:
        if not isinstance(self.kind, PointsKind):
            raise ValueError(f"Unknown score field: {self.kind!r}")
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError(f"Amount must be a whole number, got {self.amount!r}")
        if not SCORE_FIELD_MIN <= self.amount <= SCORE_FIELD_MAX:
            raise ValueError(
                f"Amount must be between {SCORE_FIELD_MIN} and {SCORE_FIELD_MAX}, got {self.amount}"
            )

    @classmethod
    def points(cls, amount: int) -> 'Points':
        return cls(PointsKind.POINTS, amount)

    @classmethod
    def advantages(cls, amount: int) -> 'Points':
        return cls(PointsKind.ADVANTAGES, amount)

    @classmethod
    def penalties(cls, amount: int) -> 'Points':
        return cls(PointsKind.PENALTIES, amount)

    @classmethod
    def medical(cls, amount: int) -> 'Points':
        return cls(PointsKind.MEDICAL, amount)

    @classmethod
    def for_technique(cls, technique: str) -> 'Points':
        """
        Points awarded for a scoring position, e.g. ``Points.for_technique("mount")``.

        Raises:
            ValueError: If the technique is not in TECHNIQUE_POINTS
        """
        key = technique.strip().lower().replace(" ", "_").replace("-", "_")
        if key not in TECHNIQUE_POINTS:
            raise ValueError(f"Unknown technique: {technique!r}")
        return cls.points(TECHNIQUE_POINTS[key])


@dataclass
class CompetitorScore:
    """
    Point, advantage, penalty and medical tallies for one competitor.

    Every field is clamped to the 8-bit range: additions saturate at
    SCORE_FIELD_MAX and subtractions floor at zero.
    """
    points: int = 0
    advantages: int = 0
    penalties: int = 0
    medical: int = 0

    def add(self, points: Points) -> None:
        """Increase the selected field, saturating at SCORE_FIELD_MAX."""
        name = points.kind.value
        current = getattr(self, name)
        total = current + points.amount
        if total > SCORE_FIELD_MAX:
            logger.warning("%s clamped at %d (requested %d)", name, SCORE_FIELD_MAX, total)
            total = SCORE_FIELD_MAX
        setattr(self, name, total)

    def subtract(self, points: Points) -> None:
        """Decrease the selected field, flooring at zero."""
        name = points.kind.value
        current = getattr(self, name)
        total = current - points.amount
        if total < SCORE_FIELD_MIN:
            logger.warning("%s floored at %d (requested %d)", name, SCORE_FIELD_MIN, total)
            total = SCORE_FIELD_MIN
        setattr(self, name, total)

    def to_dict(self) -> Dict[str, int]:
        return {
            "points": self.points,
            "advantages": self.advantages,
            "penalties": self.penalties,
            "medical": self.medical,
        }

    def __str__(self) -> str:
        return f"Pts: {self.points} - Adv: {self.advantages} - Pen: {self.penalties}"


@dataclass
class MatchScore:
    """
    Both competitors' tallies plus the optional winner record.

    Attributes:
        competitor_one: Tally for CompetitorNumber.ONE
        competitor_two: Tally for CompetitorNumber.TWO
        winner: (competitor, method) once the match has been decided explicitly
    """
    competitor_one: CompetitorScore = field(default_factory=CompetitorScore)
    competitor_two: CompetitorScore = field(default_factory=CompetitorScore)
    winner: Optional[Tuple[CompetitorNumber, WinMethod]] = None

    def score_for(self, competitor: CompetitorNumber) -> CompetitorScore:
        if competitor is CompetitorNumber.ONE:
            return self.competitor_one
        return self.competitor_two

    def add(self, points: Points, competitor: CompetitorNumber) -> None:
        self.score_for(competitor).add(points)
        logger.debug("Competitor %s +%d %s", competitor.name, points.amount, points.kind.value)

    def subtract(self, points: Points, competitor: CompetitorNumber) -> None:
        self.score_for(competitor).subtract(points)
        logger.debug("Competitor %s -%d %s", competitor.name, points.amount, points.kind.value)

    def is_winner(self) -> bool:
        return self.winner is not None

    def set_winner(self, competitor: CompetitorNumber, method: WinMethod) -> None:
        self.winner = (competitor, method)
        logger.info("Winner set: competitor %s by %s", competitor.name, method.value)

    def clear_winner(self) -> None:
        if self.winner is not None:
            logger.info("Winner cleared")
        self.winner = None

    def leader(self) -> Optional[CompetitorNumber]:
        """
        Return the competitor ahead on the standard tiebreak order.

        Points decide first, then advantages, then fewer penalties.

        Returns:
            The leading CompetitorNumber, or None when the tallies are level
        """
        one, two = self.competitor_one, self.competitor_two
        key_one = (one.points, one.advantages, -one.penalties)
        key_two = (two.points, two.advantages, -two.penalties)
        if key_one == key_two:
            return None
        return CompetitorNumber.ONE if key_one > key_two else CompetitorNumber.TWO
