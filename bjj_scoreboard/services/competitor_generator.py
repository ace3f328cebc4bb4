"""
Competitor generators for the BJJ Scoreboard application.

A generator supplies the Competitor/Team values a Match is built from. The
random generator produces fixture data for demos and tests; the roster file
generator reads real entrants from a JSON file.
"""
import json
import logging
import os
import random
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..models import Competitor, Team

logger = logging.getLogger(__name__)


class RosterError(ValueError):
    """Raised when a roster file is readable but malformed."""
    pass


class CompetitorGenerator(ABC):
    """Abstract source of competitors for a match."""

    @abstractmethod
    def competitors(self) -> List[Competitor]:
        """Return every competitor this generator can supply."""
        pass

    def pair(self) -> Tuple[Competitor, Competitor]:
        """
        Return two competitors to face each other.

        Raises:
            RosterError: If fewer than two competitors are available
        """
        available = self.competitors()
        if len(available) < 2:
            raise RosterError(f"Need at least two competitors, found {len(available)}")
        return available[0], available[1]


class RandomCompetitorGenerator(CompetitorGenerator):
    """Generates fixture competitors from built-in name pools."""

    FIRST_NAMES = [
        "Ana", "Bruno", "Carla", "Diego", "Elena", "Felipe", "Gabriela", "Hugo",
        "Isabela", "Joao", "Karina", "Lucas", "Marina", "Nicolas", "Olivia", "Rafael",
    ]
    LAST_NAMES = [
        "Almeida", "Barbosa", "Costa", "Dias", "Ferreira", "Gomes", "Lima", "Machado",
        "Nunes", "Oliveira", "Pereira", "Ribeiro", "Santos", "Silva", "Souza", "Teixeira",
    ]
    TEAM_PREFIXES = ["Alliance", "Atos", "Checkmat", "Nova", "Gracie", "Unity", "Zenith"]
    TEAM_SUFFIXES = ["BJJ", "Jiu-Jitsu", "Academy", "Fight Team", "Martial Arts"]

    def __init__(self, count: int = 2, seed: Optional[int] = None):
        """
        Initialize the generator.

        Args:
            count: Number of competitors produced by competitors()
            seed: Optional seed for reproducible fixtures
        """
        self.count = max(2, count)
        self._rng = random.Random(seed)

    def random_team(self) -> Team:
        return Team(
            name=f"{self._rng.choice(self.TEAM_PREFIXES)} {self._rng.choice(self.TEAM_SUFFIXES)}"
        )

    def random_competitor(self, team: Optional[Team] = None) -> Competitor:
        return Competitor(
            first_name=self._rng.choice(self.FIRST_NAMES),
            last_name=self._rng.choice(self.LAST_NAMES),
            team=team if team is not None else self.random_team(),
        )

    def competitors(self) -> List[Competitor]:
        return [self.random_competitor() for _ in range(self.count)]

    def pair(self) -> Tuple[Competitor, Competitor]:
        """Return two random competitors from different teams."""
        first = self.random_competitor()
        team = self.random_team()
        while team.name == first.team.name:
            team = self.random_team()
        return first, self.random_competitor(team)


class RosterFileGenerator(CompetitorGenerator):
    """
    Reads competitors from a JSON roster file.

    Expected format::

        {"competitors": [
            {"first_name": "Ana", "last_name": "Silva", "flag": "BR",
             "team": {"name": "Alliance", "logo": ""}}
        ]}
    """

    def __init__(self, file_path: str):
        self.file_path = file_path

    def competitors(self) -> List[Competitor]:
        """
        Load every competitor from the roster file.

        Raises:
            FileNotFoundError: If the roster file doesn't exist
            RosterError: If the file is not valid JSON or an entry is incomplete
        """
        if not os.path.exists(self.file_path):
            raise FileNotFoundError(f"Roster file not found: {self.file_path}")

        with open(self.file_path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise RosterError(f"Invalid roster JSON in {self.file_path}: {e}") from e

        entries = data.get("competitors") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise RosterError("Roster must contain a 'competitors' list")

        competitors = []
        for index, entry in enumerate(entries):
            try:
                competitors.append(Competitor.from_dict(entry))
            except (KeyError, TypeError, AttributeError) as e:
                raise RosterError(f"Invalid competitor at index {index}: {e}") from e

        logger.debug("Loaded %d competitors from %s", len(competitors), self.file_path)
        return competitors
