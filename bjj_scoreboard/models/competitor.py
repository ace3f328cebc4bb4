"""
Competitor models for the BJJ Scoreboard application.

This module contains the Team and Competitor dataclasses which describe the
two sides of a match. Both are immutable once constructed.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Team:
    """
    Academy or team a competitor represents.

    Attributes:
        name: Team display name
        logo: Path or URL of the team logo (empty when unset)
    """
    name: str
    logo: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"name": self.name, "logo": self.logo}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Team':
        """Create from dictionary for JSON deserialization."""
        if not data:
            return cls(name="")
        return cls(name=data.get("name", ""), logo=data.get("logo") or "")


@dataclass(frozen=True)
class Competitor:
    """
    A single athlete in a match.

    The team is copied on construction so two competitors never alias the
    same Team instance.

    Attributes:
        first_name: Given name
        last_name: Family name
        team: The competitor's own Team copy
        flag: Country flag code or image path (empty when unset)
    """
    first_name: str
    last_name: str
    team: Team = field(default_factory=lambda: Team(name=""))
    flag: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "team", replace(self.team))

    @property
    def name(self) -> str:
        """Full display name."""
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "team": self.team.to_dict(),
            "flag": self.flag,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Competitor':
        """Create from dictionary for JSON deserialization."""
        return cls(
            first_name=data["first_name"],
            last_name=data["last_name"],
            team=Team.from_dict(data.get("team")),
            flag=data.get("flag") or "",
        )

    def __str__(self) -> str:
        return self.name
