"""
Unit tests for the Team and Competitor models.
"""
import dataclasses
import unittest

from bjj_scoreboard.models import Competitor, Team


class TestCompetitorModel(unittest.TestCase):
    """Test cases for Competitor and Team."""

    def setUp(self) -> None:
        """Set up test fixtures."""
        self.team = Team(name="Gracie Barra", logo="gb.png")

    def test_team_defaults(self) -> None:
        team = Team(name="Atos")
        self.assertEqual(team.logo, "")

    def test_competitor_name(self) -> None:
        competitor = Competitor("Marcus", "Almeida", self.team)
        self.assertEqual(competitor.name, "Marcus Almeida")
        self.assertEqual(str(competitor), "Marcus Almeida")
        self.assertEqual(competitor.flag, "")

    def test_competitors_do_not_share_team_instance(self) -> None:
        one = Competitor("Ana", "Silva", self.team)
        two = Competitor("Bia", "Costa", self.team)

        self.assertEqual(one.team, two.team)
        self.assertIsNot(one.team, two.team)
        self.assertIsNot(one.team, self.team)

    def test_models_are_immutable(self) -> None:
        competitor = Competitor("Ana", "Silva", self.team)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            competitor.first_name = "Bia"
        with self.assertRaises(dataclasses.FrozenInstanceError):
            competitor.team.name = "Other"

    def test_dict_conversion(self) -> None:
        competitor = Competitor("Ana", "Silva", self.team, flag="BR")
        data = competitor.to_dict()

        self.assertEqual(data["team"], {"name": "Gracie Barra", "logo": "gb.png"})
        self.assertEqual(data["flag"], "BR")
        self.assertEqual(Competitor.from_dict(data), competitor)

    def test_from_dict_defaults(self) -> None:
        competitor = Competitor.from_dict({"first_name": "Ana", "last_name": "Silva"})
        self.assertEqual(competitor.team, Team(name=""))
        self.assertEqual(competitor.flag, "")


if __name__ == "__main__":
    unittest.main()
