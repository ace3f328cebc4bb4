import unittest

from bjj_scoreboard.models import Competitor, Match, Team
from bjj_scoreboard.services import (
    CompetitorGenerator, MatchCommandManager, MatchRunner, RandomCompetitorGenerator,
    ServiceFactory
)


class FixedGenerator(CompetitorGenerator):
    def competitors(self):
        return [
            Competitor("Ana", "Silva", Team(name="Alliance")),
            Competitor("Bia", "Costa", Team(name="Checkmat")),
        ]


class ServiceFactoryTests(unittest.TestCase):
    def test_create_match_from_generator(self) -> None:
        factory = ServiceFactory(generator=FixedGenerator(), duration_seconds=360, clock=lambda: 0)
        match = factory.create_match()

        self.assertIsInstance(match, Match)
        self.assertEqual(match.competitor_one.name, "Ana Silva")
        self.assertEqual(match.competitor_two.name, "Bia Costa")
        self.assertEqual(match.remaining(), 360_000)
        self.assertFalse(match.is_running)

    def test_default_generator_is_random(self) -> None:
        factory = ServiceFactory(clock=lambda: 0)
        match = factory.create_match()
        self.assertIsInstance(factory._get_generator(), RandomCompetitorGenerator)
        self.assertNotEqual(match.competitor_one.team.name, match.competitor_two.team.name)

    def test_configure_generator(self) -> None:
        factory = ServiceFactory()
        factory.configure_generator(FixedGenerator())
        self.assertEqual(factory.create_match().competitor_one.first_name, "Ana")

    def test_complete_service_suite(self) -> None:
        suite = ServiceFactory(generator=FixedGenerator()).create_complete_service_suite()

        self.assertIsInstance(suite['match'], Match)
        self.assertIsInstance(suite['commands'], MatchCommandManager)
        self.assertIsInstance(suite['runner'], MatchRunner)
        self.assertIs(suite['runner'].match, suite['match'])
        self.assertIs(suite['commands'].match, suite['match'])


if __name__ == "__main__":
    unittest.main()
