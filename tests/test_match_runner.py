import unittest

from bjj_scoreboard.models import (
    Competitor, CompetitorNumber, Match, MatchTimer, Points, Team, WinMethod
)
from bjj_scoreboard.services import MatchRunner


class MatchRunnerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.now = 0
        self.match = Match(
            Competitor("Ana", "Silva", Team(name="Alliance")),
            Competitor("Bia", "Costa", Team(name="Checkmat")),
            duration_seconds=5,
            timer=MatchTimer(clock=lambda: self.now),
        )

    def _sleep(self, seconds: float) -> None:
        self.now += int(seconds * 1000)

    def test_runs_until_timer_expires(self) -> None:
        rendered = []
        runner = MatchRunner(self.match, sleep=self._sleep, on_tick=lambda m: rendered.append(m.render()))

        ticks = runner.run()

        self.assertEqual(ticks, 5)
        self.assertTrue(self.match.is_complete())
        self.assertFalse(self.match.is_running)
        self.assertEqual(len(rendered), 5)
        self.assertTrue(rendered[-1].endswith("00:00\n"))

    def test_on_tick_can_score(self) -> None:
        runner = MatchRunner(
            self.match,
            sleep=self._sleep,
            on_tick=lambda m: m.add_score(Points.points(2), CompetitorNumber.ONE),
        )
        runner.run()
        self.assertEqual(self.match.score.competitor_one.points, 10)

    def test_winner_ends_run_early(self) -> None:
        def submit(m: Match) -> None:
            m.set_winner(CompetitorNumber.TWO, WinMethod.SUBMISSION)

        ticks = MatchRunner(self.match, sleep=self._sleep, on_tick=submit).run()

        self.assertEqual(ticks, 1)
        self.assertEqual(self.match.remaining(), 4000)

    def test_max_ticks_pauses_match(self) -> None:
        ticks = MatchRunner(self.match, sleep=self._sleep).run(max_ticks=2)

        self.assertEqual(ticks, 2)
        self.assertFalse(self.match.is_running)
        self.assertFalse(self.match.is_complete())
        self.assertEqual(self.match.remaining(), 3000)

    def test_timer_stopped_when_callback_raises(self) -> None:
        def boom(m: Match) -> None:
            raise RuntimeError("display failed")

        with self.assertRaises(RuntimeError):
            MatchRunner(self.match, sleep=self._sleep, on_tick=boom).run()
        self.assertFalse(self.match.is_running)


if __name__ == "__main__":
    unittest.main()
