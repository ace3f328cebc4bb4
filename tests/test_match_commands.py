"""
Unit tests for undoable match commands.
"""
import unittest

from bjj_scoreboard.models import (
    Competitor, CompetitorNumber, Match, MatchTimer, Points, Team, WinMethod
)
from bjj_scoreboard.services import (
    AddScoreCommand, MatchCommandManager, StartMatchCommand
)


class TestMatchCommands(unittest.TestCase):
    """Test command execute/undo/redo against a live match."""

    def setUp(self) -> None:
        """Set up test fixtures."""
        self.now = 0
        self.match = Match(
            Competitor("Ana", "Silva", Team(name="Alliance")),
            Competitor("Bia", "Costa", Team(name="Checkmat")),
            duration_seconds=60,
            timer=MatchTimer(clock=lambda: self.now),
        )
        self.manager = MatchCommandManager(self.match)

    def test_add_score_undo_redo(self) -> None:
        self.assertTrue(self.manager.add_score(Points.points(2), CompetitorNumber.ONE))
        self.assertEqual(self.match.score.competitor_one.points, 2)

        self.assertTrue(self.manager.undo())
        self.assertEqual(self.match.score.competitor_one.points, 0)
        self.assertTrue(self.manager.can_redo())

        self.assertTrue(self.manager.redo())
        self.assertEqual(self.match.score.competitor_one.points, 2)

    def test_remove_score_undo_restores_clamped_value(self) -> None:
        self.match.add_score(Points.advantages(1), CompetitorNumber.TWO)

        self.manager.remove_score(Points.advantages(3), CompetitorNumber.TWO)
        self.assertEqual(self.match.score.competitor_two.advantages, 0)

        self.manager.undo()
        self.assertEqual(self.match.score.competitor_two.advantages, 1)

    def test_undo_keeps_changes_made_outside_the_manager(self) -> None:
        self.manager.add_score(Points.points(2), CompetitorNumber.ONE)
        self.match.add_score(Points.advantages(1), CompetitorNumber.TWO)
        self.match.add_score(Points.penalties(1), CompetitorNumber.ONE)

        self.manager.undo()

        self.assertEqual(self.match.score.competitor_one.points, 0)
        self.assertEqual(self.match.score.competitor_one.penalties, 1)
        self.assertEqual(self.match.score.competitor_two.advantages, 1)

    def test_winner_undo_keeps_score(self) -> None:
        self.manager.set_winner(CompetitorNumber.TWO, WinMethod.SUBMISSION)
        self.match.add_score(Points.points(2), CompetitorNumber.ONE)
        self.assertTrue(self.match.is_complete())

        self.manager.undo()
        self.assertIsNone(self.match.winner)
        self.assertFalse(self.match.is_complete())
        self.assertEqual(self.match.score.competitor_one.points, 2)

    def test_clear_winner_undo_restores_previous_call(self) -> None:
        self.manager.set_winner(CompetitorNumber.ONE, WinMethod.POINTS)
        self.manager.clear_winner()
        self.assertIsNone(self.match.winner)

        self.manager.undo()
        self.assertEqual(self.match.winner, (CompetitorNumber.ONE, WinMethod.POINTS))

    def test_start_and_stop_undo(self) -> None:
        self.manager.start()
        self.assertTrue(self.match.is_running)

        self.now += 10_000
        self.manager.stop()
        self.assertFalse(self.match.is_running)
        self.assertEqual(self.match.remaining(), 50_000)

        self.manager.undo()
        self.assertTrue(self.match.is_running)

        self.manager.undo()
        self.assertFalse(self.match.is_running)
        self.assertFalse(self.manager.can_undo())

    def test_start_rejected_on_completed_match(self) -> None:
        self.match.set_winner(CompetitorNumber.ONE, WinMethod.WALK_OVER)
        self.assertFalse(self.manager.start())
        self.assertFalse(self.match.is_running)
        self.assertEqual(self.manager.history(), [])

    def test_redo_start_rejected_after_timer_expires(self) -> None:
        self.manager.start()
        self.manager.undo()

        self.match.start()
        self.now += 60_000
        self.match.stop()
        self.assertTrue(self.match.is_complete())

        self.assertFalse(self.manager.redo())
        self.assertTrue(self.manager.can_redo())
        self.assertFalse(self.match.is_running)

    def test_command_for_other_match_rejected(self) -> None:
        other = Match(self.match.competitor_one, self.match.competitor_two)
        command = AddScoreCommand(other, Points.points(2), CompetitorNumber.ONE)

        self.assertFalse(self.manager.execute(command))
        self.assertEqual(other.score.competitor_one.points, 0)

    def test_prebuilt_command(self) -> None:
        self.assertTrue(self.manager.execute(StartMatchCommand(self.match)))
        self.assertEqual(self.manager.history(), ["Start Match"])

    def test_new_action_drops_redo_stack(self) -> None:
        self.manager.add_score(Points.points(2), CompetitorNumber.ONE)
        self.manager.add_score(Points.points(3), CompetitorNumber.ONE)
        self.manager.undo()
        self.manager.add_score(Points.penalties(1), CompetitorNumber.TWO)

        self.assertFalse(self.manager.can_redo())
        self.assertEqual(
            self.manager.history(),
            ["+2 points → Ana Silva", "+1 penalties → Bia Costa"],
        )

    def test_history_is_bounded(self) -> None:
        manager = MatchCommandManager(self.match, max_history=3)
        for _ in range(5):
            manager.add_score(Points.points(2), CompetitorNumber.ONE)

        self.assertEqual(len(manager.history()), 3)
        self.assertEqual(self.match.score.competitor_one.points, 10)

        while manager.can_undo():
            manager.undo()
        self.assertEqual(self.match.score.competitor_one.points, 4)

    def test_undo_without_history(self) -> None:
        self.assertFalse(self.manager.undo())
        self.assertFalse(self.manager.redo())

    def test_clear(self) -> None:
        self.manager.add_score(Points.points(2), CompetitorNumber.ONE)
        self.manager.undo()
        self.manager.clear()
        self.assertFalse(self.manager.can_undo())
        self.assertFalse(self.manager.can_redo())
        self.assertEqual(self.manager.history(), [])


if __name__ == "__main__":
    unittest.main()
