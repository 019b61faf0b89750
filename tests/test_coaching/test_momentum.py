"""Tests for scoring runs and momentum."""

import logging

from courtside.coaching.momentum import MomentumTracker


class TestScoringRuns:
    """Runs accumulate for one side and end when the other side scores."""

    def test_opponent_run_accumulates(self):
        tracker = MomentumTracker()

        tracker.record_opponent_points(3)
        tracker.record_opponent_points(2)
        tracker.record_opponent_points(3)

        assert tracker.opponent_run_points == 8
        assert tracker.team_run_points == 0
        assert tracker.run_differential == -8

    def test_team_score_ends_opponent_run(self):
        tracker = MomentumTracker()
        tracker.record_opponent_points(5)

        tracker.record_team_points(2)

        assert tracker.opponent_run_points == 0
        assert tracker.team_run_points == 2
        assert tracker.consecutive_scores == 1

    def test_opponent_score_ends_team_run_and_stops(self):
        tracker = MomentumTracker()
        tracker.record_team_points(3)
        tracker.record_defensive_stop()
        tracker.record_defensive_stop()

        tracker.record_opponent_points(2)

        assert tracker.team_run_points == 0
        assert tracker.consecutive_stops == 0

    def test_reset_run(self):
        tracker = MomentumTracker()
        tracker.record_team_points(4)

        tracker.reset_run()

        assert tracker.team_run_points == 0
        assert tracker.opponent_run_points == 0

    def test_negative_points_ignored(self):
        tracker = MomentumTracker()

        tracker.record_opponent_points(-3)

        assert tracker.opponent_run_points == 0
        assert tracker.momentum == 50.0


class TestMomentum:
    """Momentum is a bounded scalar starting at neutral."""

    def test_starts_neutral(self):
        assert MomentumTracker().momentum == 50.0

    def test_team_points_raise_momentum(self):
        tracker = MomentumTracker()
        tracker.record_team_points(3)
        assert tracker.momentum == 56.0

    def test_stop_raises_momentum(self):
        tracker = MomentumTracker()
        tracker.record_defensive_stop()
        assert tracker.momentum == 53.0

    def test_momentum_capped_at_100(self):
        tracker = MomentumTracker()
        for _ in range(30):
            tracker.record_team_points(3)
        assert tracker.momentum == 100.0

    def test_momentum_floored_at_0(self):
        tracker = MomentumTracker()
        for _ in range(30):
            tracker.record_opponent_points(3)
        assert tracker.momentum == 0.0

    def test_momentum_stays_in_bounds_for_mixed_sequence(self):
        tracker = MomentumTracker()
        for points in [3, -1, 2, 3, 3, 0, 2, 3, 3, 3, 3, 3, 3, 3]:
            tracker.record_team_points(points)
            tracker.record_defensive_stop()
            assert 0.0 <= tracker.momentum <= 100.0
        for points in [3] * 40:
            tracker.record_opponent_points(points)
            assert 0.0 <= tracker.momentum <= 100.0

    def test_from_dict_clamps(self):
        tracker = MomentumTracker.from_dict({"momentum": 140.0, "opponent_run_points": 6})
        assert tracker.momentum == 100.0
        assert tracker.opponent_run_points == 6


class TestRunLogging:

    def test_run_changes_logged_at_debug(self, caplog):
        tracker = MomentumTracker()

        with caplog.at_level(logging.DEBUG, logger="courtside.coaching.momentum"):
            tracker.record_opponent_points(3)
            tracker.record_team_points(2)

        messages = [record.getMessage() for record in caplog.records]
        assert "Opponent run at 3" in messages
        assert "Opponent run ended at 3" in messages
        assert "Team run at 2" in messages
