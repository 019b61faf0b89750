"""Tests for end-of-game recommendations."""

import pytest

from courtside.coaching.end_game import recommend_end_game
from courtside.core.enums import EndGameAction
from courtside.core.models.situation import GameSituation


def _situation(score_diff: int, clock: float) -> GameSituation:
    return GameSituation(
        quarter=4,
        game_clock=clock,
        team_score=100 + max(0, score_diff),
        opponent_score=100 + max(0, -score_diff),
    )


class TestWithPossession:

    def test_tied_holds_for_last_shot(self):
        decision = recommend_end_game(_situation(0, 20.0), has_possession=True, fouls_to_give=4)

        assert decision.action == EndGameAction.HOLD_FOR_LAST_SHOT
        assert decision.target_shot_clock == 4

    def test_tied_with_time_left_plays_normal(self):
        decision = recommend_end_game(_situation(0, 24.0), has_possession=True, fouls_to_give=4)
        assert decision.action == EndGameAction.PLAY_NORMAL

    def test_down_three_needs_three(self):
        decision = recommend_end_game(_situation(-3, 25.0), has_possession=True, fouls_to_give=0)

        assert decision.action == EndGameAction.QUICK_TWO_OR_THREE
        assert decision.needs_three

    @pytest.mark.parametrize("diff", [-1, -2])
    def test_down_one_or_two_quick_score(self, diff):
        decision = recommend_end_game(_situation(diff, 29.0), has_possession=True, fouls_to_give=0)

        assert decision.action == EndGameAction.QUICK_TWO_OR_THREE
        assert not decision.needs_three

    def test_down_four_plays_normal(self):
        decision = recommend_end_game(_situation(-4, 10.0), has_possession=True, fouls_to_give=0)
        assert decision.action == EndGameAction.PLAY_NORMAL

    def test_leading_runs_clock(self):
        decision = recommend_end_game(_situation(2, 15.0), has_possession=True, fouls_to_give=0)
        assert decision.action == EndGameAction.RUN_CLOCK


class TestWithoutPossession:

    def test_up_three_fouls(self):
        decision = recommend_end_game(_situation(3, 10.0), has_possession=False, fouls_to_give=0)
        assert decision.action == EndGameAction.FOUL_TO_PREVENT_THREE

    def test_up_three_too_early_to_foul(self):
        decision = recommend_end_game(_situation(3, 15.0), has_possession=False, fouls_to_give=0)
        assert decision.action == EndGameAction.PLAY_NORMAL

    def test_comfortable_lead_no_foul(self):
        decision = recommend_end_game(_situation(6, 20.0), has_possession=False, fouls_to_give=2)
        assert decision.action == EndGameAction.NO_FOUL

    def test_trailing_with_fouls_to_give(self):
        decision = recommend_end_game(_situation(-2, 20.0), has_possession=False, fouls_to_give=1)
        assert decision.action == EndGameAction.FOUL_TO_STOP_CLOCK

    def test_trailing_without_fouls_to_give(self):
        decision = recommend_end_game(_situation(-2, 20.0), has_possession=False, fouls_to_give=0)
        assert decision.action == EndGameAction.PLAY_NORMAL

    def test_to_dict(self):
        decision = recommend_end_game(_situation(0, 5.0), has_possession=True, fouls_to_give=0)

        assert decision.to_dict() == {
            "action": "hold_for_last_shot",
            "explanation": "Tie game - hold for last shot",
            "target_shot_clock": 4,
            "needs_three": False,
        }
