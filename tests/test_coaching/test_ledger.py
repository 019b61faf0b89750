"""Tests for the per-game resource ledger."""

import pytest

from courtside.coaching.ledger import ResourceLedger
from courtside.core.enums import ChallengeType, TimeoutReason
from courtside.core.models.results import ErrorKind, ReasonCode


@pytest.fixture
def ledger() -> ResourceLedger:
    return ResourceLedger.new_game(timeouts=7, fouls_to_give=4)


# =============================================================================
# Timeout Tests
# =============================================================================

class TestTimeouts:
    """Spending timeouts."""

    def test_timeout_decrements_by_one(self, ledger):
        result = ledger.call_timeout(TimeoutReason.STOP_RUN, quarter=3)

        assert result.success
        assert result.code == ReasonCode.OK
        assert result.timeouts_left == 6
        assert result.reason == "stop_run"
        assert ledger.timeouts_remaining == 6

    def test_first_half_timeouts_counted(self, ledger):
        """Three timeouts in the first quarter leave four, all first-half."""
        for _ in range(3):
            ledger.call_timeout(TimeoutReason.REST_PLAYERS, quarter=1)

        assert ledger.timeouts_remaining == 4
        assert ledger.timeouts_used_first_half == 3

    def test_second_half_timeouts_not_counted_as_first_half(self, ledger):
        ledger.call_timeout(TimeoutReason.STOP_RUN, quarter=2)
        ledger.call_timeout(TimeoutReason.STOP_RUN, quarter=3)
        ledger.call_timeout(TimeoutReason.STOP_RUN, quarter=5)

        assert ledger.timeouts_used_first_half == 1
        assert ledger.timeouts_remaining == 4

    def test_no_timeouts_left(self):
        ledger = ResourceLedger.new_game(timeouts=0)

        result = ledger.call_timeout(TimeoutReason.END_OF_GAME, quarter=4)

        assert not result.success
        assert result.code == ReasonCode.NO_TIMEOUTS_LEFT
        assert result.error_kind == ErrorKind.RESOURCE_EXHAUSTED
        assert result.timeouts_left == 0
        assert ledger.timeouts_remaining == 0

    def test_timeouts_never_go_negative(self, ledger):
        for _ in range(10):
            ledger.call_timeout(TimeoutReason.DRAW_UP_PLAY, quarter=4)

        assert ledger.timeouts_remaining == 0


# =============================================================================
# Challenge Tests
# =============================================================================

class TestChallenge:
    """The coach's challenge."""

    def test_won_challenge_keeps_timeout(self, ledger, scripted_rng):
        result = ledger.use_challenge(ChallengeType.FOUL_CALL, 0.4, scripted_rng([0.1]))

        assert result.success
        assert result.challenge_won
        assert not result.timeout_charged
        assert ledger.timeouts_remaining == 7
        assert ledger.challenge_used

    def test_lost_challenge_costs_timeout(self, ledger, scripted_rng):
        result = ledger.use_challenge(ChallengeType.OUT_OF_BOUNDS, 0.4, scripted_rng([0.9]))

        assert result.success
        assert not result.challenge_won
        assert result.timeout_charged
        assert ledger.timeouts_remaining == 6

    def test_draw_equal_to_probability_loses(self, ledger, scripted_rng):
        result = ledger.use_challenge(ChallengeType.GOALTENDING, 0.4, scripted_rng([0.4]))

        assert not result.challenge_won

    def test_second_challenge_already_used(self, ledger, scripted_rng):
        rng = scripted_rng([0.1])
        ledger.use_challenge(ChallengeType.FOUL_CALL, 0.4, rng)

        result = ledger.use_challenge(ChallengeType.FOUL_CALL, 0.4, rng)

        assert not result.success
        assert result.code == ReasonCode.ALREADY_USED
        assert result.error_kind == ErrorKind.RESOURCE_EXHAUSTED

    def test_challenge_needs_timeout_to_risk(self, scripted_rng):
        ledger = ResourceLedger.new_game(timeouts=0)
        rng = scripted_rng([0.1])

        result = ledger.use_challenge(ChallengeType.OTHER, 0.4, rng)

        assert not result.success
        assert result.code == ReasonCode.NO_TIMEOUTS_AVAILABLE
        assert not ledger.challenge_used
        assert rng.calls == 0


# =============================================================================
# Fouls To Give Tests
# =============================================================================

class TestFoulsToGive:
    """Intentional fouls and the per-quarter allowance."""

    def test_foul_to_give_used(self, ledger):
        result = ledger.intentional_foul("C")

        assert result.success
        assert not result.free_throws
        assert result.fouls_to_give_left == 3
        assert result.player_id == "C"

    def test_out_of_fouls_gives_free_throws(self, ledger):
        for _ in range(4):
            ledger.intentional_foul()

        result = ledger.intentional_foul()

        assert result.success
        assert result.free_throws
        assert result.fouls_to_give_left == 0
        assert ledger.fouls_to_give == 0

    def test_advance_quarter_replenishes(self, ledger):
        ledger.intentional_foul()
        ledger.intentional_foul()

        ledger.advance_quarter()

        assert ledger.fouls_to_give == 4


# =============================================================================
# Technicals & Persistence
# =============================================================================

class TestTechnicalsAndPersistence:

    def test_second_technical_ejects(self, ledger):
        assert ledger.add_technical() is False
        assert ledger.add_technical() is True
        assert ledger.coach_ejected
        assert ledger.technical_fouls == 2

    def test_round_trip(self, ledger):
        ledger.call_timeout(TimeoutReason.STOP_RUN, quarter=1)
        ledger.intentional_foul()
        ledger.add_technical()

        restored = ResourceLedger.from_dict(ledger.to_dict())

        assert restored == ledger

    def test_missing_keys_use_given_rules(self):
        restored = ResourceLedger.from_dict({"technical_fouls": 1}, timeouts=5, fouls_to_give=3)

        assert restored.timeouts_remaining == 5
        assert restored.fouls_to_give == 3
        assert restored.fouls_to_give_per_quarter == 3
        assert restored.technical_fouls == 1
