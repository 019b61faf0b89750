"""Decision Logic - when the coach should spend a timeout.

Checks, in order:
- Opponent on a big run
- Close game in the final minute
- Trailing with the ball late (advance the ball)
- No timeout yet in the first half with the mandatory window closing
"""

from dataclasses import dataclass
from typing import Optional

from courtside.core.enums import TimeoutReason
from courtside.core.models.situation import GameSituation

STOP_RUN_POINTS = 8
END_OF_GAME_SECONDS = 60
END_OF_GAME_MARGIN = 5
ADVANCE_BALL_SECONDS = 30
MANDATORY_WINDOW_SECONDS = 180


@dataclass
class TimeoutDecision:
    """Decision about calling a timeout."""
    should_call: bool
    reason: Optional[TimeoutReason] = None


def should_call_timeout(
    situation: GameSituation,
    opponent_run_points: int,
    timeouts_remaining: int,
    timeouts_used_first_half: int,
) -> TimeoutDecision:
    """Decide whether to call a timeout.

    Args:
        situation: Current game snapshot
        opponent_run_points: Points in the opponent's current run
        timeouts_remaining: Number of timeouts left
        timeouts_used_first_half: Timeouts already spent in quarters 1-2

    Returns:
        TimeoutDecision with recommendation and reason
    """
    if timeouts_remaining <= 0:
        return TimeoutDecision(False)

    if opponent_run_points >= STOP_RUN_POINTS:
        return TimeoutDecision(True, TimeoutReason.STOP_RUN)

    late_fourth = situation.quarter == 4
    if (
        late_fourth
        and situation.game_clock < END_OF_GAME_SECONDS
        and abs(situation.score_diff) <= END_OF_GAME_MARGIN
    ):
        return TimeoutDecision(True, TimeoutReason.END_OF_GAME)

    if (
        late_fourth
        and situation.game_clock < ADVANCE_BALL_SECONDS
        and situation.score_diff < 0
        and situation.has_possession
    ):
        return TimeoutDecision(True, TimeoutReason.ADVANCE_BALL)

    if (
        situation.is_first_half
        and timeouts_used_first_half == 0
        and situation.game_clock < MANDATORY_WINDOW_SECONDS
    ):
        return TimeoutDecision(True, TimeoutReason.MANDATORY)

    return TimeoutDecision(False)
