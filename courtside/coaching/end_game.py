"""End-of-game management.

Ordered rules for the last possessions of a period. The first rule that
matches decides; there is no scoring between rules.
"""

from dataclasses import dataclass
from typing import Optional

from courtside.core.enums import EndGameAction
from courtside.core.models.situation import GameSituation

HOLD_WINDOW_SECONDS = 24
QUICK_SCORE_WINDOW_SECONDS = 30
FOUL_UP_THREE_WINDOW_SECONDS = 15
LAST_SHOT_TARGET_SHOT_CLOCK = 4


@dataclass
class EndGameDecision:
    """Recommended end-game action."""

    action: EndGameAction
    explanation: str = ""
    target_shot_clock: Optional[int] = None
    needs_three: bool = False

    def to_dict(self) -> dict:
        return {
            "action": self.action.value,
            "explanation": self.explanation,
            "target_shot_clock": self.target_shot_clock,
            "needs_three": self.needs_three,
        }


def recommend_end_game(
    situation: GameSituation,
    has_possession: bool,
    fouls_to_give: int,
) -> EndGameDecision:
    """Recommend what to do with the clock winding down.

    Args:
        situation: Current game snapshot (clock and score are used)
        has_possession: Whether the coached team has the ball
        fouls_to_give: Fouls left before the opponent shoots free throws

    Returns:
        EndGameDecision
    """
    score_diff = situation.score_diff
    clock = situation.game_clock

    if has_possession:
        if score_diff == 0 and clock < HOLD_WINDOW_SECONDS:
            return EndGameDecision(
                action=EndGameAction.HOLD_FOR_LAST_SHOT,
                target_shot_clock=LAST_SHOT_TARGET_SHOT_CLOCK,
                explanation="Tie game - hold for last shot",
            )
        if -3 <= score_diff < 0 and clock < QUICK_SCORE_WINDOW_SECONDS:
            needs_three = score_diff == -3
            return EndGameDecision(
                action=EndGameAction.QUICK_TWO_OR_THREE,
                needs_three=needs_three,
                explanation="Down 3 - need quick three" if needs_three else "Down 1-2 - quick score",
            )
        if score_diff > 0 and clock < HOLD_WINDOW_SECONDS:
            return EndGameDecision(
                action=EndGameAction.RUN_CLOCK,
                explanation="Leading - run clock, get fouled",
            )
    else:
        if score_diff == 3 and clock < FOUL_UP_THREE_WINDOW_SECONDS:
            return EndGameDecision(
                action=EndGameAction.FOUL_TO_PREVENT_THREE,
                explanation="Up 3 - consider fouling to prevent tie",
            )
        if score_diff > 3 and clock < HOLD_WINDOW_SECONDS:
            return EndGameDecision(
                action=EndGameAction.NO_FOUL,
                explanation="Comfortable lead - play defense",
            )
        if score_diff < 0 and clock < HOLD_WINDOW_SECONDS and fouls_to_give > 0:
            return EndGameDecision(
                action=EndGameAction.FOUL_TO_STOP_CLOCK,
                explanation="Behind - foul to stop clock",
            )

    return EndGameDecision(
        action=EndGameAction.PLAY_NORMAL,
        explanation="Continue normal play",
    )
