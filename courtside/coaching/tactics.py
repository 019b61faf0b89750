"""Deriving in-game tactics from the team's season strategy."""

from typing import Optional

from courtside.core.enums import DefensiveScheme, GamePace, OffensiveScheme
from courtside.core.models.strategy import (
    DefensiveSchemeType,
    OffensiveSystemType,
    PacePreference,
    TeamStrategy,
)
from courtside.core.models.tactics import TacticalState

DEFAULT_PACE = GamePace.NORMAL
DEFAULT_OFFENSE = OffensiveScheme.MOTION
DEFAULT_DEFENSE = DefensiveScheme.MAN_TO_MAN

PACE_MAP = {
    PacePreference.DELIBERATE: GamePace.SLOW,
    PacePreference.BALANCED: GamePace.NORMAL,
    PacePreference.PUSH_WHEN_POSSIBLE: GamePace.PUSH,
    PacePreference.ALWAYS_PUSH: GamePace.PUSH,
}

OFFENSE_MAP = {
    OffensiveSystemType.MOTION_OFFENSE: OffensiveScheme.MOTION,
    OffensiveSystemType.PICK_AND_ROLL_HEAVY: OffensiveScheme.PICK_AND_ROLL,
    OffensiveSystemType.ISO_HEAVY: OffensiveScheme.ISOLATION,
    OffensiveSystemType.POST_UP_FOCUSED: OffensiveScheme.POST_UP,
    OffensiveSystemType.THREE_POINT_ORIENTED: OffensiveScheme.THREE_HEAVY,
    OffensiveSystemType.FAST_BREAK_TRANSITION: OffensiveScheme.FAST_BREAK,
    OffensiveSystemType.PRINCETON_OFFENSE: OffensiveScheme.PRINCETON,
    OffensiveSystemType.TRIANGLE_OFFENSE: OffensiveScheme.TRIANGLE,
    OffensiveSystemType.FLEX_OFFENSE: OffensiveScheme.MOTION,
    OffensiveSystemType.HORNS_SET: OffensiveScheme.PICK_AND_ROLL,
    OffensiveSystemType.FIVE_OUT: OffensiveScheme.FIVE_OUT,
}

DEFENSE_MAP = {
    DefensiveSchemeType.MAN_TO_MAN_STANDARD: DefensiveScheme.MAN_TO_MAN,
    DefensiveSchemeType.MAN_TO_MAN_AGGRESSIVE: DefensiveScheme.MAN_TO_MAN,
    DefensiveSchemeType.MAN_TO_MAN_CONSERVATIVE: DefensiveScheme.MAN_TO_MAN,
    DefensiveSchemeType.SWITCH_EVERYTHING: DefensiveScheme.SWITCH_ALL,
    DefensiveSchemeType.ZONE_2_3: DefensiveScheme.ZONE_2_3,
    DefensiveSchemeType.ZONE_3_2: DefensiveScheme.ZONE_3_2,
    DefensiveSchemeType.ZONE_1_3_1: DefensiveScheme.ZONE_1_3_1,
    DefensiveSchemeType.ZONE_1_2_2: DefensiveScheme.ZONE_1_2_2,
    DefensiveSchemeType.BOX_AND_ONE: DefensiveScheme.BOX_AND_ONE,
    DefensiveSchemeType.TRIANGLE_AND_TWO: DefensiveScheme.TRIANGLE_AND_TWO,
    DefensiveSchemeType.FULL_COURT_PRESS: DefensiveScheme.FULL_COURT_PRESS,
    DefensiveSchemeType.HALF_COURT_TRAP: DefensiveScheme.HALF_COURT_TRAP,
    DefensiveSchemeType.MATCHUP_ZONE: DefensiveScheme.MATCHUP_ZONE,
}


def apply_team_strategy(
    strategy: TeamStrategy,
    tactics: Optional[TacticalState] = None,
) -> TacticalState:
    """
    Map a team strategy onto tactics.

    Sets pace, offense and defense from the lookup tables; a missing or
    unrecognised preference falls back to normal pace, motion offense and
    man-to-man. All other fields of ``tactics`` are carried over. The input
    is not modified, and applying the same strategy twice gives the same
    result.

    Args:
        strategy: The team's strategy record
        tactics: Current tactics to start from (defaults to fresh tactics)

    Returns:
        New TacticalState
    """
    result = tactics.copy() if tactics is not None else TacticalState()
    result.pace = PACE_MAP.get(strategy.pace_preference, DEFAULT_PACE)
    result.offense = OFFENSE_MAP.get(strategy.offensive_system, DEFAULT_OFFENSE)
    result.defense = DEFENSE_MAP.get(strategy.defensive_scheme, DEFAULT_DEFENSE)
    return result
