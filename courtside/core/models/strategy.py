"""Team strategy record supplied by the front office / coaching staff."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PacePreference(Enum):
    """Preferred tempo in the team's season strategy."""

    DELIBERATE = "deliberate"
    BALANCED = "balanced"
    PUSH_WHEN_POSSIBLE = "push_when_possible"
    ALWAYS_PUSH = "always_push"


class OffensiveSystemType(Enum):
    """Season-level offensive identity."""

    MOTION_OFFENSE = "motion_offense"
    PICK_AND_ROLL_HEAVY = "pick_and_roll_heavy"
    ISO_HEAVY = "iso_heavy"
    POST_UP_FOCUSED = "post_up_focused"
    THREE_POINT_ORIENTED = "three_point_oriented"
    FAST_BREAK_TRANSITION = "fast_break_transition"
    PRINCETON_OFFENSE = "princeton_offense"
    TRIANGLE_OFFENSE = "triangle_offense"
    FLEX_OFFENSE = "flex_offense"
    HORNS_SET = "horns_set"
    FIVE_OUT = "five_out"


class DefensiveSchemeType(Enum):
    """Season-level defensive identity."""

    MAN_TO_MAN_STANDARD = "man_to_man_standard"
    MAN_TO_MAN_AGGRESSIVE = "man_to_man_aggressive"
    MAN_TO_MAN_CONSERVATIVE = "man_to_man_conservative"
    SWITCH_EVERYTHING = "switch_everything"
    ZONE_2_3 = "zone_2_3"
    ZONE_3_2 = "zone_3_2"
    ZONE_1_3_1 = "zone_1_3_1"
    ZONE_1_2_2 = "zone_1_2_2"
    BOX_AND_ONE = "box_and_one"
    TRIANGLE_AND_TWO = "triangle_and_two"
    FULL_COURT_PRESS = "full_court_press"
    HALF_COURT_TRAP = "half_court_trap"
    MATCHUP_ZONE = "matchup_zone"


@dataclass(frozen=True)
class TeamStrategy:
    """
    Read-only strategy record the engine derives its default tactics from.

    Any field may be None when the team has not set a preference.
    """

    pace_preference: Optional[PacePreference] = PacePreference.BALANCED
    offensive_system: Optional[OffensiveSystemType] = OffensiveSystemType.MOTION_OFFENSE
    defensive_scheme: Optional[DefensiveSchemeType] = DefensiveSchemeType.MAN_TO_MAN_STANDARD

    def to_dict(self) -> dict:
        return {
            "pace_preference": self.pace_preference.value if self.pace_preference else None,
            "offensive_system": self.offensive_system.value if self.offensive_system else None,
            "defensive_scheme": self.defensive_scheme.value if self.defensive_scheme else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TeamStrategy":
        pace = data.get("pace_preference")
        offense = data.get("offensive_system")
        defense = data.get("defensive_scheme")
        return cls(
            pace_preference=PacePreference(pace) if pace else None,
            offensive_system=OffensiveSystemType(offense) if offense else None,
            defensive_scheme=DefensiveSchemeType(defense) if defense else None,
        )
