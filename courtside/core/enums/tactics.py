"""Tactical scheme enumerations."""

from enum import Enum


class OffensiveScheme(Enum):
    """Half-court offensive systems a coach can run."""

    MOTION = "motion"
    ISOLATION = "isolation"
    PICK_AND_ROLL = "pick_and_roll"
    POST_UP = "post_up"
    THREE_HEAVY = "three_heavy"
    FAST_BREAK = "fast_break"
    PRINCETON = "princeton"
    TRIANGLE = "triangle"
    FIVE_OUT = "five_out"


class DefensiveScheme(Enum):
    """Team defensive alignments."""

    MAN_TO_MAN = "man_to_man"
    ZONE_2_3 = "zone_2_3"
    ZONE_3_2 = "zone_3_2"
    ZONE_1_3_1 = "zone_1_3_1"
    ZONE_1_2_2 = "zone_1_2_2"
    BOX_AND_ONE = "box_and_one"
    TRIANGLE_AND_TWO = "triangle_and_two"
    SWITCH_ALL = "switch_all"
    FULL_COURT_PRESS = "full_court_press"
    HALF_COURT_TRAP = "half_court_trap"
    MATCHUP_ZONE = "matchup_zone"

    @property
    def is_zone(self) -> bool:
        """Check if this scheme is a zone (including junk zones)."""
        return self in {
            DefensiveScheme.ZONE_2_3,
            DefensiveScheme.ZONE_3_2,
            DefensiveScheme.ZONE_1_3_1,
            DefensiveScheme.ZONE_1_2_2,
            DefensiveScheme.BOX_AND_ONE,
            DefensiveScheme.TRIANGLE_AND_TWO,
            DefensiveScheme.MATCHUP_ZONE,
        }

    @property
    def is_pressure(self) -> bool:
        """Check if this scheme extends pressure beyond the half court."""
        return self in {DefensiveScheme.FULL_COURT_PRESS, DefensiveScheme.HALF_COURT_TRAP}


class GamePace(Enum):
    """Tempo the team plays at."""

    PUSH = "push"
    NORMAL = "normal"
    SLOW = "slow"


class IntensityLevel(Enum):
    """Defensive/physical intensity."""

    CONSERVATIVE = "conservative"
    NORMAL = "normal"
    AGGRESSIVE = "aggressive"


class PnRCoverage(Enum):
    """Pick-and-roll coverage schemes."""

    DROP = "drop"
    SHOW_AND_RECOVER = "show_and_recover"
    HEDGE = "hedge"
    BLITZ = "blitz"
    SWITCH = "switch"
    ICE = "ice"
    UNDER = "under"


class TransitionDefense(Enum):
    """How many players get back after a shot."""

    SPRINT_BACK = "sprint_back"
    NORMAL = "normal"
    GAMBLING = "gambling"  # Crash the glass / jump passing lanes


class MatchupPriority(Enum):
    """How tightly a defender plays his assignment."""

    NORMAL = "normal"
    SHADOW = "shadow"
    DOUBLE_TEAM = "double_team"
    DENY = "deny"


class DoubleTeamTrigger(Enum):
    """When help comes to double a player."""

    ON_CATCH = "on_catch"
    ON_POST = "on_post"
    ON_DRIBBLE = "on_dribble"
    ON_PNR = "on_pnr"
    ALWAYS = "always"
