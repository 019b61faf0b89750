"""Play, timeout and game-management enumerations."""

from enum import Enum


class PlayType(Enum):
    """Concrete offensive actions a play call resolves to."""

    PICK_AND_ROLL = "pick_and_roll"
    PICK_AND_POP = "pick_and_pop"
    ISOLATION = "isolation"
    POST_UP = "post_up"
    SPOT_UP_3 = "spot_up_3"
    TRANSITION_PUSH = "transition_push"
    MOTION_OFFENSE = "motion_offense"
    HANDOFF = "handoff"
    BACKDOOR_CUT = "backdoor_cut"
    LOB_PLAY = "lob_play"
    ATO_SPECIAL = "ato_special"
    SPAIN_PNR = "spain_pnr"
    HORNS_ACTION = "horns_action"
    FLEX_CUT = "flex_cut"
    FLOPPY = "floppy"
    PRINCETON_BACKDOOR = "princeton_backdoor"
    DELAY = "delay"
    PRESS = "press"


class QuickActionType(Enum):
    """Single-tap play requests expanded by the dispatcher."""

    ISOLATION = "isolation"
    PICK_AND_ROLL = "pick_and_roll"
    POST_UP = "post_up"
    SHOOTER_ACTION = "shooter_action"
    TRANSITION = "transition"
    SLOW_DOWN = "slow_down"


class PlaySituation(Enum):
    """Situations a set play is designed for."""

    GENERAL = "general"
    AFTER_TIMEOUT = "after_timeout"
    LAST_SHOT = "last_shot"
    NEED_THREE = "need_three"
    NEED_TWO = "need_two"
    SIDELINE_INBOUND = "sideline_inbound"
    BASELINE_INBOUND = "baseline_inbound"
    VERSUS_ZONE = "versus_zone"
    PRESS_BREAKER = "press_breaker"
    UP_BIG = "up_big"
    DOWN_BIG = "down_big"
    CLOSE_GAME = "close_game"


class PlayCategory(Enum):
    """Broad family of a set play."""

    HALF_COURT = "half_court"
    TRANSITION = "transition"
    INBOUND = "inbound"
    LATE_GAME = "late_game"
    ZONE_OFFENSE = "zone_offense"


class TimeoutReason(Enum):
    """Why a timeout was called."""

    STOP_RUN = "stop_run"
    REST_PLAYERS = "rest_players"
    DRAW_UP_PLAY = "draw_up_play"
    END_OF_GAME = "end_of_game"
    MANDATORY = "mandatory"
    ADVANCE_BALL = "advance_ball"
    ICING_SHOOTER = "icing_shooter"


class ChallengeType(Enum):
    """Calls that can be challenged."""

    FOUL_CALL = "foul_call"
    OUT_OF_BOUNDS = "out_of_bounds"
    GOALTENDING = "goaltending"
    OTHER = "other"


class SubstitutionUrgency(Enum):
    """How soon a suggested substitution should happen."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    IMMEDIATE = "immediate"

    @property
    def rank(self) -> int:
        """Severity rank used for sorting (higher = more urgent)."""
        ranks = {
            SubstitutionUrgency.LOW: 0,
            SubstitutionUrgency.MEDIUM: 1,
            SubstitutionUrgency.HIGH: 2,
            SubstitutionUrgency.IMMEDIATE: 3,
        }
        return ranks[self]


class EndGameAction(Enum):
    """Late-clock recommendations."""

    PLAY_NORMAL = "play_normal"
    HOLD_FOR_LAST_SHOT = "hold_for_last_shot"
    QUICK_TWO_OR_THREE = "quick_two_or_three"
    RUN_CLOCK = "run_clock"
    FOUL_TO_PREVENT_THREE = "foul_to_prevent_three"
    FOUL_TO_STOP_CLOCK = "foul_to_stop_clock"
    NO_FOUL = "no_foul"
