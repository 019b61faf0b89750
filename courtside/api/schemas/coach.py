"""Schemas for the coaching API."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from courtside.core.enums import (
    ChallengeType,
    DefensiveScheme,
    EndGameAction,
    GamePace,
    IntensityLevel,
    OffensiveScheme,
    PlayCategory,
    PlaySituation,
    PlayType,
    PnRCoverage,
    QuickActionType,
    SubstitutionUrgency,
    TimeoutReason,
    TransitionDefense,
)
from courtside.core.models.strategy import (
    DefensiveSchemeType,
    OffensiveSystemType,
    PacePreference,
)


# =============================================================================
# Request Schemas
# =============================================================================

class SetPlaySchema(BaseModel):
    """A playbook entry supplied when a session starts."""
    play_id: str
    name: str
    play_type: PlayType = PlayType.MOTION_OFFENSE
    category: PlayCategory = PlayCategory.HALF_COURT
    situation: PlaySituation = PlaySituation.GENERAL
    tags: List[str] = Field(default_factory=list)
    familiarity: int = Field(default=50, ge=0, le=100)


class StartSessionRequest(BaseModel):
    """Request to start coaching a game."""
    team_name: str = "TEAM"
    team_id: Optional[str] = None
    pace_preference: Optional[PacePreference] = PacePreference.BALANCED
    offensive_system: Optional[OffensiveSystemType] = OffensiveSystemType.MOTION_OFFENSE
    defensive_scheme: Optional[DefensiveSchemeType] = DefensiveSchemeType.MAN_TO_MAN_STANDARD
    lineup: List[str] = Field(default_factory=list)
    plays: List[SetPlaySchema] = Field(default_factory=list)
    seed: Optional[int] = Field(default=None, description="Seed for challenge and technical draws")

    class Config:
        json_schema_extra = {
            "example": {
                "team_name": "Harbor City Hawks",
                "pace_preference": "push_when_possible",
                "offensive_system": "horns_set",
                "defensive_scheme": "switch_everything",
                "lineup": ["pg", "sg", "sf", "pf", "c"],
                "plays": [
                    {"play_id": "horns_flare", "name": "Horns Flare", "play_type": "horns_action"},
                ],
            }
        }


class SituationUpdateRequest(BaseModel):
    """Game-state push from the simulator."""
    quarter: int = Field(..., ge=1)
    game_clock: float = Field(..., ge=0)
    shot_clock: float = Field(default=24.0, ge=0)
    team_score: int = Field(..., ge=0)
    opponent_score: int = Field(..., ge=0)
    has_possession: bool = True

    class Config:
        json_schema_extra = {
            "example": {
                "quarter": 4,
                "game_clock": 18.0,
                "shot_clock": 18.0,
                "team_score": 100,
                "opponent_score": 100,
                "has_possession": True,
            }
        }


class TacticsUpdateRequest(BaseModel):
    """Tactical changes; omitted fields are left alone."""
    offense: Optional[OffensiveScheme] = None
    defense: Optional[DefensiveScheme] = None
    pace: Optional[GamePace] = None
    intensity: Optional[IntensityLevel] = None
    pnr_coverage: Optional[PnRCoverage] = None
    transition_defense: Optional[TransitionDefense] = None
    press_enabled: Optional[bool] = None
    intentional_foul_enabled: Optional[bool] = None


class TimeoutRequest(BaseModel):
    reason: TimeoutReason = TimeoutReason.DRAW_UP_PLAY


class SubstitutionRequest(BaseModel):
    """One or more substitutions, applied all or nothing."""
    players_out: List[str] = Field(..., min_length=1)
    players_in: List[str] = Field(..., min_length=1)


class SuggestionsRequest(BaseModel):
    """Current energy (0-100) for players on the floor."""
    energy: Dict[str, float] = Field(default_factory=dict)


class QuickActionRequest(BaseModel):
    action: QuickActionType
    primary_player: Optional[str] = None


class SetPlayRequest(BaseModel):
    play_id: str


class ChallengeRequest(BaseModel):
    challenge_type: ChallengeType


class ArgueRequest(BaseModel):
    team_morale: int = Field(..., ge=0, le=100)


class FoulRequest(BaseModel):
    player_id: Optional[str] = None


# =============================================================================
# Response Schemas
# =============================================================================

class SituationResponse(BaseModel):
    """Game situation as the coach sees it."""
    quarter: int
    game_clock: float
    clock_display: str  # "0:18" format
    shot_clock: float
    team_score: int
    opponent_score: int
    score_diff: int
    has_possession: bool
    is_clutch_time: bool


class TacticsResponse(BaseModel):
    offense: OffensiveScheme
    defense: DefensiveScheme
    pace: GamePace
    intensity: IntensityLevel
    pnr_coverage: PnRCoverage
    transition_defense: TransitionDefense
    double_team_target: Optional[str] = None
    press_enabled: bool
    intentional_foul_enabled: bool


class CoachStateResponse(BaseModel):
    """Everything the coaching panel shows."""
    game_id: str
    team_name: str
    situation: SituationResponse
    tactics: TacticsResponse
    timeouts_remaining: int
    fouls_to_give: int
    challenge_used: bool
    technical_fouls: int
    coach_ejected: bool
    momentum: float
    lineup: List[str]
    suggested_timeout: Optional[TimeoutReason] = None


class SessionStartedResponse(BaseModel):
    game_id: str
    state: CoachStateResponse
    message: str


class ActionResultResponse(BaseModel):
    """Outcome of a coaching action; failures carry a reason code."""
    success: bool
    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        json_schema_extra = {
            "example": {
                "success": False,
                "code": "no_timeouts_left",
                "message": "No timeouts remaining",
                "details": {"timeouts_left": 0, "reason": "draw_up_play"},
            }
        }


class SuggestionResponse(BaseModel):
    player_out: str
    reason: str
    urgency: SubstitutionUrgency
    suggested_replacement: Optional[str] = None


class SuggestionsResponse(BaseModel):
    suggestions: List[SuggestionResponse]


class PlayCallResponse(BaseModel):
    play_type: PlayType
    primary_player_id: Optional[str] = None
    secondary_player_id: Optional[str] = None
    is_ato: bool = False
    timestamp: float
    play_id: Optional[str] = None


class PlaysResponse(BaseModel):
    """Recommended set plays and the generic play menu."""
    recommended: List[str]
    available: List[PlayType]


class EndGameResponse(BaseModel):
    action: EndGameAction
    explanation: str
    target_shot_clock: Optional[float] = None
    needs_three: bool = False
