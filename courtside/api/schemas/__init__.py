"""Pydantic schemas for API request/response models."""

from courtside.api.schemas.coach import (
    ActionResultResponse,
    ArgueRequest,
    ChallengeRequest,
    CoachStateResponse,
    EndGameResponse,
    FoulRequest,
    PlayCallResponse,
    PlaysResponse,
    QuickActionRequest,
    SessionStartedResponse,
    SetPlayRequest,
    SetPlaySchema,
    SituationResponse,
    SituationUpdateRequest,
    StartSessionRequest,
    SubstitutionRequest,
    SuggestionResponse,
    SuggestionsRequest,
    SuggestionsResponse,
    TacticsResponse,
    TacticsUpdateRequest,
    TimeoutRequest,
)

__all__ = [
    "ActionResultResponse",
    "ArgueRequest",
    "ChallengeRequest",
    "CoachStateResponse",
    "EndGameResponse",
    "FoulRequest",
    "PlayCallResponse",
    "PlaysResponse",
    "QuickActionRequest",
    "SessionStartedResponse",
    "SetPlayRequest",
    "SetPlaySchema",
    "SituationResponse",
    "SituationUpdateRequest",
    "StartSessionRequest",
    "SubstitutionRequest",
    "SuggestionResponse",
    "SuggestionsRequest",
    "SuggestionsResponse",
    "TacticsResponse",
    "TacticsUpdateRequest",
    "TimeoutRequest",
]
