"""Coaching data models."""

from courtside.core.models.matchup import Matchup
from courtside.core.models.play import PlayCall, SetPlay
from courtside.core.models.results import (
    ChallengeResult,
    CoachResult,
    ErrorKind,
    FoulResult,
    PlayLookupResult,
    ReasonCode,
    SubstitutionResult,
    TechnicalResult,
    TimeoutResult,
)
from courtside.core.models.situation import GameSituation
from courtside.core.models.strategy import (
    DefensiveSchemeType,
    OffensiveSystemType,
    PacePreference,
    TeamStrategy,
)
from courtside.core.models.substitution import SubstitutionPlan, SubstitutionSuggestion
from courtside.core.models.tactics import TacticalState

__all__ = [
    "ChallengeResult",
    "CoachResult",
    "DefensiveSchemeType",
    "ErrorKind",
    "FoulResult",
    "GameSituation",
    "Matchup",
    "OffensiveSystemType",
    "PacePreference",
    "PlayCall",
    "PlayLookupResult",
    "ReasonCode",
    "SetPlay",
    "SubstitutionPlan",
    "SubstitutionResult",
    "SubstitutionSuggestion",
    "TacticalState",
    "TeamStrategy",
    "TechnicalResult",
    "TimeoutResult",
]
