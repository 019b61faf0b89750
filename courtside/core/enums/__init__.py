"""Coaching enumerations."""

from courtside.core.enums.plays import (
    ChallengeType,
    EndGameAction,
    PlayCategory,
    PlaySituation,
    PlayType,
    QuickActionType,
    SubstitutionUrgency,
    TimeoutReason,
)
from courtside.core.enums.tactics import (
    DefensiveScheme,
    DoubleTeamTrigger,
    GamePace,
    IntensityLevel,
    MatchupPriority,
    OffensiveScheme,
    PnRCoverage,
    TransitionDefense,
)

__all__ = [
    "ChallengeType",
    "DefensiveScheme",
    "DoubleTeamTrigger",
    "EndGameAction",
    "GamePace",
    "IntensityLevel",
    "MatchupPriority",
    "OffensiveScheme",
    "PlayCategory",
    "PlaySituation",
    "PlayType",
    "PnRCoverage",
    "QuickActionType",
    "SubstitutionUrgency",
    "TimeoutReason",
    "TransitionDefense",
]
