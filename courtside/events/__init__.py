"""Event system for coaching decisions."""

from courtside.events.bus import EventBus, EventRecorder
from courtside.events.types import (
    ChallengeResolvedEvent,
    CoachEvent,
    DecisionMadeEvent,
    PlayCalledEvent,
    SubstitutionEvent,
    TechnicalFoulEvent,
    TimeoutCalledEvent,
)

__all__ = [
    "ChallengeResolvedEvent",
    "CoachEvent",
    "DecisionMadeEvent",
    "EventBus",
    "EventRecorder",
    "PlayCalledEvent",
    "SubstitutionEvent",
    "TechnicalFoulEvent",
    "TimeoutCalledEvent",
]
