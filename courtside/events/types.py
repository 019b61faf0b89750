"""Event types emitted by the coaching engine."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from courtside.core.models.play import SetPlay
    from courtside.core.models.results import (
        ChallengeResult,
        SubstitutionResult,
        TechnicalResult,
        TimeoutResult,
    )


@dataclass
class CoachEvent:
    """Base class for all coaching events."""

    timestamp: datetime = field(default_factory=datetime.now)
    team_id: Optional[str] = None

    # Game context at time of event
    quarter: int = 1
    game_clock: float = 720.0
    team_score: int = 0
    opponent_score: int = 0


@dataclass
class DecisionMadeEvent(CoachEvent):
    """Fired when a tactic is changed (e.g. "Defense: zone_2_3")."""

    label: str = ""


@dataclass
class TimeoutCalledEvent(CoachEvent):
    """Fired after a successful timeout."""

    result: "TimeoutResult" = None


@dataclass
class SubstitutionEvent(CoachEvent):
    """Fired after a successful substitution."""

    result: "SubstitutionResult" = None


@dataclass
class PlayCalledEvent(CoachEvent):
    """Fired when a set play is resolved from the playbook."""

    play: "SetPlay" = None


@dataclass
class ChallengeResolvedEvent(CoachEvent):
    """Fired when a coach's challenge has been reviewed."""

    result: "ChallengeResult" = None


@dataclass
class TechnicalFoulEvent(CoachEvent):
    """Fired when the coach is assessed a technical foul."""

    result: "TechnicalResult" = None
