"""Result values returned by coaching operations.

Expected failures (no timeouts left, player not on the floor, unknown play)
are reported through these values rather than raised. Each failure carries a
``ReasonCode`` whose ``kind`` places it in one of four error families.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from courtside.core.models.play import SetPlay


class ErrorKind(Enum):
    """Families of expected, recoverable failures."""

    RESOURCE_EXHAUSTED = "resource_exhausted"
    INVALID_LINEUP_OPERATION = "invalid_lineup_operation"
    MISSING_COLLABORATOR = "missing_collaborator"
    UNKNOWN_IDENTIFIER = "unknown_identifier"


class ReasonCode(Enum):
    """Machine-checkable outcome of an operation."""

    OK = "ok"
    NO_TIMEOUTS_LEFT = "no_timeouts_left"
    ALREADY_USED = "already_used"
    NO_TIMEOUTS_AVAILABLE = "no_timeouts_available"
    ALREADY_EJECTED = "already_ejected"
    PLAYER_NOT_IN_LINEUP = "player_not_in_lineup"
    SUBSTITUTION_COUNT_MISMATCH = "substitution_count_mismatch"
    NO_PLAYBOOK = "no_playbook"
    UNKNOWN_PLAY = "unknown_play"

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Error family of this code (None for OK)."""
        kinds = {
            ReasonCode.NO_TIMEOUTS_LEFT: ErrorKind.RESOURCE_EXHAUSTED,
            ReasonCode.ALREADY_USED: ErrorKind.RESOURCE_EXHAUSTED,
            ReasonCode.NO_TIMEOUTS_AVAILABLE: ErrorKind.RESOURCE_EXHAUSTED,
            ReasonCode.ALREADY_EJECTED: ErrorKind.RESOURCE_EXHAUSTED,
            ReasonCode.PLAYER_NOT_IN_LINEUP: ErrorKind.INVALID_LINEUP_OPERATION,
            ReasonCode.SUBSTITUTION_COUNT_MISMATCH: ErrorKind.INVALID_LINEUP_OPERATION,
            ReasonCode.NO_PLAYBOOK: ErrorKind.MISSING_COLLABORATOR,
            ReasonCode.UNKNOWN_PLAY: ErrorKind.UNKNOWN_IDENTIFIER,
        }
        return kinds.get(self)


@dataclass
class CoachResult:
    """Base for all operation results."""

    success: bool = True
    code: ReasonCode = ReasonCode.OK
    message: str = ""

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.code.kind

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "code": self.code.value,
            "message": self.message,
        }


@dataclass
class TimeoutResult(CoachResult):
    """Outcome of a timeout request."""

    timeouts_left: int = 0
    reason: str = ""

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update({"timeouts_left": self.timeouts_left, "reason": self.reason})
        return data


@dataclass
class ChallengeResult(CoachResult):
    """Outcome of a coach's challenge."""

    challenge_won: bool = False
    timeout_charged: bool = False

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update({
            "challenge_won": self.challenge_won,
            "timeout_charged": self.timeout_charged,
        })
        return data


@dataclass
class FoulResult(CoachResult):
    """Outcome of an intentional foul."""

    free_throws: bool = False
    fouls_to_give_left: int = 0
    player_id: Optional[str] = None

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update({
            "free_throws": self.free_throws,
            "fouls_to_give_left": self.fouls_to_give_left,
            "player_id": self.player_id,
        })
        return data


@dataclass
class SubstitutionResult(CoachResult):
    """Outcome of one or more substitutions."""

    new_lineup: list[str] = field(default_factory=list)
    players_out: list[str] = field(default_factory=list)
    players_in: list[str] = field(default_factory=list)

    @property
    def player_out(self) -> str:
        return ", ".join(self.players_out)

    @property
    def player_in(self) -> str:
        return ", ".join(self.players_in)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update({
            "new_lineup": list(self.new_lineup),
            "players_out": list(self.players_out),
            "players_in": list(self.players_in),
        })
        return data


@dataclass
class TechnicalResult(CoachResult):
    """Outcome of arguing a call with the officials."""

    got_technical: bool = False
    was_ejected: bool = False
    morale_change: int = 0
    resulting_morale: int = 0

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update({
            "got_technical": self.got_technical,
            "was_ejected": self.was_ejected,
            "morale_change": self.morale_change,
            "resulting_morale": self.resulting_morale,
        })
        return data


@dataclass
class PlayLookupResult(CoachResult):
    """Outcome of calling a set play from the playbook."""

    play: Optional["SetPlay"] = None

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["play"] = self.play.to_dict() if self.play else None
        return data


def failure(result_cls: type, code: ReasonCode, message: str, **kwargs):
    """Build a failed result of the given type."""
    return result_cls(success=False, code=code, message=message, **kwargs)
