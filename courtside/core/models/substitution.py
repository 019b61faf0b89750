"""Rotation plan and substitution suggestion models."""

from dataclasses import dataclass, field
from typing import Optional

from courtside.core.enums import SubstitutionUrgency

MIN_FATIGUE_THRESHOLD = 50
MAX_FATIGUE_THRESHOLD = 100
MIN_ROTATION_DEPTH = 7
MAX_ROTATION_DEPTH = 12
DEFAULT_FATIGUE_THRESHOLD = 70
DEFAULT_ROTATION_DEPTH = 9


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


@dataclass
class SubstitutionPlan:
    """
    Coach's rotation settings.

    Attributes:
        fatigue_threshold: Energy (0-100) below which a player should sit
        rotation_depth: Number of players in the regular rotation
        target_minutes: Player id -> minutes the coach wants him to play
        closing_lineup: Five player ids to finish the game with
    """

    fatigue_threshold: int = DEFAULT_FATIGUE_THRESHOLD
    rotation_depth: int = DEFAULT_ROTATION_DEPTH
    target_minutes: dict[str, int] = field(default_factory=dict)
    closing_lineup: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.fatigue_threshold = _clamp(
            self.fatigue_threshold, MIN_FATIGUE_THRESHOLD, MAX_FATIGUE_THRESHOLD
        )
        self.rotation_depth = _clamp(self.rotation_depth, MIN_ROTATION_DEPTH, MAX_ROTATION_DEPTH)

    def set_fatigue_threshold(self, threshold: int) -> None:
        self.fatigue_threshold = _clamp(threshold, MIN_FATIGUE_THRESHOLD, MAX_FATIGUE_THRESHOLD)

    def set_rotation_depth(self, depth: int) -> None:
        self.rotation_depth = _clamp(depth, MIN_ROTATION_DEPTH, MAX_ROTATION_DEPTH)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "fatigue_threshold": self.fatigue_threshold,
            "rotation_depth": self.rotation_depth,
            "target_minutes": dict(self.target_minutes),
            "closing_lineup": list(self.closing_lineup),
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        fatigue_threshold: int = DEFAULT_FATIGUE_THRESHOLD,
        rotation_depth: int = DEFAULT_ROTATION_DEPTH,
    ) -> "SubstitutionPlan":
        """Create from dictionary, using the given settings for missing keys."""
        return cls(
            fatigue_threshold=data.get("fatigue_threshold", fatigue_threshold),
            rotation_depth=data.get("rotation_depth", rotation_depth),
            target_minutes=dict(data.get("target_minutes", {})),
            closing_lineup=list(data.get("closing_lineup", [])),
        )


@dataclass
class SubstitutionSuggestion:
    """A recommendation to take a player off the floor."""

    player_out: str
    reason: str
    urgency: SubstitutionUrgency
    suggested_replacement: Optional[str] = None
