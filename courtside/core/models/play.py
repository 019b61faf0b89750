"""Play call and set play models."""

from dataclasses import dataclass, field
from typing import Optional

from courtside.core.enums import PlayCategory, PlaySituation, PlayType


@dataclass
class SetPlay:
    """
    A named play stored in a team's playbook.

    Attributes:
        play_id: Unique identifier within the playbook
        name: Display name (e.g., "Horns Flare")
        play_type: Primary action the play runs
        category: Broad family of the play
        situation: Situation the play was designed for
        tags: Free-form descriptors ("screening", "lob")
        times_run: Number of times called this season
        times_successful: Number of those that produced a good shot or score
    """

    play_id: str
    name: str
    play_type: PlayType = PlayType.MOTION_OFFENSE
    category: PlayCategory = PlayCategory.HALF_COURT
    situation: PlaySituation = PlaySituation.GENERAL
    tags: list[str] = field(default_factory=list)
    times_run: int = 0
    times_successful: int = 0

    @property
    def success_rate(self) -> float:
        """Fraction of runs that succeeded (0.0 if never run)."""
        if self.times_run == 0:
            return 0.0
        return self.times_successful / self.times_run

    def record_result(self, success: bool) -> None:
        self.times_run += 1
        if success:
            self.times_successful += 1

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "play_id": self.play_id,
            "name": self.name,
            "play_type": self.play_type.value,
            "category": self.category.value,
            "situation": self.situation.value,
            "tags": list(self.tags),
            "times_run": self.times_run,
            "times_successful": self.times_successful,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SetPlay":
        """Create from dictionary."""
        return cls(
            play_id=data["play_id"],
            name=data["name"],
            play_type=PlayType(data.get("play_type", PlayType.MOTION_OFFENSE.value)),
            category=PlayCategory(data.get("category", PlayCategory.HALF_COURT.value)),
            situation=PlaySituation(data.get("situation", PlaySituation.GENERAL.value)),
            tags=list(data.get("tags", [])),
            times_run=data.get("times_run", 0),
            times_successful=data.get("times_successful", 0),
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.play_type.value})"


@dataclass
class PlayCall:
    """
    A concrete play call made during the game.

    ``timestamp`` is the game clock (seconds left in the quarter) when the
    call was made. ``play_id`` links an ATO call to the set play the
    playbook picked for it, when there was one.
    """

    play_type: PlayType
    primary_player_id: Optional[str] = None
    secondary_player_id: Optional[str] = None
    is_ato: bool = False
    timestamp: float = 0.0
    play_id: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "play_type": self.play_type.value,
            "primary_player_id": self.primary_player_id,
            "secondary_player_id": self.secondary_player_id,
            "is_ato": self.is_ato,
            "timestamp": self.timestamp,
            "play_id": self.play_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlayCall":
        """Create from dictionary."""
        return cls(
            play_type=PlayType(data["play_type"]),
            primary_player_id=data.get("primary_player_id"),
            secondary_player_id=data.get("secondary_player_id"),
            is_ato=data.get("is_ato", False),
            timestamp=data.get("timestamp", 0.0),
            play_id=data.get("play_id"),
        )
