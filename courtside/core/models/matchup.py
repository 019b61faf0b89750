"""Defensive assignment model."""

from dataclasses import dataclass

from courtside.core.enums import MatchupPriority


@dataclass
class Matchup:
    """One defender's assignment."""

    defender_id: str
    opponent_id: str
    priority: MatchupPriority = MatchupPriority.NORMAL

    def to_dict(self) -> dict:
        return {
            "defender_id": self.defender_id,
            "opponent_id": self.opponent_id,
            "priority": self.priority.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Matchup":
        return cls(
            defender_id=data["defender_id"],
            opponent_id=data["opponent_id"],
            priority=MatchupPriority(data.get("priority", MatchupPriority.NORMAL.value)),
        )
