"""Scoring runs and momentum."""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MOMENTUM_MIN = 0.0
MOMENTUM_MAX = 100.0
MOMENTUM_NEUTRAL = 50.0
MOMENTUM_PER_POINT = 2.0
MOMENTUM_PER_STOP = 3.0


def _clamp_momentum(value: float) -> float:
    return max(MOMENTUM_MIN, min(MOMENTUM_MAX, value))


@dataclass
class MomentumTracker:
    """
    Bounded momentum scalar plus the current scoring run for each side.

    A score by either team ends the other team's run.
    """

    momentum: float = MOMENTUM_NEUTRAL
    team_run_points: int = 0
    opponent_run_points: int = 0
    consecutive_stops: int = 0
    consecutive_scores: int = 0

    def record_team_points(self, points: int) -> None:
        points = max(0, points)
        if self.opponent_run_points:
            logger.debug("Opponent run ended at %d", self.opponent_run_points)
        self.team_run_points += points
        self.opponent_run_points = 0
        logger.debug("Team run at %d", self.team_run_points)
        self.consecutive_scores += 1
        self.momentum = _clamp_momentum(self.momentum + points * MOMENTUM_PER_POINT)

    def record_opponent_points(self, points: int) -> None:
        points = max(0, points)
        if self.team_run_points:
            logger.debug("Team run ended at %d", self.team_run_points)
        self.opponent_run_points += points
        self.team_run_points = 0
        logger.debug("Opponent run at %d", self.opponent_run_points)
        self.consecutive_stops = 0
        self.momentum = _clamp_momentum(self.momentum - points * MOMENTUM_PER_POINT)

    def record_defensive_stop(self) -> None:
        self.consecutive_stops += 1
        self.momentum = _clamp_momentum(self.momentum + MOMENTUM_PER_STOP)

    def clear_opponent_run(self) -> None:
        self.opponent_run_points = 0

    def reset_run(self) -> None:
        self.opponent_run_points = 0
        self.team_run_points = 0

    @property
    def run_differential(self) -> int:
        """Positive while the team is on a run, negative while the opponent is."""
        return self.team_run_points - self.opponent_run_points

    def to_dict(self) -> dict:
        return {
            "momentum": self.momentum,
            "team_run_points": self.team_run_points,
            "opponent_run_points": self.opponent_run_points,
            "consecutive_stops": self.consecutive_stops,
            "consecutive_scores": self.consecutive_scores,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MomentumTracker":
        return cls(
            momentum=_clamp_momentum(data.get("momentum", MOMENTUM_NEUTRAL)),
            team_run_points=max(0, data.get("team_run_points", 0)),
            opponent_run_points=max(0, data.get("opponent_run_points", 0)),
            consecutive_stops=data.get("consecutive_stops", 0),
            consecutive_scores=data.get("consecutive_scores", 0),
        )
