"""Game situation snapshot pushed in by the match simulator."""

from dataclasses import dataclass, replace

CLUTCH_QUARTER = 4
CLUTCH_CLOCK_SECONDS = 300
CLUTCH_MAX_MARGIN = 10


@dataclass(frozen=True)
class GameSituation:
    """
    Read-only view of the game from one team's perspective.

    The simulator supplies a fresh snapshot after every game event. Scores
    are from the coached team's point of view, so ``score_diff`` is positive
    when leading.

    Attributes:
        quarter: Current quarter (5+ for overtime)
        game_clock: Seconds remaining in the quarter
        shot_clock: Seconds remaining on the shot clock
        team_score: Coached team's points
        opponent_score: Opponent's points
        has_possession: Whether the coached team has the ball
    """

    quarter: int = 1
    game_clock: float = 720.0
    shot_clock: float = 24.0
    team_score: int = 0
    opponent_score: int = 0
    has_possession: bool = False

    @property
    def score_diff(self) -> int:
        """Team score minus opponent score."""
        return self.team_score - self.opponent_score

    @property
    def is_tied(self) -> bool:
        return self.score_diff == 0

    @property
    def is_first_half(self) -> bool:
        return self.quarter <= 2

    @property
    def is_clutch_time(self) -> bool:
        """Fourth quarter or later, under five minutes, within ten points."""
        return (
            self.quarter >= CLUTCH_QUARTER
            and self.game_clock < CLUTCH_CLOCK_SECONDS
            and abs(self.score_diff) <= CLUTCH_MAX_MARGIN
        )

    @property
    def clock_display(self) -> str:
        """Game clock as M:SS."""
        total = max(0, int(self.game_clock))
        return f"{total // 60}:{total % 60:02d}"

    def with_scores(self, team_score: int, opponent_score: int) -> "GameSituation":
        """Copy of this snapshot with a new score."""
        return replace(self, team_score=team_score, opponent_score=opponent_score)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "quarter": self.quarter,
            "game_clock": self.game_clock,
            "shot_clock": self.shot_clock,
            "team_score": self.team_score,
            "opponent_score": self.opponent_score,
            "has_possession": self.has_possession,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GameSituation":
        """Create from dictionary."""
        return cls(
            quarter=data.get("quarter", 1),
            game_clock=data.get("game_clock", 720.0),
            shot_clock=data.get("shot_clock", 24.0),
            team_score=data.get("team_score", 0),
            opponent_score=data.get("opponent_score", 0),
            has_possession=data.get("has_possession", False),
        )
