"""
Team Playbook.

In-memory store of a team's set plays. Implements ``PlaybookProvider`` so
the coaching engine can resolve play ids, pick an after-timeout play and
rank plays for the current game situation.
"""

from dataclasses import dataclass, field
from typing import Optional

from courtside.core.enums import PlayCategory, PlaySituation
from courtside.core.models.play import SetPlay
from courtside.core.playbook.protocol import PlaySelectionState

# Plays with at least this much familiarity are considered game-ready
FAMILIARITY_FOR_GAME_READY = 50
FAMILIARITY_TO_MASTER = 85
MIN_RECOMMENDATIONS = 3
MAX_RECOMMENDATIONS = 5

UP_BIG_MARGIN = 15
CLOSE_GAME_MARGIN = 5
LATE_CLOCK_SECONDS = 24


def determine_situation(state: PlaySelectionState) -> PlaySituation:
    """
    Classify a game state into the situation a play should be chosen for.

    Checks run in priority order: after a timeout, end of game, end of
    quarter, inbound plays, margin-based situations, then zone offense.
    """
    if state.just_called_timeout:
        return PlaySituation.AFTER_TIMEOUT

    if state.quarter >= 4 and state.clock_seconds < LATE_CLOCK_SECONDS:
        if state.score_diff == -3:
            return PlaySituation.NEED_THREE
        if state.score_diff in (-1, -2):
            return PlaySituation.NEED_TWO
        return PlaySituation.LAST_SHOT

    if state.clock_seconds < LATE_CLOCK_SECONDS:
        return PlaySituation.LAST_SHOT

    if state.is_sideline_inbound:
        return PlaySituation.SIDELINE_INBOUND
    if state.is_baseline_inbound:
        return PlaySituation.BASELINE_INBOUND

    if state.score_diff >= UP_BIG_MARGIN:
        return PlaySituation.UP_BIG
    if state.score_diff <= -UP_BIG_MARGIN:
        return PlaySituation.DOWN_BIG
    if abs(state.score_diff) <= CLOSE_GAME_MARGIN and state.quarter >= 4:
        return PlaySituation.CLOSE_GAME

    if state.opponent_in_zone:
        return PlaySituation.VERSUS_ZONE

    return PlaySituation.GENERAL


@dataclass
class Playbook:
    """
    A team's active playbook.

    Attributes:
        team_id: The team this playbook belongs to
        plays: Play id -> set play definition
        situational_preferences: Situation -> ordered play ids the coach
            prefers in that situation
        familiarity: Play id -> how well the roster knows the play (0-100)
    """

    team_id: str = ""
    plays: dict[str, SetPlay] = field(default_factory=dict)
    situational_preferences: dict[PlaySituation, list[str]] = field(default_factory=dict)
    familiarity: dict[str, int] = field(default_factory=dict)

    @property
    def play_count(self) -> int:
        return len(self.plays)

    @property
    def mastered_play_count(self) -> int:
        return sum(1 for value in self.familiarity.values() if value >= FAMILIARITY_TO_MASTER)

    def has_play(self, play_id: str) -> bool:
        """Check if a play is in the playbook."""
        return play_id in self.plays

    def get_play(self, play_id: str) -> Optional[SetPlay]:
        """Get play definition if it's in the playbook."""
        return self.plays.get(play_id)

    def add_play(self, play: SetPlay) -> bool:
        """
        Add a play to the playbook.

        Returns True if play was added, False if the id is already present.
        """
        if play.play_id in self.plays:
            return False
        self.plays[play.play_id] = play
        return True

    def remove_play(self, play_id: str) -> bool:
        """
        Remove a play and any situational references to it.

        Returns True if play was removed, False if not present.
        """
        if play_id not in self.plays:
            return False
        del self.plays[play_id]
        self.familiarity.pop(play_id, None)
        for preferred in self.situational_preferences.values():
            if play_id in preferred:
                preferred.remove(play_id)
        return True

    def set_situational_plays(self, situation: PlaySituation, play_ids: list[str]) -> None:
        """Set the coach's preferred plays for a situation (unknown ids are dropped)."""
        self.situational_preferences[situation] = [
            play_id for play_id in play_ids if play_id in self.plays
        ]

    def set_familiarity(self, play_id: str, value: int) -> None:
        self.familiarity[play_id] = max(0, min(100, value))

    def get_familiarity(self, play_id: str) -> int:
        return self.familiarity.get(play_id, 0)

    def is_game_ready(self, play_id: str) -> bool:
        return self.get_familiarity(play_id) >= FAMILIARITY_FOR_GAME_READY

    def get_plays_by_situation(self, situation: PlaySituation) -> list[SetPlay]:
        return [play for play in self.plays.values() if play.situation == situation]

    def get_plays_by_category(self, category: PlayCategory) -> list[SetPlay]:
        return [play for play in self.plays.values() if play.category == category]

    def get_best_play_for_situation(self, situation: PlaySituation) -> Optional[SetPlay]:
        """
        Pick the play to run in a situation.

        Coach preferences win; otherwise the first play designed for the
        situation, then the first general play.
        """
        for play_id in self.situational_preferences.get(situation, []):
            play = self.get_play(play_id)
            if play is not None:
                return play

        for play in self.plays.values():
            if play.situation == situation:
                return play
        for play in self.plays.values():
            if play.situation == PlaySituation.GENERAL:
                return play
        return None

    def get_recommended_plays(self, state: PlaySelectionState) -> list[SetPlay]:
        """
        Rank plays for the current game state.

        Situation-specific plays come first; general plays fill the list up
        to five when fewer than three situational plays exist. Results are
        ordered by familiarity, then success rate.
        """
        situation = determine_situation(state)
        recommended = self.get_plays_by_situation(situation)

        if len(recommended) < MIN_RECOMMENDATIONS and situation != PlaySituation.GENERAL:
            general = sorted(
                self.get_plays_by_situation(PlaySituation.GENERAL),
                key=lambda play: self.get_familiarity(play.play_id),
                reverse=True,
            )
            recommended.extend(general[: MAX_RECOMMENDATIONS - len(recommended)])

        return sorted(
            recommended,
            key=lambda play: (self.get_familiarity(play.play_id), play.success_rate),
            reverse=True,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "team_id": self.team_id,
            "plays": [play.to_dict() for play in self.plays.values()],
            "situational_preferences": {
                situation.value: list(play_ids)
                for situation, play_ids in self.situational_preferences.items()
            },
            "familiarity": dict(self.familiarity),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Playbook":
        """Create from dictionary."""
        plays = [SetPlay.from_dict(item) for item in data.get("plays", [])]
        return cls(
            team_id=data.get("team_id", ""),
            plays={play.play_id: play for play in plays},
            situational_preferences={
                PlaySituation(key): list(value)
                for key, value in data.get("situational_preferences", {}).items()
            },
            familiarity=dict(data.get("familiarity", {})),
        )

    def __str__(self) -> str:
        return f"Playbook({self.play_count} plays)"
