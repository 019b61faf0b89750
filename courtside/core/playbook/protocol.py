"""Interface the coaching engine uses to talk to a playbook."""

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from courtside.core.enums import PlaySituation
from courtside.core.models.play import SetPlay


@dataclass(frozen=True)
class PlaySelectionState:
    """Situation snapshot handed to the playbook when asking for plays."""

    quarter: int = 1
    clock_seconds: float = 720.0
    score_diff: int = 0  # Positive = leading
    shot_clock: float = 24.0
    just_called_timeout: bool = False
    is_sideline_inbound: bool = False
    is_baseline_inbound: bool = False
    opponent_in_zone: bool = False
    fouls_to_give: int = 0


@runtime_checkable
class PlaybookProvider(Protocol):
    """Anything that can resolve play ids and recommend plays."""

    def get_play(self, play_id: str) -> Optional[SetPlay]:
        ...

    def get_recommended_plays(self, state: PlaySelectionState) -> list[SetPlay]:
        ...

    def get_best_play_for_situation(self, situation: PlaySituation) -> Optional[SetPlay]:
        ...
