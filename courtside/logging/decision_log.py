"""In-memory log of coaching decisions for one game."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from courtside.core.models.situation import GameSituation
from courtside.events import (
    ChallengeResolvedEvent,
    CoachEvent,
    DecisionMadeEvent,
    EventBus,
    PlayCalledEvent,
    SubstitutionEvent,
    TechnicalFoulEvent,
    TimeoutCalledEvent,
)


@dataclass
class LogEntry:
    """Single entry in the decision log."""

    timestamp: datetime
    quarter: int
    time_remaining: str
    event_type: str  # "TACTIC", "TIMEOUT", "SUB", "PLAY", "CHALLENGE", "TECHNICAL"
    description: str
    team_score: int
    opponent_score: int
    team_id: Optional[str] = None


class DecisionLog:
    """
    Accumulates coaching decisions as they are published.

    Subscribes to an EventBus and keeps one entry per decision, which can be
    grouped by quarter and rendered by ``MarkdownCoachingWriter``.
    """

    def __init__(self, team_name: str = "TEAM", team_id: Optional[str] = None) -> None:
        self.team_name = team_name
        self.team_id = team_id
        self.entries: list[LogEntry] = []

    def connect_to_event_bus(self, event_bus: EventBus) -> None:
        """Subscribe to this team's coaching events on an event bus."""
        event_bus.subscribe(DecisionMadeEvent, self._handle_decision, team_id=self.team_id)
        event_bus.subscribe(TimeoutCalledEvent, self._handle_timeout, team_id=self.team_id)
        event_bus.subscribe(SubstitutionEvent, self._handle_substitution, team_id=self.team_id)
        event_bus.subscribe(PlayCalledEvent, self._handle_play_called, team_id=self.team_id)
        event_bus.subscribe(ChallengeResolvedEvent, self._handle_challenge, team_id=self.team_id)
        event_bus.subscribe(TechnicalFoulEvent, self._handle_technical, team_id=self.team_id)

    def add_entry(
        self,
        quarter: int,
        time_remaining: str,
        event_type: str,
        description: str,
        team_score: int,
        opponent_score: int,
        team_id: Optional[str] = None,
    ) -> LogEntry:
        """Add a log entry manually."""
        entry = LogEntry(
            timestamp=datetime.now(),
            quarter=quarter,
            time_remaining=time_remaining,
            event_type=event_type,
            description=description,
            team_score=team_score,
            opponent_score=opponent_score,
            team_id=team_id,
        )
        self.entries.append(entry)
        return entry

    def _log_event(self, event: CoachEvent, event_type: str, description: str) -> None:
        clock = GameSituation(game_clock=event.game_clock).clock_display
        self.add_entry(
            quarter=event.quarter,
            time_remaining=clock,
            event_type=event_type,
            description=description,
            team_score=event.team_score,
            opponent_score=event.opponent_score,
            team_id=event.team_id,
        )

    def _handle_decision(self, event: DecisionMadeEvent) -> None:
        self._log_event(event, "TACTIC", event.label)

    def _handle_timeout(self, event: TimeoutCalledEvent) -> None:
        result = event.result
        self._log_event(
            event, "TIMEOUT", f"Timeout ({result.reason}), {result.timeouts_left} left"
        )

    def _handle_substitution(self, event: SubstitutionEvent) -> None:
        result = event.result
        self._log_event(event, "SUB", f"{result.player_in} in for {result.player_out}")

    def _handle_play_called(self, event: PlayCalledEvent) -> None:
        self._log_event(event, "PLAY", f"Called {event.play.name}")

    def _handle_challenge(self, event: ChallengeResolvedEvent) -> None:
        outcome = "won" if event.result.challenge_won else "lost"
        self._log_event(event, "CHALLENGE", f"Challenge {outcome}")

    def _handle_technical(self, event: TechnicalFoulEvent) -> None:
        description = "Coach ejected" if event.result.was_ejected else "Technical foul on coach"
        self._log_event(event, "TECHNICAL", description)

    def get_entries_by_quarter(self) -> dict[int, list[LogEntry]]:
        """Group entries by quarter."""
        by_quarter: dict[int, list[LogEntry]] = {}
        for entry in self.entries:
            if entry.quarter not in by_quarter:
                by_quarter[entry.quarter] = []
            by_quarter[entry.quarter].append(entry)
        return by_quarter

    def get_entries_of_type(self, event_type: str) -> list[LogEntry]:
        return [e for e in self.entries if e.event_type == event_type]

    @property
    def timeout_count(self) -> int:
        """Total number of timeouts logged."""
        return len(self.get_entries_of_type("TIMEOUT"))

    @property
    def substitution_count(self) -> int:
        """Total number of substitution events logged."""
        return len(self.get_entries_of_type("SUB"))

    @property
    def play_call_count(self) -> int:
        """Total number of set plays called."""
        return len(self.get_entries_of_type("PLAY"))
