"""In-memory store of coaching sessions, one engine per game."""

import logging
import random
import uuid
from dataclasses import dataclass
from typing import Optional

from courtside.coaching.engine import CoachEngine
from courtside.core.models.play import SetPlay
from courtside.core.models.strategy import TeamStrategy
from courtside.core.playbook import Playbook
from courtside.events import EventBus
from courtside.logging import DecisionLog

logger = logging.getLogger(__name__)


@dataclass
class CoachSession:
    """A coached game: its engine plus the decision log listening to it."""

    game_id: str
    team_name: str
    engine: CoachEngine
    decision_log: DecisionLog


class CoachSessionManager:
    """Manages active coaching sessions."""

    def __init__(self) -> None:
        self._sessions: dict[str, CoachSession] = {}

    def create_session(
        self,
        team_name: str = "TEAM",
        strategy: Optional[TeamStrategy] = None,
        plays: Optional[list[SetPlay]] = None,
        familiarity: Optional[dict[str, int]] = None,
        lineup: Optional[list[str]] = None,
        team_id: Optional[str] = None,
        seed: Optional[int] = None,
    ) -> CoachSession:
        """Create a session with its own engine, event bus and decision log."""
        game_id = f"game_{uuid.uuid4().hex[:8]}"

        playbook = None
        if plays:
            playbook = Playbook(team_id=team_id or game_id)
            for play in plays:
                playbook.add_play(play)
            for play_id, value in (familiarity or {}).items():
                playbook.set_familiarity(play_id, value)

        event_bus = EventBus()
        decision_log = DecisionLog(team_name=team_name, team_id=team_id)
        decision_log.connect_to_event_bus(event_bus)

        engine = CoachEngine(
            strategy=strategy,
            playbook=playbook,
            event_bus=event_bus,
            rng=random.Random(seed) if seed is not None else None,
            team_id=team_id,
        )
        if lineup:
            engine.set_lineup(lineup)

        session = CoachSession(
            game_id=game_id,
            team_name=team_name,
            engine=engine,
            decision_log=decision_log,
        )
        self._sessions[game_id] = session
        logger.info("Started coaching session %s for %s", game_id, team_name)
        return session

    def get_session(self, game_id: str) -> Optional[CoachSession]:
        """Get a session by ID."""
        return self._sessions.get(game_id)

    def remove_session(self, game_id: str) -> bool:
        """Remove a session. Returns False if there was no such session."""
        session = self._sessions.pop(game_id, None)
        if session is None:
            return False
        session.engine.event_bus.clear()
        logger.info("Ended coaching session %s", game_id)
        return True

    def cleanup_all(self) -> None:
        for game_id in list(self._sessions):
            self.remove_session(game_id)

    @property
    def active_sessions(self) -> list[str]:
        """List of active game IDs."""
        return list(self._sessions.keys())


# Global session manager
session_manager = CoachSessionManager()
