"""API services."""

from courtside.api.services.session_manager import (
    CoachSession,
    CoachSessionManager,
    session_manager,
)

__all__ = ["CoachSession", "CoachSessionManager", "session_manager"]
