"""API routers for different resource types."""

from courtside.api.routers.coach import router as coach_router

__all__ = ["coach_router"]
