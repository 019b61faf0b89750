"""Courtside API package - FastAPI backend for the coaching engine."""

from courtside.api.main import app, create_app

__all__ = ["app", "create_app"]
