"""
Coaching engine configuration.

League rules (timeouts, fouls to give) and engine defaults. All settings can
be overridden via environment variables.
"""

import os
import random
from dataclasses import dataclass, field
from typing import Optional

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


def _env_seed() -> Optional[int]:
    value = os.getenv("COURTSIDE_RNG_SEED")
    return int(value) if value else None


@dataclass
class EngineConfig:
    """Configuration for a coaching engine instance."""

    # League rules
    timeouts_per_game: int = field(
        default_factory=lambda: _env_int("COURTSIDE_TIMEOUTS_PER_GAME", 7)
    )
    fouls_to_give_per_quarter: int = field(
        default_factory=lambda: _env_int("COURTSIDE_FOULS_TO_GIVE", 4)
    )
    quarter_length_seconds: float = field(
        default_factory=lambda: _env_float("COURTSIDE_QUARTER_LENGTH", 720.0)
    )
    shot_clock_seconds: float = 24.0

    # Engine defaults
    challenge_success_probability: float = field(
        default_factory=lambda: _env_float("COURTSIDE_CHALLENGE_SUCCESS_PROBABILITY", 0.4)
    )
    fatigue_threshold: int = field(
        default_factory=lambda: _env_int("COURTSIDE_FATIGUE_THRESHOLD", 70)
    )
    rotation_depth: int = field(
        default_factory=lambda: _env_int("COURTSIDE_ROTATION_DEPTH", 9)
    )

    # Seed for the engine's random source; None = nondeterministic
    rng_seed: Optional[int] = field(default_factory=_env_seed)

    log_level: str = field(
        default_factory=lambda: os.getenv("COURTSIDE_LOG_LEVEL", "INFO").upper()
    )

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create config from environment variables."""
        return cls()

    def make_rng(self) -> random.Random:
        """Create the random source an engine should use."""
        return random.Random(self.rng_seed)

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.timeouts_per_game < 0:
            errors.append("timeouts_per_game must be >= 0")
        if self.fouls_to_give_per_quarter < 0:
            errors.append("fouls_to_give_per_quarter must be >= 0")
        if self.quarter_length_seconds <= 0:
            errors.append("quarter_length_seconds must be > 0")
        if self.shot_clock_seconds <= 0:
            errors.append("shot_clock_seconds must be > 0")
        if not 0.0 <= self.challenge_success_probability <= 1.0:
            errors.append("challenge_success_probability must be between 0 and 1")
        if self.log_level not in LOG_LEVELS:
            errors.append(f"log_level must be one of {sorted(LOG_LEVELS)}")
        return errors


# Singleton config instance
_config: Optional[EngineConfig] = None


def get_config() -> EngineConfig:
    """Get the global engine configuration."""
    global _config
    if _config is None:
        _config = EngineConfig.from_env()
    return _config


def set_config(config: Optional[EngineConfig]) -> None:
    """
    Replace the global configuration.

    Passing None makes the next ``get_config()`` re-read the environment.
    Useful for testing.
    """
    global _config
    _config = config
