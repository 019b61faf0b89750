"""Shared pytest fixtures for Courtside tests."""

import random

import pytest

from courtside.coaching import CoachEngine
from courtside.config import EngineConfig, set_config
from courtside.core.enums import PlayCategory, PlaySituation, PlayType
from courtside.core.models.play import SetPlay
from courtside.core.models.situation import GameSituation
from courtside.core.models.strategy import (
    DefensiveSchemeType,
    OffensiveSystemType,
    PacePreference,
    TeamStrategy,
)
from courtside.core.playbook import Playbook
from courtside.events import EventBus, EventRecorder


class ScriptedRandom(random.Random):
    """Random source that returns a fixed sequence from ``random()``."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_global_config():
    """Keep the global config from leaking between tests."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def config() -> EngineConfig:
    """Default league rules with a fixed seed."""
    return EngineConfig(
        timeouts_per_game=7,
        fouls_to_give_per_quarter=4,
        quarter_length_seconds=720.0,
        challenge_success_probability=0.4,
        fatigue_threshold=70,
        rotation_depth=9,
        rng_seed=42,
        log_level="INFO",
    )


@pytest.fixture
def scripted_rng():
    """Factory for random sources with scripted draws."""
    return ScriptedRandom


# =============================================================================
# Game Fixtures
# =============================================================================


@pytest.fixture
def lineup() -> list[str]:
    return ["A", "B", "C", "D", "E"]


@pytest.fixture
def tied_late_situation() -> GameSituation:
    """Tied with the ball, 20 seconds left in the fourth."""
    return GameSituation(
        quarter=4,
        game_clock=20.0,
        shot_clock=20.0,
        team_score=100,
        opponent_score=100,
        has_possession=True,
    )


@pytest.fixture
def strategy() -> TeamStrategy:
    return TeamStrategy(
        pace_preference=PacePreference.PUSH_WHEN_POSSIBLE,
        offensive_system=OffensiveSystemType.HORNS_SET,
        defensive_scheme=DefensiveSchemeType.SWITCH_EVERYTHING,
    )


@pytest.fixture
def playbook() -> Playbook:
    """Playbook with general, ATO and late-game plays."""
    book = Playbook(team_id="hawks")
    plays = [
        SetPlay("horns_flare", "Horns Flare", PlayType.HORNS_ACTION),
        SetPlay("spain_pnr", "Spain Pick and Roll", PlayType.SPAIN_PNR),
        SetPlay("floppy", "Floppy", PlayType.FLOPPY),
        SetPlay("box_lob", "Box Lob", PlayType.LOB_PLAY, PlayCategory.INBOUND,
                PlaySituation.AFTER_TIMEOUT),
        SetPlay("iso_top", "Iso Top", PlayType.ISOLATION, PlayCategory.LATE_GAME,
                PlaySituation.LAST_SHOT),
    ]
    for play in plays:
        book.add_play(play)
    book.set_familiarity("horns_flare", 90)
    book.set_familiarity("spain_pnr", 60)
    book.set_familiarity("floppy", 75)
    book.set_familiarity("box_lob", 85)
    book.set_familiarity("iso_top", 70)
    return book


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def recorder(event_bus) -> EventRecorder:
    """Records every event published on ``event_bus``."""
    return EventRecorder(event_bus)


@pytest.fixture
def engine(config, event_bus, lineup) -> CoachEngine:
    """Engine with no strategy or playbook, tracking ``lineup``."""
    coach = CoachEngine(config=config, event_bus=event_bus, team_id="hawks")
    coach.set_lineup(lineup)
    return coach


@pytest.fixture
def engine_with_playbook(config, event_bus, playbook, strategy, lineup) -> CoachEngine:
    coach = CoachEngine(
        strategy=strategy,
        playbook=playbook,
        event_bus=event_bus,
        config=config,
        team_id="hawks",
    )
    coach.set_lineup(lineup)
    return coach
