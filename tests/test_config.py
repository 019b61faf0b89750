"""Tests for engine configuration."""

import pytest

from courtside.config import EngineConfig, get_config, set_config


class TestEnvironmentDefaults:

    def test_builtin_defaults(self, monkeypatch):
        for name in (
            "COURTSIDE_TIMEOUTS_PER_GAME",
            "COURTSIDE_FOULS_TO_GIVE",
            "COURTSIDE_QUARTER_LENGTH",
            "COURTSIDE_RNG_SEED",
            "COURTSIDE_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)

        config = EngineConfig()

        assert config.timeouts_per_game == 7
        assert config.fouls_to_give_per_quarter == 4
        assert config.quarter_length_seconds == 720.0
        assert config.shot_clock_seconds == 24.0
        assert config.rng_seed is None
        assert config.log_level == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("COURTSIDE_TIMEOUTS_PER_GAME", "6")
        monkeypatch.setenv("COURTSIDE_QUARTER_LENGTH", "600")
        monkeypatch.setenv("COURTSIDE_RNG_SEED", "11")
        monkeypatch.setenv("COURTSIDE_LOG_LEVEL", "debug")

        config = EngineConfig.from_env()

        assert config.timeouts_per_game == 6
        assert config.quarter_length_seconds == 600.0
        assert config.rng_seed == 11
        assert config.log_level == "DEBUG"

    def test_explicit_values_win(self, monkeypatch):
        monkeypatch.setenv("COURTSIDE_TIMEOUTS_PER_GAME", "6")
        assert EngineConfig(timeouts_per_game=3).timeouts_per_game == 3


class TestValidation:

    def test_valid_config(self, config):
        assert config.validate() == []

    @pytest.mark.parametrize("overrides,fragment", [
        ({"timeouts_per_game": -1}, "timeouts_per_game"),
        ({"fouls_to_give_per_quarter": -1}, "fouls_to_give_per_quarter"),
        ({"quarter_length_seconds": 0.0}, "quarter_length_seconds"),
        ({"shot_clock_seconds": 0.0}, "shot_clock_seconds"),
        ({"challenge_success_probability": 1.5}, "challenge_success_probability"),
        ({"log_level": "LOUD"}, "log_level"),
    ])
    def test_invalid_values_reported(self, config, overrides, fragment):
        for key, value in overrides.items():
            setattr(config, key, value)

        errors = config.validate()

        assert len(errors) == 1
        assert fragment in errors[0]


class TestGlobalConfig:

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_set_config_replaces(self, config):
        set_config(config)
        assert get_config() is config

    def test_reset_rereads_environment(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("COURTSIDE_FOULS_TO_GIVE", "2")

        set_config(None)

        assert get_config() is not first
        assert get_config().fouls_to_give_per_quarter == 2


class TestRandomSource:

    def test_seeded_rng_is_deterministic(self, config):
        first = [config.make_rng().random() for _ in range(3)]
        second = [config.make_rng().random() for _ in range(3)]
        assert first == second
