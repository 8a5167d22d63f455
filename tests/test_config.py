"""Tests for settings and logging setup."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from stepwise.config import (
    DEFAULT_MANIFEST,
    DEFAULT_STATE_FILE,
    LOG_FORMAT,
    Settings,
    load_settings,
    setup_logging,
)


class TestSettings:

    def test_defaults(self, clean_env):
        settings = load_settings()
        assert settings.state_file == DEFAULT_STATE_FILE
        assert settings.manifest == DEFAULT_MANIFEST
        assert settings.log_level == "INFO"

    def test_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("STEPWISE_STATE_FILE", "progress/state.json")
        monkeypatch.setenv("STEPWISE_LOG_LEVEL", "debug")
        settings = load_settings()
        assert settings.state_file == Path("progress/state.json")
        assert settings.log_level == "DEBUG"

    def test_dotenv_file(self, clean_env):
        (clean_env / ".env").write_text("STEPWISE_MANIFEST=course/exercises.yaml\n", encoding="utf-8")
        assert load_settings().manifest == Path("course/exercises.yaml")

    def test_environment_wins_over_dotenv(self, clean_env, monkeypatch):
        (clean_env / ".env").write_text("STEPWISE_MANIFEST=from_dotenv.yaml\n", encoding="utf-8")
        monkeypatch.setenv("STEPWISE_MANIFEST", "from_env.yaml")
        assert load_settings().manifest == Path("from_env.yaml")

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_level_is_usable(self):
        assert logging.getLevelName(Settings(log_level="warning").log_level) == logging.WARNING


class TestSetupLogging:

    def test_uses_level_and_format(self, clean_env, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        setup_logging("DEBUG")
        setup_logging()

        assert calls[0] == {"level": "DEBUG", "format": LOG_FORMAT}
        assert calls[1]["level"] == "INFO"

    def test_level_from_environment(self, clean_env, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setenv("STEPWISE_LOG_LEVEL", "warning")

        setup_logging()

        assert calls[0]["level"] == "WARNING"
