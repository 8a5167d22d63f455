"""Shared fixtures for Stepwise tests."""

from pathlib import Path

import pytest

from stepwise.classroom import AppState, StateFile
from stepwise.schemas import Exercise, ProgressRecord


class RecordingStateFile(StateFile):
    """StateFile that counts writes."""

    def __init__(self, path):
        super().__init__(path)
        self.writes = 0

    def write(self, record):
        self.writes += 1
        super().write(record)


def make_exercises(count: int) -> tuple[Exercise, ...]:
    return tuple(
        Exercise(name=f"ex{i}", path=Path(f"exercises/ex{i}.py"))
        for i in range(count)
    )


@pytest.fixture
def exercises():
    return make_exercises(5)


@pytest.fixture
def state_file(tmp_path):
    return RecordingStateFile(tmp_path / "state.json")


@pytest.fixture
def make_app_state(state_file):
    """Build an AppState from a stored record; the write counter starts at 0."""
    def _make(current: int, progress: list[bool]) -> AppState:
        StateFile(state_file.path).write(
            ProgressRecord(current_exercise_ind=current, progress=progress)
        )
        return AppState(make_exercises(len(progress)), state_file)
    return _make


ENV_VARS = ("STEPWISE_STATE_FILE", "STEPWISE_MANIFEST", "STEPWISE_LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Unset Stepwise variables and restore them (including .env values) afterwards."""
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
