"""
Configuration for Stepwise.

Settings come from environment variables. A `.env` file in the working
directory is loaded first; variables already set in the environment win.

    STEPWISE_STATE_FILE   state file path (default: .stepwise-state.json)
    STEPWISE_MANIFEST     exercise manifest path (default: exercises.yaml)
    STEPWISE_LOG_LEVEL    logging level name (default: INFO)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator


DEFAULT_STATE_FILE = Path(".stepwise-state.json")
DEFAULT_MANIFEST = Path("exercises.yaml")
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    state_file: Path = DEFAULT_STATE_FILE
    manifest: Path = DEFAULT_MANIFEST
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator('log_level')
    @classmethod
    def level_known(cls, v):
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Load settings from `.env` and the environment.

    Args:
        env_file: Optional .env path (default: ./.env)

    Returns:
        Validated Settings
    """
    load_dotenv(env_file or Path.cwd() / ".env")
    return Settings(
        state_file=os.environ.get("STEPWISE_STATE_FILE", DEFAULT_STATE_FILE),
        manifest=os.environ.get("STEPWISE_MANIFEST", DEFAULT_MANIFEST),
        log_level=os.environ.get("STEPWISE_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )


def setup_logging(level: Optional[str] = None):
    """Configure root logging; the level defaults to STEPWISE_LOG_LEVEL."""
    logging.basicConfig(
        level=level or load_settings().log_level,
        format=LOG_FORMAT,
    )
