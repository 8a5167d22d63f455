"""
Exercise loader - Read the ordered exercise sequence from a YAML manifest.

Manifest layout:

    exercises:
      - name: intro1
        path: exercises/00_intro/intro1.py
      - name: variables1
        path: exercises/01_variables/variables1.py
        hint: Declare the variable before using it.

The order of the list is the order learners work through the exercises.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from stepwise.config import load_settings
from stepwise.errors import ManifestError
from stepwise.schemas import Exercise, ExerciseManifest

logger = logging.getLogger(__name__)


def load_exercises(manifest_path: Optional[Path | str] = None) -> tuple[Exercise, ...]:
    """
    Load and validate the exercise sequence.

    Args:
        manifest_path: Path to the YAML manifest (default: STEPWISE_MANIFEST,
            or ./exercises.yaml)

    Returns:
        Exercises in manifest order

    Raises:
        ManifestError: If the manifest is missing, unparsable, empty,
            has duplicate names, or has unknown keys
    """
    path = Path(manifest_path) if manifest_path is not None else load_settings().manifest
    if not path.exists():
        raise ManifestError(f"Exercise manifest not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ManifestError(f"Could not parse exercise manifest {path}: {e}") from e

    try:
        manifest = ExerciseManifest.model_validate(data or {})
    except ValidationError as e:
        raise ManifestError(f"Invalid exercise manifest {path}: {e}") from e

    logger.info("Loaded %d exercises from %s", len(manifest.exercises), path)
    return tuple(manifest.exercises)
