"""
Exercise schemas for Stepwise.

An exercise is identified by its name; its ordinal is its position in the
sequence handed to the progress engine.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Exercise(BaseModel):
    """One exercise. Immutable once loaded."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    path: Path  # exercise source, relative to the course root
    hint: Optional[str] = None


class ExerciseManifest(BaseModel):
    """Top-level layout of an exercise manifest file."""
    model_config = ConfigDict(extra="forbid")

    exercises: list[Exercise] = Field(..., min_length=1)

    @field_validator('exercises')
    @classmethod
    def names_unique(cls, v):
        seen = set()
        for exercise in v:
            if exercise.name in seen:
                raise ValueError(f"Duplicate exercise name: {exercise.name}")
            seen.add(exercise.name)
        return v
