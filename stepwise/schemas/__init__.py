"""
Stepwise Schemas - Pydantic models for exercise progress tracking.

This module exports all schema classes for:
- Exercise: exercise descriptors and the manifest that lists them
- Progress: the persisted progress record
"""

# Exercise schemas
from .exercise import (
    Exercise,
    ExerciseManifest,
)

# Progress schemas
from .progress import (
    ExercisesProgress,
    ProgressRecord,
)

__all__ = [
    # Exercise
    'Exercise',
    'ExerciseManifest',
    # Progress
    'ExercisesProgress',
    'ProgressRecord',
]
