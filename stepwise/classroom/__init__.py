"""
Stepwise Classroom - Runtime components for tracking exercise progress.

This module provides:
- load_exercises: Load the exercise sequence from a manifest
- StateFile: Persist progress to disk
- AppState: Progress, navigation and next-exercise search
- ExerciseList: Model behind the interactive exercise list
"""

from .loader import load_exercises

from .state_file import StateFile

from .progress import AppState

from .listing import (
    ExerciseList,
    ExerciseRow,
    ListFilter,
)

__all__ = [
    # Loader
    "load_exercises",
    # State file
    "StateFile",
    # Progress
    "AppState",
    # Listing
    "ExerciseList",
    "ExerciseRow",
    "ListFilter",
]
