"""
Error types raised by Stepwise.

Bad caller input (unknown index or name) raises a ProgressValidationError
subclass; failing to persist raises StatePersistenceError. A corrupt or
outdated state file is not an error at all: it is replaced by defaults.
"""

from pathlib import Path


class StepwiseError(Exception):
    """Base class for all Stepwise errors."""


class ProgressValidationError(StepwiseError):
    """The caller referred to an exercise that doesn't exist."""


class ExerciseIndexError(ProgressValidationError, IndexError):
    def __init__(self, index: int, total: int):
        self.index = index
        self.total = total
        super().__init__(
            f"Exercise index {index} is out of range (there are {total} exercises)"
        )


class ExerciseNotFoundError(ProgressValidationError, LookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No exercise found for '{name}'")


class StatePersistenceError(StepwiseError):
    """The progress record could not be serialized or written."""

    def __init__(self, path: Path, reason: object):
        self.path = path
        super().__init__(f"Failed to write the state file {path}: {reason}")


class ManifestError(StepwiseError):
    """The exercise manifest is missing or invalid."""
