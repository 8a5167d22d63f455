"""
Progress schemas for Stepwise.

Defines Pydantic models for learner progress including:
- The persisted progress record (state file contents)
- The outcome of completing the current exercise
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ExercisesProgress(str, Enum):
    ALL_DONE = "all_done"
    PENDING = "pending"


class ProgressRecord(BaseModel):
    """
    Contents of the state file.

    Strict on purpose: unknown fields and loosely typed values are rejected
    so that a record written by an incompatible version is discarded.
    """
    model_config = ConfigDict(extra="forbid", strict=True)

    current_exercise_ind: int = Field(..., ge=0)
    progress: list[bool]  # one flag per exercise, in exercise order

    @classmethod
    def default(cls, total: int) -> "ProgressRecord":
        """Fresh record: first exercise current, nothing done."""
        return cls(current_exercise_ind=0, progress=[False] * total)

    def matches(self, total: int) -> bool:
        """Check the record against an exercise sequence of `total` items."""
        return len(self.progress) == total and self.current_exercise_ind < total
