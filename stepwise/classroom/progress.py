"""
AppState - In-memory learner progress with write-through persistence.

Owns the progress record for one exercise sequence:
- Current exercise (by index or name)
- Done flags and the cached done count
- Next pending exercise search

Every mutation that changes the record writes the state file before
returning.
"""

import logging
from typing import Optional, Sequence

from stepwise.errors import ExerciseIndexError, ExerciseNotFoundError
from stepwise.schemas import Exercise, ExercisesProgress

from .state_file import StateFile

logger = logging.getLogger(__name__)


class AppState:
    """
    Authoritative view of progress through an exercise sequence.

    The exercise sequence is shared with other components (runner, list
    view) and never modified here. Done flags are only exposed as a tuple;
    change them through set_pending() and done_current_exercise() so the
    done count stays in sync.
    """

    def __init__(self, exercises: Sequence[Exercise], state_file: Optional[StateFile] = None):
        """
        Load progress for `exercises`.

        Args:
            exercises: Ordered, non-empty exercise sequence
            state_file: Where progress is stored (default: ./.stepwise-state.json)
        """
        self._exercises = tuple(exercises)
        if not self._exercises:
            raise ValueError("At least one exercise is required")

        self.state_file = state_file or StateFile()
        self._record = self.state_file.read_or_default(self._exercises)
        self._done_count = sum(self._record.progress)
        self._current_exercise = self._exercises[self._record.current_exercise_ind]

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def exercises(self) -> tuple[Exercise, ...]:
        return self._exercises

    @property
    def current_exercise_ind(self) -> int:
        return self._record.current_exercise_ind

    @property
    def current_exercise(self) -> Exercise:
        return self._current_exercise

    @property
    def progress(self) -> tuple[bool, ...]:
        """Done flags, index-aligned with `exercises`."""
        return tuple(self._record.progress)

    @property
    def done_count(self) -> int:
        return self._done_count

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def set_current_exercise_ind(self, ind: int):
        """
        Make the exercise at `ind` the current one.

        Raises:
            ExerciseIndexError: If there is no exercise at `ind`
            StatePersistenceError: If the state file can't be written
        """
        if not 0 <= ind < len(self._exercises):
            raise ExerciseIndexError(ind, len(self._exercises))

        self._record.current_exercise_ind = ind
        self._current_exercise = self._exercises[ind]
        logger.info("Current exercise: %s", self._current_exercise.name)

        self.state_file.write(self._record)

    def set_current_exercise_by_name(self, name: str):
        """
        Make the exercise called `name` the current one.

        Raises:
            ExerciseNotFoundError: If no exercise has that name
            StatePersistenceError: If the state file can't be written
        """
        for ind, exercise in enumerate(self._exercises):
            if exercise.name == name:
                self.set_current_exercise_ind(ind)
                return
        raise ExerciseNotFoundError(name)

    # -------------------------------------------------------------------------
    # Completion
    # -------------------------------------------------------------------------

    def set_pending(self, ind: int):
        """
        Mark the exercise at `ind` as not done.

        Does nothing (and writes nothing) if it is already pending.

        Raises:
            ExerciseIndexError: If there is no exercise at `ind`
            StatePersistenceError: If the state file can't be written
        """
        if not 0 <= ind < len(self._record.progress):
            raise ExerciseIndexError(ind, len(self._record.progress))

        if self._record.progress[ind]:
            self._record.progress[ind] = False
            self._done_count -= 1
            logger.info("Exercise %s reset to pending", self._exercises[ind].name)
            self.state_file.write(self._record)

    def next_exercise_ind(self) -> Optional[int]:
        """
        Find the pending exercise to continue with.

        Searches forward from the current exercise, then wraps around to
        the start. When the current exercise is the last one, only the
        exercises before it are searched. Otherwise the wrap-around includes
        the current exercise, so a pending current exercise is returned
        when nothing else is pending.

        Returns:
            Index of the next pending exercise, or None if all are done
        """
        progress = self._record.progress
        current_ind = self._record.current_exercise_ind

        if current_ind == len(progress) - 1:
            return _first_pending(progress, 0, current_ind)

        next_ind = _first_pending(progress, current_ind + 1, len(progress))
        if next_ind is not None:
            return next_ind
        return _first_pending(progress, 0, current_ind + 1)

    def done_current_exercise(self) -> ExercisesProgress:
        """
        Mark the current exercise as done and move to the next pending one.

        Returns:
            ExercisesProgress.PENDING if there is an exercise left (it is now
            the current one), ExercisesProgress.ALL_DONE otherwise

        Raises:
            StatePersistenceError: If the state file can't be written
        """
        current_ind = self._record.current_exercise_ind
        newly_done = not self._record.progress[current_ind]
        if newly_done:
            self._record.progress[current_ind] = True
            self._done_count += 1
            logger.info("Exercise %s done", self._current_exercise.name)

        next_ind = self.next_exercise_ind()
        if next_ind is None:
            logger.info("All %d exercises done", len(self._exercises))
            if newly_done:
                self.state_file.write(self._record)
            return ExercisesProgress.ALL_DONE

        self.set_current_exercise_ind(next_ind)
        return ExercisesProgress.PENDING


def _first_pending(progress: Sequence[bool], start: int, stop: int) -> Optional[int]:
    """Index of the first pending flag in progress[start:stop], if any."""
    return next((ind for ind in range(start, stop) if not progress[ind]), None)
