"""
ExerciseList - Data model behind the interactive exercise list.

Provides:
- Rows with done state and the "next" marker
- Done / pending filtering
- Selection movement
- Reset and continue-at actions on the selected row

Drawing the rows is left to the UI layer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from stepwise.schemas import Exercise

from .progress import AppState


class ListFilter(str, Enum):
    """Which exercises the list shows."""
    ALL = "all"
    DONE = "done"
    PENDING = "pending"


@dataclass(frozen=True)
class ExerciseRow:
    """One exercise as shown in the list."""
    index: int          # position in the exercise sequence
    exercise: Exercise
    done: bool
    is_next: bool       # the current exercise

    @property
    def state(self) -> str:
        return "DONE" if self.done else "PENDING"


class ExerciseList:
    """
    Filtered, selectable view over an AppState.

    `selected` is a position within the visible rows, not an exercise index.
    """

    def __init__(self, app_state: AppState, list_filter: ListFilter = ListFilter.ALL):
        self.app_state = app_state
        self.list_filter = list_filter
        self.selected = 0

    def rows(self, list_filter: Optional[ListFilter] = None) -> list[ExerciseRow]:
        """Visible rows in exercise order."""
        list_filter = list_filter or self.list_filter
        current_ind = self.app_state.current_exercise_ind

        result = []
        for ind, (exercise, done) in enumerate(
            zip(self.app_state.exercises, self.app_state.progress)
        ):
            if list_filter == ListFilter.DONE and not done:
                continue
            if list_filter == ListFilter.PENDING and done:
                continue
            result.append(ExerciseRow(
                index=ind,
                exercise=exercise,
                done=done,
                is_next=ind == current_ind,
            ))
        return result

    def counts(self) -> tuple[int, int]:
        """(done, total) for the whole sequence."""
        return self.app_state.done_count, len(self.app_state.exercises)

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------

    def set_filter(self, list_filter: ListFilter):
        self.list_filter = list_filter
        self.select_first()

    def toggle_filter(self, list_filter: ListFilter):
        """Switch to `list_filter`, or back to ALL if it is already active."""
        if self.list_filter == list_filter:
            self.set_filter(ListFilter.ALL)
        else:
            self.set_filter(list_filter)

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def _last_position(self) -> int:
        return max(len(self.rows()) - 1, 0)

    def select(self, position: int):
        self.selected = min(max(position, 0), self._last_position())

    def select_next(self):
        self.select(self.selected + 1)

    def select_previous(self):
        self.select(self.selected - 1)

    def select_first(self):
        self.select(0)

    def select_last(self):
        self.select(self._last_position())

    def selected_row(self) -> Optional[ExerciseRow]:
        rows = self.rows()
        if not rows:
            return None
        return rows[min(self.selected, len(rows) - 1)]

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def reset_selected(self) -> Optional[ExerciseRow]:
        """
        Mark the selected exercise as pending.

        Returns:
            The row that was reset, or None if the list is empty
        """
        row = self.selected_row()
        if row is None:
            return None
        self.app_state.set_pending(row.index)
        # The row may have left a DONE-filtered list.
        self.select(self.selected)
        return row

    def continue_at_selected(self) -> Optional[ExerciseRow]:
        """
        Make the selected exercise the current one.

        Returns:
            The selected row, or None if the list is empty
        """
        row = self.selected_row()
        if row is None:
            return None
        self.app_state.set_current_exercise_ind(row.index)
        return row
