"""
StateFile - Persist learner progress to a JSON file in the working directory.

The file holds exactly two fields:
- current_exercise_ind: index of the exercise being worked on
- progress: one done flag per exercise

A file that is missing, unreadable, malformed, or doesn't fit the current
exercise sequence is treated as absent. Progress then starts over instead
of failing, so adding or removing exercises needs no migration.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from stepwise.config import load_settings
from stepwise.errors import StatePersistenceError
from stepwise.schemas import Exercise, ProgressRecord

logger = logging.getLogger(__name__)


class StateFile:
    """Read and write the progress record at a single path."""

    def __init__(self, path: Optional[Path] = None):
        """
        Initialize the state file.

        Args:
            path: Path to the state file (default: STEPWISE_STATE_FILE,
                or ./.stepwise-state.json)
        """
        self.path = Path(path) if path is not None else load_settings().state_file

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self, exercises: Sequence[Exercise]) -> Optional[ProgressRecord]:
        """
        Load the stored record if it is valid for `exercises`.

        Returns:
            The record, or None if there is no usable one
        """
        try:
            content = self.path.read_bytes()
        except FileNotFoundError:
            logger.debug("No state file at %s", self.path)
            return None
        except OSError as e:
            logger.info("Ignoring unreadable state file %s: %s", self.path, e)
            return None

        try:
            record = ProgressRecord.model_validate_json(content)
        except ValidationError as e:
            logger.info(
                "Ignoring invalid state file %s (%d validation errors)",
                self.path, e.error_count(),
            )
            return None

        if not record.matches(len(exercises)):
            logger.info(
                "Ignoring state file %s: it tracks %d exercises at index %d, "
                "but there are %d exercises",
                self.path, len(record.progress), record.current_exercise_ind, len(exercises),
            )
            return None

        return record

    def read_or_default(self, exercises: Sequence[Exercise]) -> ProgressRecord:
        """Load the stored record, or start over with nothing done."""
        record = self.read(exercises)
        if record is None:
            logger.info("Starting with fresh progress for %d exercises", len(exercises))
            return ProgressRecord.default(len(exercises))
        return record

    def write(self, record: ProgressRecord):
        """
        Overwrite the state file with `record`.

        The record is written to a temporary file next to the target and
        renamed over it, so readers never see a partial record.

        Raises:
            StatePersistenceError: If serializing or writing fails
        """
        try:
            payload = record.model_dump_json()
        except ValueError as e:
            raise StatePersistenceError(self.path, e) from e

        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            try:
                os.chmod(tmp_name, self._file_mode())
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    fd = None
                    f.write(payload)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, self.path)
            except OSError:
                if fd is not None:
                    os.close(fd)
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StatePersistenceError(self.path, e) from e

        logger.debug("Wrote state file %s", self.path)

    def _file_mode(self) -> int:
        """Mode for the new file: keep the current one, else what open() would give."""
        try:
            return os.stat(self.path).st_mode & 0o777
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def delete(self) -> bool:
        """
        Remove the state file so progress starts over on next load.

        Returns:
            True if a file was removed, False if there was none
        """
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StatePersistenceError(self.path, e) from e
        logger.info("Deleted state file %s", self.path)
        return True
