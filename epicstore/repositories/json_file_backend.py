"""JSON file storage backend - filesystem implementation."""

import logging
import os
from pathlib import Path
from typing import Union

from epicstore.errors import StorageIOError
from epicstore.models.domain import DBState
from epicstore.models.dto import decode_state, encode_state
from epicstore.repositories.base import StorageBackend

logger = logging.getLogger(__name__)


class JSONFileBackend(StorageBackend):
    """
    Storage backend persisting the database as a single JSON document.

    Writes go to a sibling temporary file which then replaces the target,
    so a failed write leaves the previous document in place.
    """

    def __init__(self, file_path: Union[str, Path]):
        self.file_path = Path(file_path)

    @property
    def tmp_path(self) -> Path:
        return self.file_path.with_name(self.file_path.name + ".tmp")

    def read(self) -> DBState:
        """Read and decode the database file."""
        try:
            raw = self.file_path.read_bytes()
        except OSError as e:
            raise StorageIOError(f"Cannot read database file {self.file_path}: {e}", self.file_path) from e

        return decode_state(raw)

    def write(self, state: DBState) -> None:
        """Encode and atomically replace the database file."""
        text = encode_state(state)
        tmp = self.tmp_path

        try:
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            tmp.replace(self.file_path)
        except OSError as e:
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.warning("Could not remove temporary file %s", tmp)
            raise StorageIOError(f"Cannot write database file {self.file_path}: {e}", self.file_path) from e

        logger.debug("Wrote database file %s (last_item_id=%d)", self.file_path, state.last_item_id)

    def ensure_initialized(self) -> bool:
        """Create an empty database file if none exists.

        Returns:
            True if the file was created, False if it already existed.
        """
        if self.file_path.exists():
            return False

        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageIOError(f"Cannot create directory {self.file_path.parent}: {e}", self.file_path) from e

        self.write(DBState())
        logger.info("Initialized empty database at %s", self.file_path)
        return True
