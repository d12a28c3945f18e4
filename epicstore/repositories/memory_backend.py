"""In-memory storage backend - test double."""

import copy
from typing import Optional

from epicstore.models.domain import DBState
from epicstore.repositories.base import StorageBackend


class InMemoryBackend(StorageBackend):
    """
    Storage backend holding the last written snapshot in memory.

    Current implementation: a plain DBState, no encoding step.
    Rationale: lets the issue service be exercised without a filesystem.
    Snapshots are copied in and out, so callers never share the stored one.
    """

    def __init__(self, initial: Optional[DBState] = None):
        self._state = copy.deepcopy(initial) if initial is not None else DBState()
        self.write_count = 0

    def read(self) -> DBState:
        """Return a copy of the stored snapshot."""
        return copy.deepcopy(self._state)

    def write(self, state: DBState) -> None:
        """Replace the stored snapshot with a copy of ``state``."""
        self._state = copy.deepcopy(state)
        self.write_count += 1
