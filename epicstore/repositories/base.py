"""Base storage backend interface."""

from abc import ABC, abstractmethod

from epicstore.models.domain import DBState


class StorageBackend(ABC):
    """
    Base storage backend interface.

    Reads and writes the entire database as one unit - no partial reads,
    no partial writes, no diffing. Could be a JSON file, memory, etc.
    """

    @abstractmethod
    def read(self) -> DBState:
        """Return the current snapshot.

        Raises:
            StorageError: If the medium is unreadable or its content cannot
                be decoded.
        """
        pass

    @abstractmethod
    def write(self, state: DBState) -> None:
        """Persist ``state`` as the new complete content.

        Raises:
            StorageError: If the medium cannot be written.
        """
        pass
