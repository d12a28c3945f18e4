"""Exception types raised by storage backends and the issue service."""

from pathlib import Path
from typing import Optional, Union


class EpicStoreError(Exception):
    """Base class for every error raised by epicstore."""


class StorageError(EpicStoreError):
    """The storage backend could not read or write the database."""


class DecodeError(StorageError):
    """Persisted content is malformed or incomplete."""


class StorageIOError(StorageError):
    """The storage medium could not be read or written."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class NotFoundError(EpicStoreError):
    """A referenced epic or story id does not exist."""

    def __init__(self, kind: str, item_id: int, operation: Optional[str] = None, detail: str = ""):
        self.kind = kind
        self.item_id = item_id
        self.operation = operation

        message = f"{kind} {item_id} not found"
        if detail:
            message = f"{message} {detail}"
        if operation:
            message = f"{operation}: {message}"
        super().__init__(message)
