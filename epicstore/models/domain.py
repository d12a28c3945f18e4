"""Domain entities - internal representation (storage-agnostic)."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class Status(str, Enum):
    """Work item status enumeration.

    Values are the persisted variant tags. Ordering follows declaration
    order, not the alphabetical order of the tags.
    """
    OPEN = "Open"
    IN_PROGRESS = "InProgress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"

    @property
    def display(self) -> str:
        """Uppercase label shown to users."""
        return _STATUS_DISPLAY[self]

    @property
    def rank(self) -> int:
        return list(Status).index(self)

    def __str__(self) -> str:
        return self.display

    def __lt__(self, other):
        if not isinstance(other, Status):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Status):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Status):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Status):
            return NotImplemented
        return self.rank >= other.rank


_STATUS_DISPLAY = {
    Status.OPEN: "OPEN",
    Status.IN_PROGRESS: "IN PROGRESS",
    Status.RESOLVED: "RESOLVED",
    Status.CLOSED: "CLOSED",
}


@dataclass
class Epic:
    """Epic domain entity. Owns stories through their ids."""
    name: str
    description: str
    status: Status = Status.OPEN
    stories: List[int] = field(default_factory=list)


@dataclass
class Story:
    """Story domain entity."""
    name: str
    description: str
    status: Status = Status.OPEN


@dataclass
class DBState:
    """Complete database snapshot.

    Epics and stories draw ids from the shared ``last_item_id`` counter.
    """
    last_item_id: int = 0
    epics: Dict[int, Epic] = field(default_factory=dict)
    stories: Dict[int, Story] = field(default_factory=dict)

    def next_id(self) -> int:
        """Id the next created entity will receive."""
        return self.last_item_id + 1
