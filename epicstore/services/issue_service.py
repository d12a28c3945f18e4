"""Issue service - consistency rules for epics and stories."""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, List, Tuple

from epicstore.errors import NotFoundError, StorageError
from epicstore.models.domain import DBState, Epic, Status, Story
from epicstore.repositories.base import StorageBackend

logger = logging.getLogger(__name__)


class IssueService:
    """
    Repository façade over a storage backend.

    Responsibilities:
    - Allocate ids from the counter shared by epics and stories
    - Keep every epic's story list resolvable in the stories map
    - Cascade epic deletion to the epic's stories

    Every call reads the full snapshot, applies one change to that copy and
    writes the full snapshot back. One lock spans both the read and the
    write.

    Does NOT:
    - Retry or roll back failed writes (the backend's prior content stays
      authoritative and the in-memory change is dropped)
    - Render anything (that's the UI layer)
    """

    def __init__(self, backend: StorageBackend):
        self.backend = backend
        self._lock = threading.RLock()

    @contextmanager
    def _transaction(self, operation: str) -> Iterator[DBState]:
        """Yield a fresh snapshot and write it back if the block succeeds."""
        with self._lock:
            try:
                state = self.backend.read()
            except StorageError as e:
                logger.error("%s: could not read database: %s", operation, e)
                raise

            yield state

            try:
                self.backend.write(state)
            except StorageError as e:
                logger.error("%s: could not write database, change discarded: %s", operation, e)
                raise

    # -------------------------- queries --------------------------

    def read_state(self) -> DBState:
        """Return the full snapshot."""
        with self._lock:
            return self.backend.read()

    def get_epic(self, epic_id: int) -> Epic:
        state = self.read_state()
        if epic_id not in state.epics:
            raise NotFoundError("epic", epic_id, "get_epic")
        return state.epics[epic_id]

    def get_story(self, story_id: int) -> Story:
        state = self.read_state()
        if story_id not in state.stories:
            raise NotFoundError("story", story_id, "get_story")
        return state.stories[story_id]

    def list_epics(self) -> List[Tuple[int, Epic]]:
        """All epics, ascending by id."""
        state = self.read_state()
        return sorted(state.epics.items(), key=lambda item: item[0])

    def list_stories(self, epic_id: int) -> List[Tuple[int, Story]]:
        """Stories attached to an epic, in the epic's list order."""
        state = self.read_state()
        epic = state.epics.get(epic_id)
        if epic is None:
            raise NotFoundError("epic", epic_id, "list_stories")
        return [(story_id, state.stories[story_id]) for story_id in epic.stories]

    # -------------------------- epics --------------------------

    def create_epic(self, epic: Epic) -> int:
        """Store a new epic and return its id.

        Unlike every other precondition here this is a caller error rather
        than a missing id: stories can only join an epic via create_story.

        Raises:
            ValueError: If the epic already lists stories.
        """
        if epic.stories:
            raise ValueError(f"New epic cannot list stories: {epic.stories}")

        with self._transaction("create_epic") as state:
            new_id = state.next_id()
            state.epics[new_id] = epic
            state.last_item_id = new_id

        logger.info("Created epic %d", new_id)
        return new_id

    def delete_epic(self, epic_id: int) -> Epic:
        """Remove an epic together with all of its stories."""
        with self._transaction("delete_epic") as state:
            epic = state.epics.pop(epic_id, None)
            if epic is None:
                raise NotFoundError("epic", epic_id, "delete_epic")

            for story_id in epic.stories:
                state.stories.pop(story_id, None)

        logger.info("Deleted epic %d and %d stories", epic_id, len(epic.stories))
        return epic

    def update_epic_status(self, epic_id: int, status: Status) -> Epic:
        with self._transaction("update_epic_status") as state:
            epic = state.epics.get(epic_id)
            if epic is None:
                raise NotFoundError("epic", epic_id, "update_epic_status")
            epic.status = Status(status)

        logger.info("Epic %d status -> %s", epic_id, epic.status.display)
        return epic

    # -------------------------- stories --------------------------

    def create_story(self, story: Story, epic_id: int) -> int:
        """Store a new story under an existing epic and return its id."""
        with self._transaction("create_story") as state:
            epic = state.epics.get(epic_id)
            if epic is None:
                raise NotFoundError("epic", epic_id, "create_story")

            new_id = state.next_id()
            state.stories[new_id] = story
            epic.stories.append(new_id)
            state.last_item_id = new_id

        logger.info("Created story %d in epic %d", new_id, epic_id)
        return new_id

    def delete_story(self, epic_id: int, story_id: int) -> Story:
        """Remove a story from the stories map and from its epic."""
        with self._transaction("delete_story") as state:
            epic = state.epics.get(epic_id)
            if epic is None:
                raise NotFoundError("epic", epic_id, "delete_story")
            if story_id not in state.stories:
                raise NotFoundError("story", story_id, "delete_story")
            if story_id not in epic.stories:
                raise NotFoundError("story", story_id, "delete_story", detail=f"in epic {epic_id}")

            story = state.stories.pop(story_id)
            epic.stories = [i for i in epic.stories if i != story_id]

        logger.info("Deleted story %d from epic %d", story_id, epic_id)
        return story

    def update_story_status(self, story_id: int, status: Status) -> Story:
        with self._transaction("update_story_status") as state:
            story = state.stories.get(story_id)
            if story is None:
                raise NotFoundError("story", story_id, "update_story_status")
            story.status = Status(status)

        logger.info("Story %d status -> %s", story_id, story.status.display)
        return story
