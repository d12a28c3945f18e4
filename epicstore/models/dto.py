"""Document models - the on-disk JSON contract for a DBState."""

import re
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, field_validator, model_validator

from epicstore.errors import DecodeError, StorageError
from epicstore.models.domain import DBState, Epic, Status, Story

_ID_KEY = re.compile(r"^(0|[1-9][0-9]*)$")


class StoryDocument(BaseModel):
    """Persisted story object."""
    name: StrictStr
    description: StrictStr
    status: Status

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def from_domain(cls, story: Story) -> "StoryDocument":
        return cls(name=story.name, description=story.description, status=story.status)

    def to_domain(self) -> Story:
        return Story(name=self.name, description=self.description, status=self.status)


class EpicDocument(BaseModel):
    """Persisted epic object."""
    name: StrictStr
    description: StrictStr
    status: Status
    stories: List[StrictInt]

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def from_domain(cls, epic: Epic) -> "EpicDocument":
        return cls(
            name=epic.name,
            description=epic.description,
            status=epic.status,
            stories=list(epic.stories),
        )

    def to_domain(self) -> Epic:
        return Epic(
            name=self.name,
            description=self.description,
            status=self.status,
            stories=list(self.stories),
        )


class DBStateDocument(BaseModel):
    """Persisted database document.

    Map keys are the decimal string form of the integer ids. The counter
    is at least every existing id, epics and stories never share an id, and
    each story id is listed by at most one epic and resolves in ``stories``.
    """
    last_item_id: StrictInt = Field(..., ge=0)
    epics: Dict[str, EpicDocument]
    stories: Dict[str, StoryDocument]

    model_config = ConfigDict(extra="forbid")

    @field_validator("epics", "stories")
    @classmethod
    def _check_id_keys(cls, value: dict) -> dict:
        for key in value:
            if not _ID_KEY.match(key):
                raise ValueError(f"invalid id key {key!r}")
        return value

    @model_validator(mode="after")
    def _check_references(self) -> "DBStateDocument":
        epic_ids = {int(k) for k in self.epics}
        story_ids = {int(k) for k in self.stories}

        shared = epic_ids & story_ids
        if shared:
            raise ValueError(f"ids used by both an epic and a story: {sorted(shared)}")

        highest = max(epic_ids | story_ids, default=0)
        if self.last_item_id < highest:
            raise ValueError(f"last_item_id {self.last_item_id} is below existing id {highest}")

        listed = set()
        for key, epic in self.epics.items():
            for story_id in epic.stories:
                if story_id not in story_ids:
                    raise ValueError(f"epic {key} lists unknown story {story_id}")
                if story_id in listed:
                    raise ValueError(f"story {story_id} is listed more than once")
                listed.add(story_id)
        return self

    @classmethod
    def from_domain(cls, state: DBState) -> "DBStateDocument":
        return cls(
            last_item_id=state.last_item_id,
            epics={str(i): EpicDocument.from_domain(e) for i, e in sorted(state.epics.items())},
            stories={str(i): StoryDocument.from_domain(s) for i, s in sorted(state.stories.items())},
        )

    def to_domain(self) -> DBState:
        return DBState(
            last_item_id=self.last_item_id,
            epics={int(k): v.to_domain() for k, v in self.epics.items()},
            stories={int(k): v.to_domain() for k, v in self.stories.items()},
        )


def encode_state(state: DBState) -> str:
    """Encode a snapshot as JSON text.

    All three top-level keys are always present, including empty maps.
    """
    try:
        document = DBStateDocument.from_domain(state)
    except ValidationError as e:
        raise StorageError(f"Cannot encode database state: {e}") from e
    return document.model_dump_json(indent=2)


def decode_state(text) -> DBState:
    """Decode JSON text into a snapshot.

    Raises:
        DecodeError: If the text is not valid JSON or does not describe a
            complete, well-typed and self-consistent database document.
    """
    try:
        document = DBStateDocument.model_validate_json(text)
    except (ValidationError, UnicodeDecodeError) as e:
        raise DecodeError(f"Invalid database document: {e}") from e
    return document.to_domain()
