"""Local epic/story tracking store.

A single JSON document holds every epic, story and the shared id counter:
- Domain entities and the on-disk document codec (models/)
- Whole-document storage backends: JSON file and in-memory (repositories/)
- The issue service enforcing id allocation and epic/story linkage (services/)

Usage:
    from epicstore import create_service, Epic, Story

    service = create_service()
    epic_id = service.create_epic(Epic(name="Release", description=""))
    service.create_story(Story(name="Changelog", description=""), epic_id)
"""

from .config import create_service, get_settings
from .errors import DecodeError, EpicStoreError, NotFoundError, StorageError, StorageIOError
from .models.domain import DBState, Epic, Status, Story
from .services.issue_service import IssueService

__all__ = [
    'create_service',
    'get_settings',
    'DecodeError',
    'EpicStoreError',
    'NotFoundError',
    'StorageError',
    'StorageIOError',
    'DBState',
    'Epic',
    'Status',
    'Story',
    'IssueService',
]
