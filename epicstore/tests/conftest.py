"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add repo root for imports - do this before other imports
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))

import pytest

from epicstore.config import get_settings
from epicstore.repositories.json_file_backend import JSONFileBackend
from epicstore.repositories.memory_backend import InMemoryBackend
from epicstore.services.issue_service import IssueService


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test see its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def memory_backend():
    """Empty in-memory backend."""
    return InMemoryBackend()


@pytest.fixture
def service(memory_backend):
    """Issue service over an empty in-memory backend."""
    return IssueService(memory_backend)


@pytest.fixture
def db_file(tmp_path):
    """Path of a database file holding an empty database."""
    path = tmp_path / "db.json"
    path.write_text('{"last_item_id": 0, "epics": {}, "stories": {}}', encoding="utf-8")
    return path


@pytest.fixture
def file_backend(db_file):
    """JSON file backend over an empty database file."""
    return JSONFileBackend(db_file)
