"""Centralized configuration for epicstore.

This module provides:
- The database file location and log level, overridable through the
  environment
- A cached settings accessor
- A bootstrap helper that wires a file-backed issue service

Usage:
    from epicstore.config import create_service

    service = create_service()
    epic_id = service.create_epic(Epic(name="E1", description=""))
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from epicstore.repositories.json_file_backend import JSONFileBackend
from epicstore.services.issue_service import IssueService

# Relative to the working directory, like the original data/db.json layout
DEFAULT_DB_PATH = Path("data") / "db.json"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    db_path: Path
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    return Settings(
        db_path=Path(os.environ.get("EPICSTORE_DB_PATH", str(DEFAULT_DB_PATH))).expanduser(),
        log_level=(os.environ.get("EPICSTORE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )


def create_service(settings: Optional[Settings] = None) -> IssueService:
    """Build an issue service backed by the configured JSON file.

    The file is created with an empty database if it does not exist.
    """
    settings = settings or get_settings()
    backend = JSONFileBackend(settings.db_path)
    backend.ensure_initialized()
    return IssueService(backend)
