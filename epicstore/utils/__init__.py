"""Rendering utilities package."""

from .columns import get_column_string

__all__ = [
    "get_column_string",
]
