"""Content sources that supply raw ``.env`` text to the store."""
from __future__ import annotations

from .base import ContentSource
from .filesystem import FileContentSource, InMemoryContentSource, create_content_source

__all__ = [
    "ContentSource",
    "FileContentSource",
    "InMemoryContentSource",
    "create_content_source",
]
