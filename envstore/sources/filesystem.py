"""Filesystem and in-memory content sources."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional

from .base import ContentSource

LOGGER = logging.getLogger(__name__)


class FileContentSource(ContentSource):
    """Read ``.env`` files from disk, optionally relative to ``base_dir``."""

    def __init__(self, base_dir: str | Path | None = None, *, encoding: str = "utf-8") -> None:
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.encoding = encoding

    def resolve(self, path: str) -> Path:
        candidate = Path(path)
        if self.base_dir is None or candidate.is_absolute():
            return candidate
        return self.base_dir / candidate

    def read_text(self, path: str) -> str:
        resolved = self.resolve(path)
        if resolved.is_dir():
            raise IsADirectoryError(f"{resolved} is a directory, expected a file")
        LOGGER.debug("Reading environment file %s", resolved)
        return resolved.read_text(encoding=self.encoding)


class InMemoryContentSource(ContentSource):
    """Serve content from a dictionary, standing in for a bundled asset store."""

    def __init__(self, files: Optional[Mapping[str, str]] = None) -> None:
        self._files: dict[str, str] = dict(files) if files else {}
        self.requests: list[str] = []

    def add(self, path: str, text: str) -> None:
        self._files[path] = text

    def read_text(self, path: str) -> str:
        self.requests.append(path)
        try:
            return self._files[path]
        except KeyError:
            raise FileNotFoundError(f"No content registered for {path!r}") from None


def create_content_source(
    base_dir: str | Path | None = None,
    *,
    files: Optional[Mapping[str, str]] = None,
) -> ContentSource:
    """Return an in-memory source when ``files`` is given, else a filesystem one."""

    if files is not None:
        return InMemoryContentSource(files)
    return FileContentSource(base_dir)
