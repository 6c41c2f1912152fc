"""Abstract content source used to fetch ``.env`` text."""
from __future__ import annotations

from abc import ABC, abstractmethod


class ContentSource(ABC):
    """Defines how the environment store obtains raw ``.env`` content."""

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Return the text stored at ``path``.

        Implementations raise :class:`OSError` (or a subclass) when the content
        cannot be read.
        """
