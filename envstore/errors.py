"""Exceptions raised by the environment store."""

from __future__ import annotations

__all__ = ["EnvError", "EnvFileLoadError", "EnvNotLoadedError"]

NOT_LOADED_MESSAGE = "Environment has not been loaded. Call Environment.load() first."


class EnvError(RuntimeError):
    """Base class for environment store failures."""


class EnvNotLoadedError(EnvError):
    """Raised when variables are read before a successful load."""

    def __init__(self, message: str = NOT_LOADED_MESSAGE) -> None:
        super().__init__(message)


class EnvFileLoadError(EnvError):
    """Raised when the ``.env`` content cannot be fetched or parsed."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
