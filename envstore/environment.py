"""Environment store that loads ``.env`` content and exposes typed accessors."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Mapping, Optional, TypeVar

from .errors import EnvFileLoadError, EnvNotLoadedError
from .parser import parse_env_content
from .sources import ContentSource, FileContentSource

__all__ = ["DEFAULT_ENV_PATH", "Environment", "parse_bool"]

LOGGER = logging.getLogger(__name__)
DEFAULT_ENV_PATH = "assets/.env"

_TRUE_VALUES = frozenset({"true", "1"})
_FALSE_VALUES = frozenset({"false", "0"})

T = TypeVar("T")


class Environment:
    """Owns the parsed variables and their loaded/unloaded state.

    Create one instance at startup, call :meth:`load`, then hand the instance
    to whatever needs configuration values. Every reader raises
    :class:`EnvNotLoadedError` until a load has succeeded.
    """

    def __init__(
        self,
        *,
        source: ContentSource | None = None,
        default_path: str = DEFAULT_ENV_PATH,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize an unloaded environment.

        Args:
            source: Where :meth:`load` fetches text from when no content is
                supplied. Defaults to the local filesystem.
            default_path: Path used by :meth:`load` when none is given.
            logger: Logger for load diagnostics.
        """
        self.source = source or FileContentSource()
        self.default_path = default_path
        self.logger = logger or LOGGER

        self._vars: dict[str, str] = {}
        self._loaded = False
        self._last_request: tuple[str, Optional[str]] | None = None

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load(self, path: str | None = None, *, content: str | None = None) -> None:
        """Load variables from ``content`` or, when omitted, from ``path``.

        The previous mapping is replaced entirely. On failure the store is left
        empty and unloaded, and :class:`EnvFileLoadError` is raised.
        """

        target = path if path is not None else self.default_path
        self._last_request = (target, content)

        try:
            if content is not None:
                text = content
                origin = "supplied content"
            else:
                text = self.source.read_text(target)
                origin = target
            self._vars.clear()
            self._vars.update(parse_env_content(text))
            self._loaded = True
        except Exception as exc:
            message = f"Error loading .env file from {target}: {exc}"
            self.logger.error(message)
            self._vars.clear()
            self._loaded = False
            raise EnvFileLoadError(message, path=target) from exc

        self.logger.info("Loaded %d environment variable(s) from %s", len(self._vars), origin)

    def reload(self) -> None:
        """Repeat the most recent :meth:`load` call."""

        if self._last_request is None:
            raise EnvNotLoadedError()
        path, content = self._last_request
        self.load(path, content=content)

    def reset(self) -> None:
        """Discard all variables and return to the unloaded state."""

        self._vars.clear()
        self._loaded = False

    def snapshot(self) -> Mapping[str, str]:
        """Return a read-only copy of every loaded variable."""

        self._ensure_loaded()
        return MappingProxyType(dict(self._vars))

    def get(self, name: str, fallback: str | None = None) -> str | None:
        """Return the value of ``name``.

        A missing variable yields ``fallback``. An empty value yields
        ``fallback`` only when one is supplied, otherwise the empty string.
        """

        self._ensure_loaded()
        value = self._vars.get(name)
        if value is None or (value == "" and fallback is not None):
            return fallback
        return value

    def get_string(self, name: str, fallback: str | None = None) -> str | None:
        """Alias of :meth:`get`."""

        return self.get(name, fallback)

    def get_int(self, name: str, fallback: int | None = None) -> int | None:
        return self._convert(name, int, fallback)

    def get_float(self, name: str, fallback: float | None = None) -> float | None:
        return self._convert(name, float, fallback)

    def get_bool(self, name: str, fallback: bool | None = None) -> bool | None:
        """Interpret ``true``/``1`` and ``false``/``0`` case-insensitively."""

        return self._convert(name, parse_bool, fallback)

    def __contains__(self, name: object) -> bool:
        self._ensure_loaded()
        return name in self._vars

    def __len__(self) -> int:
        self._ensure_loaded()
        return len(self._vars)

    # Internal helpers -------------------------------------------------
    def _ensure_loaded(self) -> None:
        if not self._loaded:
            raise EnvNotLoadedError()

    def _convert(self, name: str, converter: Callable[[str], T], fallback: T | None) -> T | None:
        raw = self.get(name)
        if not raw:
            return fallback
        try:
            return converter(raw)
        except ValueError:
            return fallback


def parse_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Unrecognized boolean value: {value!r}")
