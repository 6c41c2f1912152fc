"""Parsing helpers for dotenv-style ``KEY=VALUE`` content."""

from __future__ import annotations

import logging
import re
from typing import Iterable

__all__ = ["iter_env_entries", "parse_env_content", "unquote"]

LOGGER = logging.getLogger(__name__)

_SURROUNDING_QUOTES = re.compile(r"""^(["'])(.*)\1$""", re.DOTALL)


def unquote(value: str) -> str:
    """Remove one matching pair of surrounding single or double quotes.

    Inner quotes are left untouched and no escape sequences are processed, so
    ``'"a"'`` becomes ``"a"`` rather than ``a``.
    """

    match = _SURROUNDING_QUOTES.match(value)
    if match is None:
        return value
    return match.group(2)


def iter_env_entries(content: str) -> Iterable[tuple[str, str]]:
    """Yield ``(key, value)`` pairs in source order.

    Malformed lines are skipped, never raised. A ``#`` anywhere on a
    line starts a comment, even inside a quoted value.
    """

    for lineno, raw_line in enumerate(content.split("\n"), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        # The first character is not "#", so truncation never empties the line.
        line = line.split("#", 1)[0].strip()

        parts = line.split("=")
        if len(parts) < 2:
            LOGGER.debug("Skipping line %d without '=' separator: %r", lineno, raw_line)
            continue

        key = parts[0].strip()
        value = unquote("=".join(parts[1:]).strip())
        yield key, value


def parse_env_content(content: str) -> dict[str, str]:
    """Parse ``content`` into a mapping; the last assignment of a key wins."""

    return dict(iter_env_entries(content))
