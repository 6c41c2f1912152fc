"""Command line entry point for inspecting ``.env`` files."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, TextIO

from .environment import DEFAULT_ENV_PATH, Environment, parse_bool
from .errors import EnvFileLoadError
from .sources import create_content_source

LOGGER = logging.getLogger(__name__)

_CONVERTERS: dict[str, Callable[[str], Any]] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": parse_bool,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Load a .env file and print its variables")
    parser.add_argument(
        "names",
        nargs="*",
        metavar="NAME",
        help="Variables to print. All variables are dumped as JSON when omitted.",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=DEFAULT_ENV_PATH,
        help=f"Path of the .env file to load (default: {DEFAULT_ENV_PATH}).",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Directory that relative --env-file paths are resolved against.",
    )

    lookup_group = parser.add_argument_group("Lookup options")
    lookup_group.add_argument(
        "--type",
        choices=tuple(_CONVERTERS),
        default="str",
        help="Convert each requested value to this type.",
    )
    lookup_group.add_argument(
        "--fallback",
        type=str,
        default=None,
        help="Value used when a variable is missing, empty or not convertible.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging, including skipped lines.",
    )
    return parser


def _coerce_fallback(parser: argparse.ArgumentParser, kind: str, raw: str | None) -> Any:
    if raw is None:
        return None
    try:
        return _CONVERTERS[kind](raw)
    except ValueError:
        parser.error(f"--fallback {raw!r} is not a valid {kind}")


def lookup(environment: Environment, name: str, kind: str, fallback: Any = None) -> Any:
    getters = {
        "str": environment.get_string,
        "int": environment.get_int,
        "float": environment.get_float,
        "bool": environment.get_bool,
    }
    return getters[kind](name, fallback)


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def main(
    argv: Optional[Iterable[str]] = None,
    *,
    environment_factory: Callable[..., Environment] = Environment,
    stdout: TextIO | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    out = stdout or sys.stdout

    fallback = _coerce_fallback(parser, args.type, args.fallback)
    environment = environment_factory(source=create_content_source(args.base_dir))

    try:
        environment.load(args.env_file)
    except EnvFileLoadError as exc:
        LOGGER.error("Could not load environment: %s", exc)
        return 1

    if not args.names:
        json.dump(dict(environment.snapshot()), out, indent=2, sort_keys=True)
        out.write("\n")
        return 0

    for name in args.names:
        value = lookup(environment, name, args.type, fallback)
        if value is None:
            out.write(f"{name} is not defined\n")
        else:
            out.write(f"{name}={format_value(value)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
