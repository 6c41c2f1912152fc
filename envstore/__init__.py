"""Load dotenv-style configuration files and read typed values from them."""

from __future__ import annotations

from .environment import DEFAULT_ENV_PATH, Environment
from .errors import EnvError, EnvFileLoadError, EnvNotLoadedError
from .parser import parse_env_content

__all__ = [
    "__version__",
    "DEFAULT_ENV_PATH",
    "EnvError",
    "EnvFileLoadError",
    "EnvNotLoadedError",
    "Environment",
    "parse_env_content",
]

__version__ = "0.1.0"
