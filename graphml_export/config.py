"""Configuration helpers for loading environment variables.

Variables defined in a project-level ``.env`` file are loaded once before any
lookup. Consumers should rely on :func:`get_env` and :func:`get_bool_env`
instead of :func:`os.getenv` so that the file is read in a single place.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@lru_cache(maxsize=1)
def _load_environment() -> None:
    """Load environment variables from the project's ``.env`` file.

    The loader first looks for ``.env`` at the repository root and otherwise
    lets :func:`load_dotenv` run its default discovery. Values already present
    in the process environment are never overridden. The call is cached so the
    file is read once per process.
    """

    project_root = Path(__file__).resolve().parents[1]
    env_path = project_root / ".env"

    if env_path.exists():
        load_dotenv(env_path, override=False)
    else:
        load_dotenv(override=False)


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return the value for ``key`` from the environment.

    Parameters
    ----------
    key:
        The name of the environment variable to look up.
    default:
        The value to return when ``key`` is not present.
    """

    _load_environment()
    return os.environ.get(key, default)


def get_bool_env(key: str, default: bool) -> bool:
    """Interpret ``key`` as a boolean flag, falling back to ``default``."""

    raw = get_env(key)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


__all__ = ["get_bool_env", "get_env"]
