"""Environment variable parsing utilities."""

from __future__ import annotations

import shlex
from pathlib import Path


def parse_bool_env(value: str | None) -> bool | None:
    """Parse a boolean from an environment variable string.

    Returns True for "1", "true", "yes", "on" (case-insensitive).
    Returns None if value is None.
    """
    if value is None:
        return None
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_args_env(value: str | None) -> list[str]:
    """Split a shell-quoted argument string into a list.

    Example: "-theme 'my theme.rasi'" -> ["-theme", "my theme.rasi"]
    Returns an empty list if value is None or blank.
    """
    if not value or not value.strip():
        return []
    return shlex.split(value)


def parse_path_env(value: str | None) -> Path | None:
    """Return an expanded Path, or None for unset/blank values."""
    if value is None or not value.strip():
        return None
    return Path(value.strip()).expanduser()
