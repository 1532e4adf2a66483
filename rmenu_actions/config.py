"""Locate and load menu configuration documents."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from rmenu_common.config import parse_path_env
from rmenu_common.errors import ConfigLoadError, wrap_error


CONFIG_FILENAME = "menu.yaml"


def default_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return ``$XDG_CONFIG_HOME/rmenu/menu.yaml`` (``~/.config`` when unset)."""
    env = os.environ if environ is None else environ
    base = parse_path_env(env.get("XDG_CONFIG_HOME")) or Path.home() / ".config"
    return base / "rmenu" / CONFIG_FILENAME


def resolve_config_path(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """
    Pick the configuration file to load.

    Preference order:
    1) the explicit ``path`` argument;
    2) ``RMENU_CONFIG`` env override;
    3) the default location under the XDG config directory.
    """
    if path is not None:
        return Path(path).expanduser()
    env = os.environ if environ is None else environ
    override = parse_path_env(env.get("RMENU_CONFIG"))
    if override is not None:
        return override
    return default_config_path(env)


def load_config(path: Path) -> Any:
    """Read and decode a YAML document into plain Python values.

    Raises:
        ConfigLoadError: if the file cannot be read or is not valid YAML.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise wrap_error(
            ConfigLoadError,
            f"Could not read config file {path}",
            context={"path": path},
            cause=exc,
        ) from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise wrap_error(
            ConfigLoadError,
            f"Could not parse config file {path}",
            context={"path": path},
            cause=exc,
        ) from exc
