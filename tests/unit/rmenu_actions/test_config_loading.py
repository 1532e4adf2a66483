"""Tests for locating and loading configuration documents."""

from __future__ import annotations

from pathlib import Path

import pytest

from rmenu_actions.config import default_config_path, load_config, resolve_config_path
from rmenu_common.errors import ConfigLoadError


pytestmark = pytest.mark.unit_actions


MENU_YAML = """\
type: Menu
name: power
prompt: "Power:"
options:
  - string: Lock
    action:
      type: Command
      command: loginctl
      args: [lock-session]
  - string: Reboot
    action:
      type: Command
      command: systemctl
      args: [reboot]
"""


def test_load_config_returns_plain_values(tmp_path: Path) -> None:
    path = tmp_path / "menu.yaml"
    path.write_text(MENU_YAML)

    data = load_config(path)

    assert data["type"] == "Menu"
    assert [opt["string"] for opt in data["options"]] == ["Lock", "Reboot"]
    assert data["options"][1]["action"]["args"] == ["reboot"]


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigLoadError, match="Could not read"):
        load_config(tmp_path / "absent.yaml")


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("type: [unclosed\n")

    with pytest.raises(ConfigLoadError, match="Could not parse") as excinfo:
        load_config(path)
    assert excinfo.value.context["path"] == str(path)


def test_load_config_empty_document(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) is None


def test_resolve_config_path_order(tmp_path: Path) -> None:
    env = {"RMENU_CONFIG": str(tmp_path / "env.yaml"), "XDG_CONFIG_HOME": str(tmp_path / "xdg")}

    assert resolve_config_path(tmp_path / "cli.yaml", env) == tmp_path / "cli.yaml"
    assert resolve_config_path(None, env) == tmp_path / "env.yaml"
    assert resolve_config_path(None, {"XDG_CONFIG_HOME": str(tmp_path / "xdg")}) == (
        tmp_path / "xdg" / "rmenu" / "menu.yaml"
    )


def test_default_config_path_falls_back_to_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_config_path({}) == tmp_path / ".config" / "rmenu" / "menu.yaml"
