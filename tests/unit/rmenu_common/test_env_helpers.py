"""Tests for environment parsing helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from rmenu_common.config import parse_args_env, parse_bool_env, parse_path_env


pytestmark = pytest.mark.unit_common


@pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
def test_parse_bool_env_truthy(raw: str) -> None:
    assert parse_bool_env(raw) is True


def test_parse_bool_env_falsy_and_unset() -> None:
    assert parse_bool_env("0") is False
    assert parse_bool_env("nope") is False
    assert parse_bool_env(None) is None


def test_parse_args_env_respects_quotes() -> None:
    assert parse_args_env("-theme 'my theme.rasi' -markup") == [
        "-theme",
        "my theme.rasi",
        "-markup",
    ]
    assert parse_args_env("   ") == []
    assert parse_args_env(None) == []


def test_parse_path_env_expands_user(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    assert parse_path_env("~/menu.yaml") == tmp_path / "menu.yaml"
    assert parse_path_env("") is None
    assert parse_path_env(None) is None
