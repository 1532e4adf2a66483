"""Tests for entry-point discovery helpers."""

from __future__ import annotations

import importlib.metadata

import pytest

from rmenu_common.discovery.entrypoints import (
    discover_entrypoints,
    load_entrypoint,
    load_pending_entrypoints,
)


pytestmark = pytest.mark.unit_common


def test_discover_entrypoints_handles_errors(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def raise_error():
        raise RuntimeError("boom")

    monkeypatch.setattr(importlib.metadata, "entry_points", raise_error)

    result = discover_entrypoints(["rmenu.actions"])
    assert result == {}


def test_discover_entrypoints_collects_entries(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    fake_entry = importlib.metadata.EntryPoint(
        name="Notify", value="demo.module:build", group="rmenu.actions"
    )

    class FakeEntries:
        def select(self, group: str):
            assert group == "rmenu.actions"
            return [fake_entry]

    monkeypatch.setattr(importlib.metadata, "entry_points", lambda: FakeEntries())

    result = discover_entrypoints(["rmenu.actions"])
    assert result["Notify"] == fake_entry


class _DummyEntryPoint:
    def __init__(self, name, loaded=None, error=None):
        self.name = name
        self._loaded = loaded
        self._error = error

    def load(self):
        if self._error is not None:
            raise self._error
        return self._loaded


def test_load_entrypoint_registers_by_name() -> None:
    registered = {}

    def builder(value):
        return value

    ok = load_entrypoint(_DummyEntryPoint("Notify", builder), registered.__setitem__)

    assert ok is True
    assert registered == {"Notify": builder}


def test_load_entrypoint_logs_failures(caplog: pytest.LogCaptureFixture) -> None:
    registered = {}
    caplog.set_level("DEBUG")

    missing = _DummyEntryPoint("Missing", error=ImportError("no module"))
    broken = _DummyEntryPoint("Broken", error=RuntimeError("boom"))

    assert load_entrypoint(missing, registered.__setitem__, label="action entry point") is False
    assert load_entrypoint(broken, registered.__setitem__, label="action entry point") is False
    assert registered == {}
    assert any("missing dependency" in message for message in caplog.messages)
    assert any("Failed to load action entry point Broken" in message for message in caplog.messages)


def test_load_pending_entrypoints_drains_mapping() -> None:
    registered = {}
    pending = {
        "A": _DummyEntryPoint("A", loaded=object()),
        "B": _DummyEntryPoint("B", error=RuntimeError("boom")),
    }

    load_pending_entrypoints(pending, registered.__setitem__)

    assert pending == {}
    assert list(registered) == ["A"]
