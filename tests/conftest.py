from __future__ import annotations

import subprocess
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Sequence

import pytest
from rich.console import Console
from rich.table import Table

KNOWN_MARKERS = {"unit_common", "unit_actions", "unit_ui", "e2e"}


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """
    Custom hook to print statistics by marker at the end of the test session.
    """
    _ = (exitstatus, config)
    marker_stats = defaultdict(
        lambda: {"passed": 0, "failed": 0, "skipped": 0, "total": 0, "duration": 0.0}
    )

    for outcome in ["passed", "failed", "skipped"]:
        reports = terminalreporter.stats.get(outcome, [])
        for report in reports:
            # Only count the actual test call, or setup skips
            if report.when == "call" or (report.when == "setup" and report.outcome == "skipped"):
                duration = getattr(report, "duration", 0.0)
                for marker in KNOWN_MARKERS:
                    if marker in report.keywords:
                        stats = marker_stats[marker]
                        stats[outcome] += 1
                        stats["total"] += 1
                        stats["duration"] += duration

    if not marker_stats:
        return

    table = Table(title="Test Statistics by Marker", show_header=True, header_style="bold magenta")
    table.add_column("Marker", style="cyan")
    table.add_column("Total", justify="right")
    table.add_column("Passed", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Skipped", justify="right", style="yellow")
    table.add_column("Duration (s)", justify="right", style="blue")

    for marker in sorted(marker_stats):
        stats = marker_stats[marker]
        table.add_row(
            marker,
            str(stats["total"]),
            str(stats["passed"]),
            str(stats["failed"]),
            str(stats["skipped"]),
            f"{stats['duration']:.2f}",
        )

    console = Console()
    console.print("\n")
    console.print(table)


@dataclass
class FakePicker:
    """Picker double returning queued outputs and recording every call."""

    outputs: list[str] = field(default_factory=list)
    calls: list[tuple[str, list[str]]] = field(default_factory=list)

    def select(self, prompt: str, labels: Sequence[str]) -> str:
        self.calls.append((prompt, list(labels)))
        if not self.outputs:
            return ""
        return self.outputs.pop(0)


@pytest.fixture
def fake_picker() -> FakePicker:
    return FakePicker()


@dataclass
class PopenRecorder:
    """Stand-in for ``subprocess.Popen`` used by the picker client."""

    stdout: bytes = b""
    returncode: int = 0
    error: Exception | None = None
    communicate_error: Exception | None = None
    commands: list[list[str]] = field(default_factory=list)
    inputs: list[bytes] = field(default_factory=list)
    kwargs: list[dict] = field(default_factory=list)
    closed: int = 0
    killed: int = 0

    def __call__(self, cmd, **kwargs):
        if self.error is not None:
            raise self.error
        self.commands.append(list(cmd))
        self.kwargs.append(kwargs)
        return _FakeProcess(self)


class _FakeProcess:
    def __init__(self, recorder: PopenRecorder) -> None:
        self._recorder = recorder
        self.returncode: int | None = None

    def communicate(self, input=None, timeout=None):
        if self._recorder.communicate_error is not None:
            raise self._recorder.communicate_error
        self._recorder.inputs.append(input)
        self.returncode = self._recorder.returncode
        return self._recorder.stdout, None

    def kill(self) -> None:
        self._recorder.killed += 1

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self._recorder.closed += 1
        return False


@pytest.fixture
def popen_recorder(monkeypatch: pytest.MonkeyPatch) -> PopenRecorder:
    recorder = PopenRecorder()
    monkeypatch.setattr(subprocess, "Popen", recorder)
    return recorder


@dataclass
class RunRecorder:
    """Stand-in for ``subprocess.run`` used by command actions."""

    returncode: int = 0
    error: Exception | None = None
    commands: list[list[str]] = field(default_factory=list)
    kwargs: list[dict] = field(default_factory=list)

    def __call__(self, cmd, **kwargs):
        if self.error is not None:
            raise self.error
        self.commands.append(list(cmd))
        self.kwargs.append(kwargs)
        return subprocess.CompletedProcess(cmd, self.returncode, b"", b"")


@pytest.fixture
def run_recorder(monkeypatch: pytest.MonkeyPatch) -> RunRecorder:
    recorder = RunRecorder()
    monkeypatch.setattr(subprocess, "run", recorder)
    return recorder
