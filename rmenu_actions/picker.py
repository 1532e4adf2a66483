"""
Client for the external interactive picker.

The picker reads newline-separated labels on stdin and prints the chosen
label on stdout, or nothing when the user cancels. rofi in ``-dmenu`` mode is
the reference implementation.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Protocol, Sequence

from rmenu_common.errors import ProcessIOError, SpawnError, wrap_error

from .settings import PickerSettings


logger = logging.getLogger(__name__)


class Picker(Protocol):
    """Strategy interface used by menus to ask the user for one label."""

    def select(self, prompt: str, labels: Sequence[str]) -> str:
        """Return the raw picker output; an empty string means cancelled."""
        ...


def serialize_options(labels: Sequence[str]) -> str:
    """Render labels one per line, each terminated by a newline."""
    return "".join(f"{label}\n" for label in labels)


class RofiPicker:
    """Launch rofi (or a compatible binary) for every selection."""

    def __init__(self, binary: str | None = None, extra_args: Sequence[str] = ()) -> None:
        settings = PickerSettings() if binary is None else PickerSettings(binary=binary)
        self.binary = settings.binary
        self.extra_args = list(extra_args)

    @classmethod
    def from_settings(cls, settings: PickerSettings) -> "RofiPicker":
        return cls(settings.binary, settings.extra_args)

    def build_command(self, prompt: str, count: int) -> list[str]:
        # rofi -p <prompt> -l <lines> -dmenu -i -no-custom
        return [
            self.binary,
            "-p",
            prompt,
            "-l",
            str(count),
            "-dmenu",
            "-i",
            "-no-custom",
            *self.extra_args,
        ]

    def select(self, prompt: str, labels: Sequence[str]) -> str:
        cmd = self.build_command(prompt, len(labels))
        payload = serialize_options(labels).encode("utf-8")
        logger.debug("Launching picker: %s", cmd)
        try:
            proc = subprocess.Popen(
                cmd,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
            )
        except OSError as exc:
            raise wrap_error(
                SpawnError,
                f"Failed to spawn picker {self.binary}",
                context={"command": cmd},
                cause=exc,
            ) from exc

        # Exiting the context closes both pipes and waits for the child.
        with proc:
            try:
                stdout, _ = proc.communicate(payload)
            except OSError as exc:
                proc.kill()
                raise wrap_error(
                    ProcessIOError,
                    f"Failed to exchange data with picker {self.binary}",
                    context={"command": cmd},
                    cause=exc,
                ) from exc
        logger.debug("Picker exited with status %s", proc.returncode)
        return (stdout or b"").decode("utf-8", errors="replace")
