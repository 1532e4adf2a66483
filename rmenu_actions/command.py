"""Leaf action that launches an external program."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from typing import Optional

from rmenu_common.errors import SpawnError, wrap_error

from .interface import Action


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandAction(Action):
    """Run ``command`` with ``args`` and wait for it to exit.

    Output is captured and discarded. The exit status is only logged: a
    command that runs and fails ends the chain exactly like one that succeeds.
    """

    command: str
    args: tuple[str, ...] = field(default_factory=tuple)

    def argv(self) -> list[str]:
        return [self.command, *self.args]

    def run(self) -> Optional[Action]:
        cmd = self.argv()
        logger.debug("Running command: %s", cmd)
        try:
            proc = subprocess.run(cmd, capture_output=True, check=False)
        except OSError as exc:
            raise wrap_error(
                SpawnError,
                f"Failed to run command {self.command}",
                context={"command": self.command, "args": list(self.args)},
                cause=exc,
            ) from exc
        logger.debug("Command %s exited with status %s", self.command, proc.returncode)
        return None

    def describe(self) -> str:
        return " ".join(self.argv())
