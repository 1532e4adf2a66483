"""Composite action presenting labelled choices through the picker."""

from __future__ import annotations

import logging
from typing import Iterator, Mapping, Optional

from rmenu_common.errors import UnmappedSelectionError

from .interface import Action
from .picker import Picker, serialize_options


logger = logging.getLogger(__name__)


class MenuAction(Action):
    """
    A named menu whose options map display labels to nested actions.

    Option order is display order. Labels are unique; inserting a label twice
    keeps the last action (plain ``dict`` semantics).
    """

    def __init__(
        self,
        name: str,
        prompt: str,
        options: Mapping[str, Action],
        picker: Picker,
    ) -> None:
        self.name = name
        self.prompt = prompt
        self._options: dict[str, Action] = dict(options)
        self._picker = picker

    @property
    def options(self) -> Mapping[str, Action]:
        return self._options

    @property
    def picker(self) -> Picker:
        return self._picker

    def labels(self) -> list[str]:
        return list(self._options)

    def option_lines(self) -> str:
        """Picker input: one label per line, in option order."""
        return serialize_options(self.labels())

    def run(self) -> Optional[Action]:
        output = self._picker.select(self.prompt, self.labels())
        if not output:
            logger.debug("Menu %s cancelled", self.name)
            return None
        return self.resolve(output.rstrip())

    def resolve(self, selection: str) -> Action:
        """Map a picker selection to its action."""
        try:
            action = self._options[selection]
        except KeyError:
            raise UnmappedSelectionError(
                f"Menu item {selection!r} has no action",
                context={"menu": self.name, "selection": selection},
            ) from None
        logger.debug("Menu %s selected %r -> %s", self.name, selection, action.describe())
        return action

    def describe(self) -> str:
        return f"{self.name}: {self.prompt}"

    def children(self) -> Iterator[tuple[str, Action]]:
        return iter(self._options.items())
