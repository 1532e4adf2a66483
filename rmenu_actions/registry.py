"""
Registry of constructors for third-party action types.
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import Any, Callable, Dict, Mapping, Optional

from rmenu_common.discovery import (
    discover_entrypoints,
    load_entrypoint,
    load_pending_entrypoints,
)

from .interface import Action


logger = logging.getLogger(__name__)
ENTRYPOINT_GROUP = "rmenu.actions"

MENU_TAGS = frozenset({"Menu", "RofiMenu"})
COMMAND_TAGS = frozenset({"Command", "RofiCommand"})
BUILTIN_TAGS = MENU_TAGS | COMMAND_TAGS

ActionConstructor = Callable[[Any], Action]


class ActionRegistry:
    """Map type tags to constructors, including entry-point provided ones.

    Built-in tags are resolved by the builder before the registry is consulted,
    so registering one of them has no effect on building.
    """

    def __init__(
        self,
        builders: Optional[Mapping[str, ActionConstructor]] = None,
        *,
        discover: bool = True,
    ) -> None:
        self._builders: Dict[str, ActionConstructor] = {}
        self._pending_entrypoints: Dict[str, importlib.metadata.EntryPoint] = {}
        if builders:
            for tag, constructor in builders.items():
                self.add_subbuilder(tag, constructor)
        if discover:
            self._discover_entrypoint_builders()

    def add_subbuilder(self, tag: str, constructor: ActionConstructor) -> None:
        """Register (or replace) the constructor for ``tag``."""
        if not callable(constructor):
            raise TypeError(f"Constructor for {tag!r} is not callable: {constructor!r}")
        if tag in BUILTIN_TAGS:
            logger.warning(
                "Action type %s is built in; the registered constructor will never be used",
                tag,
            )
        self._pending_entrypoints.pop(tag, None)
        self._builders[tag] = constructor

    def get(self, tag: str) -> Optional[ActionConstructor]:
        if tag not in self._builders and tag in self._pending_entrypoints:
            self._load_entrypoint(tag)
        return self._builders.get(tag)

    def available(self, load_entrypoints: bool = False) -> Dict[str, ActionConstructor]:
        """
        Return registered constructors.

        When load_entrypoints is True, pending entry points are imported first;
        otherwise only already-registered constructors are returned.
        """
        if load_entrypoints:
            load_pending_entrypoints(
                self._pending_entrypoints, self.add_subbuilder, label="action entry point"
            )
        return dict(self._builders)

    def pending(self) -> list[str]:
        """Names of discovered entry points not imported yet."""
        return list(self._pending_entrypoints)

    def __contains__(self, tag: object) -> bool:
        return tag in self._builders or tag in self._pending_entrypoints

    def _discover_entrypoint_builders(self) -> None:
        for name, entry_point in discover_entrypoints([ENTRYPOINT_GROUP]).items():
            if name in self._builders:
                continue
            self._pending_entrypoints[name] = entry_point

    def _load_entrypoint(self, tag: str) -> None:
        entry_point = self._pending_entrypoints.pop(tag, None)
        if not entry_point:
            return
        load_entrypoint(entry_point, self.add_subbuilder, label="action entry point")
