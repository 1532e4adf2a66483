"""
Build an action tree from an already-parsed configuration value.

The value is the generic tree produced by a document decoder (mappings,
sequences and scalars). Every node carries a ``type`` tag: ``Menu`` and
``Command`` (and their legacy ``Rofi*`` spellings) are built here, any other
tag is delegated to the registry.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from rmenu_common.errors import (
    InvalidTypeFieldError,
    MalformedConfigError,
    MissingTypeError,
    UnknownActionTypeError,
)

from .command import CommandAction
from .interface import Action
from .menu import MenuAction
from .picker import Picker, RofiPicker
from .registry import COMMAND_TAGS, MENU_TAGS, ActionConstructor, ActionRegistry


logger = logging.getLogger(__name__)

_MISSING = object()


def _get(value: Any, key: str) -> Any:
    if not isinstance(value, Mapping):
        return _MISSING
    return value.get(key, _MISSING)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def require_field(value: Any, key: str, container: str) -> Any:
    """Return ``value[key]`` or raise MalformedConfigError naming the container."""
    found = _get(value, key)
    if found is _MISSING:
        raise MalformedConfigError(
            f"{container} has no {key}",
            context={"field": key, "container": container, "expected": "present"},
        )
    return found


def require_str(value: Any, key: str, container: str) -> str:
    found = require_field(value, key, container)
    if not isinstance(found, str):
        raise MalformedConfigError(
            f"{container} {key} is not a string",
            context={"field": key, "container": container, "expected": "string"},
        )
    return found


def require_sequence(value: Any, key: str, container: str) -> Sequence[Any]:
    found = require_field(value, key, container)
    if not _is_sequence(found):
        raise MalformedConfigError(
            f"{container} {key} is not a sequence",
            context={"field": key, "container": container, "expected": "sequence"},
        )
    return found


class ActionBuilder:
    """Turn configuration values into actions.

    Menus built here share ``picker``; third-party tags resolve through
    ``registry``.
    """

    def __init__(
        self,
        registry: Optional[ActionRegistry] = None,
        picker: Optional[Picker] = None,
    ) -> None:
        self.registry = registry if registry is not None else ActionRegistry(discover=False)
        self.picker: Picker = picker if picker is not None else RofiPicker()

    def add_subbuilder(self, tag: str, constructor: ActionConstructor) -> None:
        """Shortcut for ``registry.add_subbuilder``."""
        self.registry.add_subbuilder(tag, constructor)

    def build_action(self, value: Any) -> Action:
        tag = _get(value, "type")
        if tag is _MISSING:
            raise MissingTypeError(
                "Action with no type",
                context={"field": "type", "container": "Action", "expected": "present"},
            )
        if not isinstance(tag, str):
            raise InvalidTypeFieldError(
                "Type is not a string",
                context={"field": "type", "container": "Action", "expected": "string"},
            )

        if tag in MENU_TAGS:
            return self.build_menu(value)
        if tag in COMMAND_TAGS:
            return self.build_command(value)

        constructor = self.registry.get(tag)
        if constructor is None:
            raise UnknownActionTypeError(tag)
        logger.debug("Building %s action through registered constructor", tag)
        return constructor(value)

    def build_command(self, value: Any) -> CommandAction:
        command = require_str(value, "command", "Command")
        args = require_sequence(value, "args", "Command")
        return CommandAction(command, tuple(arg for arg in args if isinstance(arg, str)))

    def build_menu(self, value: Any) -> MenuAction:
        name = require_str(value, "name", "Menu")
        prompt = require_str(value, "prompt", "Menu")
        raw_options = require_sequence(value, "options", "Menu")

        options: dict[str, Action] = {}
        for option in raw_options:
            if not isinstance(option, Mapping):
                logger.debug("Menu %s: skipping non-mapping option %r", name, option)
                continue
            label = require_str(option, "string", "Menu option")
            if not label or "\n" in label or "\r" in label:
                logger.debug("Menu %s: skipping unselectable label %r", name, label)
                continue
            nested = require_field(option, "action", "Menu option")
            options[label] = self.build_action(nested)
        return MenuAction(name, prompt, options, self.picker)


def build_action(
    value: Any,
    registry: Optional[ActionRegistry] = None,
    picker: Optional[Picker] = None,
) -> Action:
    """Build a tree with a throwaway builder."""
    return ActionBuilder(registry, picker).build_action(value)
