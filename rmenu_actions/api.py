"""Public API surface for rmenu_actions."""

from rmenu_actions.builder import ActionBuilder, build_action
from rmenu_actions.command import CommandAction
from rmenu_actions.config import default_config_path, load_config, resolve_config_path
from rmenu_actions.dispatch import run_chain
from rmenu_actions.interface import Action
from rmenu_actions.menu import MenuAction
from rmenu_actions.picker import Picker, RofiPicker, serialize_options
from rmenu_actions.registry import (
    BUILTIN_TAGS,
    ENTRYPOINT_GROUP,
    ActionConstructor,
    ActionRegistry,
)
from rmenu_actions.service import LoadedMenu, MenuService
from rmenu_actions.settings import PickerSettings

__all__ = [
    "Action",
    "ActionBuilder",
    "ActionConstructor",
    "ActionRegistry",
    "BUILTIN_TAGS",
    "CommandAction",
    "ENTRYPOINT_GROUP",
    "LoadedMenu",
    "MenuAction",
    "MenuService",
    "Picker",
    "PickerSettings",
    "RofiPicker",
    "build_action",
    "default_config_path",
    "load_config",
    "resolve_config_path",
    "run_chain",
    "serialize_options",
]
