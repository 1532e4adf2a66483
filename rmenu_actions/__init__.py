"""Action tree construction and dispatch for rmenu."""

from rmenu_actions.api import (
    Action,
    ActionBuilder,
    ActionRegistry,
    CommandAction,
    MenuAction,
    RofiPicker,
    run_chain,
)

__all__ = [
    "Action",
    "ActionBuilder",
    "ActionRegistry",
    "CommandAction",
    "MenuAction",
    "RofiPicker",
    "run_chain",
]
