"""Top-level driver: load a document, build the tree, run the chain."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .builder import ActionBuilder
from .config import load_config, resolve_config_path
from .dispatch import run_chain
from .interface import Action
from .picker import Picker, RofiPicker
from .registry import ActionRegistry
from .settings import PickerSettings


logger = logging.getLogger(__name__)


@dataclass
class LoadedMenu:
    """A built action tree and the file it came from."""

    path: Path
    root: Action


@dataclass
class MenuService:
    """Own the registry and picker used for one process lifetime."""

    registry: ActionRegistry = field(default_factory=ActionRegistry)
    picker: Optional[Picker] = None

    def __post_init__(self) -> None:
        if self.picker is None:
            self.picker = RofiPicker.from_settings(PickerSettings.from_env())

    def builder(self) -> ActionBuilder:
        return ActionBuilder(self.registry, self.picker)

    def load(self, config_path: Optional[Path] = None) -> LoadedMenu:
        """Resolve, read and build the configuration. Nothing is executed."""
        path = resolve_config_path(config_path)
        logger.debug("Loading menu configuration from %s", path)
        document = load_config(path)
        return LoadedMenu(path=path, root=self.builder().build_action(document))

    def run(self, config_path: Optional[Path] = None) -> int:
        """Build the tree and drive it; return the number of actions run."""
        loaded = self.load(config_path)
        return run_chain(loaded.root)
