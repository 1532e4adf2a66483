from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rmenu_actions.api import ActionRegistry, MenuService, PickerSettings, RofiPicker
from rmenu_ui.presenters import Presenter, RichPresenter


@dataclass
class UIContext:
    """Container for CLI services and state, initialized lazily."""

    picker_binary: Optional[str] = None

    _presenter: Optional[Presenter] = None
    _registry: Optional[ActionRegistry] = None
    _menu_service: Optional[MenuService] = None

    @property
    def present(self) -> Presenter:
        if self._presenter is None:
            self._presenter = RichPresenter()
        return self._presenter

    @present.setter
    def present(self, value: Presenter) -> None:
        self._presenter = value

    @property
    def registry(self) -> ActionRegistry:
        if self._registry is None:
            self._registry = ActionRegistry()
        return self._registry

    @registry.setter
    def registry(self, value: ActionRegistry) -> None:
        self._registry = value

    @property
    def menu_service(self) -> MenuService:
        if self._menu_service is None:
            settings = PickerSettings.from_env()
            if self.picker_binary:
                settings = PickerSettings.validated(
                    {"binary": self.picker_binary, "extra_args": settings.extra_args},
                    source="--picker",
                )
            self._menu_service = MenuService(
                registry=self.registry,
                picker=RofiPicker.from_settings(settings),
            )
        return self._menu_service

    @menu_service.setter
    def menu_service(self, value: MenuService) -> None:
        self._menu_service = value
