"""Settings for the interactive picker, sourced from the environment."""

from __future__ import annotations

import os
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from rmenu_common.config import parse_args_env
from rmenu_common.errors import ConfigLoadError, wrap_error


DEFAULT_PICKER = "/usr/bin/rofi"


class PickerSettings(BaseModel):
    """How to launch the picker process."""

    binary: str = Field(
        default=DEFAULT_PICKER,
        description="Path or name of the rofi-compatible picker executable",
    )
    extra_args: List[str] = Field(
        default_factory=list,
        description="Arguments appended after the selection flags (e.g. a theme)",
    )

    model_config = {
        "extra": "ignore",
        "frozen": True,
    }

    @field_validator("binary")
    @classmethod
    def _binary_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("picker binary must not be empty")
        return value

    @classmethod
    def validated(cls, data: Mapping[str, Any], *, source: str) -> "PickerSettings":
        """Build settings, reporting invalid values as ConfigLoadError."""
        try:
            return cls(**data)
        except ValidationError as exc:
            messages = "; ".join(str(err["msg"]) for err in exc.errors())
            raise wrap_error(
                ConfigLoadError,
                f"Invalid picker settings from {source}: {messages}",
                context={"source": source},
                cause=exc,
            ) from exc

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PickerSettings":
        """Build settings from ``RMENU_PICKER`` and ``RMENU_PICKER_ARGS``."""
        env = os.environ if environ is None else environ
        data: dict[str, object] = {}
        binary = env.get("RMENU_PICKER")
        if binary and binary.strip():
            data["binary"] = binary
        raw_args = env.get("RMENU_PICKER_ARGS")
        try:
            extra = parse_args_env(raw_args)
        except ValueError as exc:
            raise wrap_error(
                ConfigLoadError,
                f"Invalid RMENU_PICKER_ARGS: {exc}",
                context={"variable": "RMENU_PICKER_ARGS", "value": raw_args},
                cause=exc,
            ) from exc
        if extra:
            data["extra_args"] = extra
        return cls.validated(data, source="environment")
