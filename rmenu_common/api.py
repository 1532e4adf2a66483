"""Public API surface for rmenu_common."""

from rmenu_common.errors import (
    ConfigLoadError,
    InvalidTypeFieldError,
    MalformedConfigError,
    MissingTypeError,
    ProcessIOError,
    RMenuError,
    SpawnError,
    UnknownActionTypeError,
    UnmappedSelectionError,
    error_to_payload,
    wrap_error,
)
from rmenu_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "ConfigLoadError",
    "InvalidTypeFieldError",
    "MalformedConfigError",
    "MissingTypeError",
    "ProcessIOError",
    "RMenuError",
    "SpawnError",
    "UnknownActionTypeError",
    "UnmappedSelectionError",
    "error_to_payload",
    "wrap_error",
]
