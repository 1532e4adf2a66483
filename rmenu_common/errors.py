"""Shared error taxonomy for rmenu."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class RMenuError(Exception):
    """Base error type for every failure raised while building or running menus."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class ConfigLoadError(RMenuError):
    """The configuration document could not be read or parsed."""


class MalformedConfigError(RMenuError):
    """A required field is missing or has the wrong type."""


class MissingTypeError(MalformedConfigError):
    """An action node has no ``type`` field."""


class InvalidTypeFieldError(MalformedConfigError):
    """An action node has a ``type`` field that is not text."""


class UnknownActionTypeError(RMenuError):
    """No builder is registered for an action type tag."""

    def __init__(
        self,
        tag: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        merged = {"tag": tag, **(context or {})}
        super().__init__(f"Unknown action type {tag}", context=merged, cause=cause)
        self.tag = tag


class SpawnError(RMenuError):
    """A subprocess could not be launched."""


class ProcessIOError(RMenuError):
    """Writing to or reading from a live subprocess failed."""


class UnmappedSelectionError(RMenuError):
    """The picker returned a selection that matches no menu option."""


T = TypeVar("T", bound=RMenuError)


def wrap_error(
    error_cls: type[T],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> T:
    """Create a typed RMenuError with optional context and cause."""
    return error_cls(message, context=context, cause=cause)


def error_to_payload(error: RMenuError) -> dict[str, Any]:
    """Convert an RMenuError to a flat payload suitable for structured logs."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
