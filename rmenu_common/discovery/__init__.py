"""Entry-point discovery helpers."""

from .entrypoints import discover_entrypoints, load_entrypoint, load_pending_entrypoints

__all__ = ["discover_entrypoints", "load_entrypoint", "load_pending_entrypoints"]
