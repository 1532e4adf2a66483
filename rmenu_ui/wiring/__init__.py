"""Dependency wiring for the CLI."""

from .dependencies import UIContext

__all__ = ["UIContext"]
