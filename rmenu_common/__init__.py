"""Shared helpers for rmenu."""

from rmenu_common.api import RMenuError, configure_logging

__all__ = ["configure_logging", "RMenuError"]
