"""
Action interface shared by every node of a menu tree.

An action is built once from configuration and is read-only afterwards.
Running it may spawn processes; the return value tells the dispatch loop
what to run next.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, Optional


class Action(ABC):
    """A runnable node in the menu tree."""

    @abstractmethod
    def run(self) -> Optional["Action"]:
        """
        Execute the action.

        Returns:
            None when the chain is finished, otherwise another action owned
            by the same tree that must run next.

        Raises:
            RMenuError: on any failure; the whole chain is aborted.
        """
        pass

    def describe(self) -> str:
        """Short human-readable label used in logs and tree listings."""
        return self.__class__.__name__

    def children(self) -> Iterator[tuple[str, "Action"]]:
        """Yield ``(label, action)`` pairs for actions owned by this node."""
        return iter(())
