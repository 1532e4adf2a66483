"""Console presenters for CLI output."""

from .presenter import Presenter, RichPresenter
from .tree import action_tree, registry_table

__all__ = ["Presenter", "RichPresenter", "action_tree", "registry_table"]
