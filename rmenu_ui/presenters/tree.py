"""Rich renderables describing action trees and registered types."""

from __future__ import annotations

from typing import Iterable

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from rmenu_actions.api import Action, CommandAction, MenuAction


def _node_label(action: Action) -> str:
    if isinstance(action, MenuAction):
        return f"[bold]{escape(action.name)}[/bold] [dim]({escape(action.prompt)})[/dim]"
    if isinstance(action, CommandAction):
        return f"[green]$ {escape(action.describe())}[/green]"
    return f"[magenta]{escape(action.describe())}[/magenta]"


def _add_children(node: Tree, action: Action) -> None:
    for label, child in action.children():
        branch = node.add(f"[cyan]{escape(label)}[/cyan] → {_node_label(child)}")
        _add_children(branch, child)


def action_tree(root: Action, *, title: str | None = None) -> Tree:
    """Render ``root`` and its owned actions as a rich Tree."""
    label = _node_label(root)
    if title is None:
        tree = Tree(label)
        _add_children(tree, root)
        return tree
    tree = Tree(escape(title))
    _add_children(tree.add(label), root)
    return tree


def registry_table(builtin: Iterable[str], registered: Iterable[str], pending: Iterable[str]) -> Table:
    """Table of known action type tags and where they come from."""
    table = Table(title="Action types", show_header=True, header_style="bold magenta")
    table.add_column("Type", style="cyan")
    table.add_column("Source")
    for tag in sorted(builtin):
        table.add_row(tag, "built-in")
    for tag in sorted(registered):
        table.add_row(tag, "registered")
    for tag in sorted(pending):
        table.add_row(tag, "entry point")
    return table
