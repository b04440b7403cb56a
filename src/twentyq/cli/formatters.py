"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from typing import Optional

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from twentyq.core.tree.models import QuestionNode, TreeStatistics


def format_node(node: QuestionNode) -> str:
    """Format a node label for display."""
    if node.is_answer:
        return f"[green]{escape(node.text)}[/green]"
    return f"[bold]{escape(node.text)}[/bold]"


def build_tree_view(root: Optional[QuestionNode], title: str = "Questions") -> Tree:
    """Render a question tree with yes/no branches."""
    view = Tree(f"[bold cyan]{escape(title)}[/bold cyan]")
    if root is None:
        view.add("[dim]empty[/dim]")
        return view

    stack = [(view.add(format_node(root)), root)]
    while stack:
        branch, node = stack.pop()
        if node.is_answer:
            continue
        yes_branch = branch.add(f"[dim]yes:[/dim] {format_node(node.yes)}")
        no_branch = branch.add(f"[dim]no:[/dim] {format_node(node.no)}")
        stack.append((no_branch, node.no))
        stack.append((yes_branch, node.yes))
    return view


def build_statistics_table(stats: TreeStatistics, title: str = "Tree Statistics") -> Table:
    table = Table(title=title)
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Nodes", str(stats.total_nodes))
    table.add_row("Questions", str(stats.questions))
    table.add_row("Answers", str(stats.answers))
    table.add_row("Depth", str(stats.depth))
    return table


__all__ = [
    "build_statistics_table",
    "build_tree_view",
    "format_node",
]
