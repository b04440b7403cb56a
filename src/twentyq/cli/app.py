"""
Twenty questions CLI: play against a learning question tree and inspect saved trees.

- play: interactive games, optionally starting from and saving to a tree file
- show: print a saved tree with its yes/no branches
- stats: summarize a saved tree's shape
- export: dump a saved tree to YAML for inspection
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from twentyq.cli.formatters import build_statistics_table, build_tree_view
from twentyq.cli.load_helpers import load_or_exit, resolve_or_exit
from twentyq.cli.paths import default_tree_path, resolve_tree_path
from twentyq.core.tree.question_tree import QuestionTree
from twentyq.io.loaders import export_yaml, read_tree_file, write_tree_file
from twentyq.io.ui import ConsoleUserInterface, ScriptedUserInterface
from twentyq.utils.logging import configure_logging

app = typer.Typer(help="Twenty questions: play against a learning question tree and inspect saved trees.")
console = Console(highlight=False)


def _load_tree(resolved: str, *, verbose_load: bool = False) -> QuestionTree:
    """Load a saved tree for read-only commands."""
    tree = QuestionTree(ScriptedUserInterface())
    load_or_exit(read_tree_file, resolved, tree, console=console, verbose_errors=verbose_load)
    return tree


@app.command()
def play(
    load: Optional[str] = typer.Option(None, "--load", "-l", help="Tree file to start from"),
    save: Optional[str] = typer.Option(
        None,
        "--save",
        "-s",
        help="Where to save the tree when done (bare names resolve to trees/<name>.txt)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """Play games of twenty questions until you decline another round."""
    configure_logging(verbose)
    ui = ConsoleUserInterface(console)
    tree = QuestionTree(ui)

    if load:
        resolved = resolve_or_exit(load, console=console)
        load_or_exit(read_tree_file, resolved, tree, console=console, verbose_errors=verbose)
        console.print(f"[dim]Loaded {resolved}[/dim]")

    console.print("[bold]Welcome to the game of 20 questions![/bold]")
    try:
        while True:
            console.print("\nThink of an object and I will try to guess it.")
            tree.play()
            ui.print_text("Do you want to play again?")
            if not ui.read_boolean():
                break
    except EOFError:
        console.print("\n[yellow]Input closed, ending session[/yellow]")

    console.print(f"\nGames played: {tree.total_games_played()}")
    console.print(f"Computer won: {tree.total_games_won()}")

    if save:
        path = resolve_tree_path(save)
        load_or_exit(write_tree_file, tree, path, console=console, failure="Failed to save data")
        console.print(f"[green]Saved:[/green] {path}")


@app.command()
def show(
    file_path: Optional[str] = typer.Argument(
        None,
        help="Tree name or path (bare names resolve to trees/<name>.txt; defaults to trees/questions.txt)",
    ),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full error detail on load failures"),
) -> None:
    """Print a saved tree with its yes/no branches."""
    resolved = resolve_or_exit(file_path or default_tree_path(), console=console)
    tree = _load_tree(resolved, verbose_load=verbose)
    console.print(build_tree_view(tree.root, title=Path(resolved).name))


@app.command()
def stats(
    file_path: Optional[str] = typer.Argument(
        None,
        help="Tree name or path (bare names resolve to trees/<name>.txt; defaults to trees/questions.txt)",
    ),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full error detail on load failures"),
) -> None:
    """Summarize a saved tree's shape."""
    resolved = resolve_or_exit(file_path or default_tree_path(), console=console)
    tree = _load_tree(resolved, verbose_load=verbose)
    console.print(build_statistics_table(tree.get_statistics()))

    answers = tree.root.known_answers() if tree.root is not None else []
    if answers:
        console.print(f"\n[bold]Known objects ({len(answers)}):[/bold]")
        for answer in answers:
            console.print(f"  - {answer}", markup=False)


@app.command()
def export(
    file_path: Optional[str] = typer.Argument(
        None,
        help="Tree name or path (bare names resolve to trees/<name>.txt; defaults to trees/questions.txt)",
    ),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output YAML file path"),
) -> None:
    """Export a saved tree to YAML."""
    resolved = resolve_or_exit(file_path or default_tree_path(), console=console)
    tree = _load_tree(resolved)
    out_path = output or str(Path(resolved).with_suffix(".yaml"))
    load_or_exit(export_yaml, tree.root, out_path, console=console, failure="Failed to export data")
    console.print(f"[green]Exported:[/green] {out_path}")


__all__ = ["app"]
