from __future__ import annotations

"""Shared helpers for loading question trees with CLI-friendly errors."""

from typing import Any, Callable

import typer
from rich.console import Console
from rich.markup import escape

from twentyq.cli.paths import find_tree_file
from twentyq.io.loaders import LoaderError


def resolve_or_exit(name_or_path: str, *, console: Console) -> str:
    try:
        return find_tree_file(name_or_path)
    except FileNotFoundError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)


def load_or_exit(
    loader_fn: Callable[..., Any],
    *args: Any,
    console: Console,
    verbose_errors: bool = False,
    failure: str = "Failed to load data",
    **kwargs: Any,
) -> None:
    try:
        loader_fn(*args, **kwargs)
    except LoaderError as err:
        if verbose_errors and err.cause:
            console.print(f"[red]{failure}:[/red] {escape(err.message)}\n{escape(repr(err.cause))}")
        else:
            console.print(f"[red]{failure}:[/red] {escape(str(err))}")
        raise typer.Exit(code=1)


__all__ = ["load_or_exit", "resolve_or_exit"]
