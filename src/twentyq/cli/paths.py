from __future__ import annotations

"""Utilities for resolving question tree file paths."""

from pathlib import Path

TREE_SUFFIX = ".txt"
DEFAULT_TREE_NAME = "questions"


def trees_dir() -> Path:
    return Path.cwd() / "trees"


def ensure_trees_dir() -> None:
    trees_dir().mkdir(parents=True, exist_ok=True)


def default_tree_path() -> str:
    ensure_trees_dir()
    return str(trees_dir() / f"{DEFAULT_TREE_NAME}{TREE_SUFFIX}")


def resolve_tree_path(name: str) -> str:
    """Resolve where to save a tree.

    Bare names go under trees/; explicit paths are kept. If name has no
    .txt extension, it will be added.
    """
    p = Path(name)
    if not p.name.endswith(TREE_SUFFIX):
        p = p.with_name(f"{p.name}{TREE_SUFFIX}")
    if p.parent == Path("."):
        ensure_trees_dir()
        return str(trees_dir() / p.name)
    return str(p)


def find_tree_file(name_or_path: str) -> str:
    """
    Find a tree file with smart resolution.

    1. If path exists as-is, use it
    2. If path exists with .txt extension, use it
    3. Otherwise, look in trees/ folder
    4. Add .txt extension if missing

    Args:
        name_or_path: Either full path or just filename (with or without .txt)

    Returns:
        Resolved path to tree file

    Raises:
        FileNotFoundError: If file cannot be found
    """
    p = Path(name_or_path)

    if p.exists():
        return str(p)

    if not str(name_or_path).endswith(TREE_SUFFIX):
        p_with_suffix = Path(f"{name_or_path}{TREE_SUFFIX}")
        if p_with_suffix.exists():
            return str(p_with_suffix)

    base_name = p.name
    if not base_name.endswith(TREE_SUFFIX):
        base_name = f"{base_name}{TREE_SUFFIX}"

    tree_file = trees_dir() / base_name
    if tree_file.exists():
        return str(tree_file)

    raise FileNotFoundError(
        f"Tree file not found: '{name_or_path}'\nLooked in:\n  - {name_or_path}\n  - {tree_file}"
    )


__all__ = [
    "trees_dir",
    "ensure_trees_dir",
    "default_tree_path",
    "resolve_tree_path",
    "find_tree_file",
]
