from __future__ import annotations

"""File helpers for reading, writing and exporting question trees."""

import os
from typing import Optional

import yaml

from twentyq.core.tree.models import QuestionNode
from twentyq.core.tree.question_tree import QuestionTree
from twentyq.io.loaders.errors import LoaderError
from twentyq.io.tree_format import TreeFormatError
from twentyq.utils.logging import log_calls


@log_calls()
def read_tree_file(path: str, tree: QuestionTree) -> None:
    """Replace ``tree``'s questions with those stored at ``path``."""
    if not os.path.exists(path):
        raise LoaderError(path, "Tree file not found")
    try:
        # utf-8-sig drops a leading byte order mark from hand-edited files
        with open(path, "r", encoding="utf-8-sig") as f:
            tree.load(f)
    except TreeFormatError as exc:
        raise LoaderError(path, "Invalid question tree", cause=exc) from exc
    except UnicodeDecodeError as exc:
        raise LoaderError(path, "Tree file is not UTF-8 text", cause=exc) from exc
    except OSError as exc:
        raise LoaderError(path, "Failed to read question tree", cause=exc) from exc


@log_calls()
def write_tree_file(tree: QuestionTree, path: str) -> None:
    """Save ``tree`` to ``path``, creating parent folders as needed."""
    parent = os.path.dirname(path)
    try:
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            tree.save(f)
    except OSError as exc:
        raise LoaderError(path, "Failed to write question tree", cause=exc) from exc


@log_calls()
def export_yaml(root: Optional[QuestionNode], path: str) -> None:
    """Write a nested YAML view of the tree for inspection."""
    data = root.to_dict() if root is not None else {}
    try:
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
    except OSError as exc:
        raise LoaderError(path, "Failed to export question tree", cause=exc) from exc
