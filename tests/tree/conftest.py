"""
Shared fixtures for question tree tests.
"""

import pytest

from twentyq.core.tree.question_tree import QuestionTree
from twentyq.io.ui import ScriptedUserInterface

from .helpers import build_animal_tree


@pytest.fixture
def ui() -> ScriptedUserInterface:
    return ScriptedUserInterface()


@pytest.fixture
def animal_tree(ui) -> QuestionTree:
    return QuestionTree(ui, root=build_animal_tree())
