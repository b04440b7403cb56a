"""
Question tree module.

Provides the decision tree data model for the guessing game. The engine
that plays, grows, saves and loads trees lives in
``twentyq.core.tree.question_tree``.

Components:
- QuestionNode: An answer (leaf) or a yes/no question with two children
- TreeStatistics: Shape summary of a tree

Example:
    from twentyq.core.tree.question_tree import QuestionTree
    from twentyq.io.ui import ConsoleUserInterface

    tree = QuestionTree(ConsoleUserInterface())
    tree.play()
    with open("questions.txt", "w", encoding="utf-8") as f:
        tree.save(f)
"""

from twentyq.core.tree.models import ANSWER_TAG, QUESTION_TAG, QuestionNode, TreeStatistics

__all__ = [
    "ANSWER_TAG",
    "QUESTION_TAG",
    "QuestionNode",
    "TreeStatistics",
]
