"""
Decision tree data models.

These models represent the knowledge the guessing game plays with:
- QuestionNode: Either an answer (leaf) or a yes/no question with two children
- TreeStatistics: Summary of a tree's shape

Tree Structure:
    Q: Does it use electricity?
    ├── yes: A: computer
    └── no:  A: rock

A node is an answer iff both children are absent. Nodes with exactly one
child are rejected on construction.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, model_validator

QUESTION_TAG = "Q"
ANSWER_TAG = "A"


class QuestionNode(BaseModel):
    """A yes/no question with two subtrees, or a single answer to guess."""

    text: str
    yes: Optional[QuestionNode] = None
    no: Optional[QuestionNode] = None

    @model_validator(mode="after")
    def _check_children(self) -> QuestionNode:
        if (self.yes is None) != (self.no is None):
            raise ValueError(f"node '{self.text}' must have either two children or none")
        return self

    @classmethod
    def answer(cls, text: str) -> QuestionNode:
        """Build a leaf holding an object to guess."""
        return cls(text=text)

    @classmethod
    def question(cls, text: str, yes: QuestionNode, no: QuestionNode) -> QuestionNode:
        """Build an internal node asking ``text``."""
        return cls(text=text, yes=yes, no=no)

    @property
    def is_answer(self) -> bool:
        return self.yes is None and self.no is None

    @property
    def is_question(self) -> bool:
        return not self.is_answer

    @property
    def tag(self) -> str:
        """Record tag used by the text format."""
        return ANSWER_TAG if self.is_answer else QUESTION_TAG

    # =========================================================================
    # Traversal
    # =========================================================================

    def iter_preorder(self) -> Iterator[QuestionNode]:
        """Yield this node, then the yes subtree, then the no subtree."""
        stack: List[QuestionNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.is_question:
                stack.append(node.no)
                stack.append(node.yes)

    def known_answers(self) -> List[str]:
        """Answer texts in preorder."""
        return [node.text for node in self.iter_preorder() if node.is_answer]

    # =========================================================================
    # Statistics
    # =========================================================================

    def count_nodes(self) -> int:
        return sum(1 for _ in self.iter_preorder())

    def count_answers(self) -> int:
        return sum(1 for node in self.iter_preorder() if node.is_answer)

    def count_questions(self) -> int:
        return sum(1 for node in self.iter_preorder() if node.is_question)

    def depth(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        deepest = 0
        stack = [(self, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            if node.is_question:
                stack.append((node.yes, level + 1))
                stack.append((node.no, level + 1))
        return deepest

    def describe(self) -> str:
        """Human-readable description of this node."""
        return f"{self.tag}: {self.text}"

    def to_dict(self) -> Dict[str, Any]:
        """
        Flatten subtree to a dictionary for YAML export.

        Nodes are keyed by preorder position (node0, node1, ...) and questions
        refer to their children by key, so the output stays shallow for any
        tree depth.
        """
        ordered = list(self.iter_preorder())
        keys = {id(node): f"node{index}" for index, node in enumerate(ordered)}
        nodes: Dict[str, Dict[str, str]] = {}
        for node in ordered:
            if node.is_answer:
                nodes[keys[id(node)]] = {"answer": node.text}
            else:
                nodes[keys[id(node)]] = {
                    "question": node.text,
                    "yes": keys[id(node.yes)],
                    "no": keys[id(node.no)],
                }
        return {"root": keys[id(self)], "nodes": nodes}

    def __repr__(self) -> str:
        return f"QuestionNode({self.describe()!r})"

    def __str__(self) -> str:
        return self.describe()


class TreeStatistics(BaseModel):
    """Shape summary of a decision tree."""

    total_nodes: int = 0
    questions: int = 0
    answers: int = 0
    depth: int = 0

    @classmethod
    def from_root(cls, root: Optional[QuestionNode]) -> TreeStatistics:
        if root is None:
            return cls()
        return cls(
            total_nodes=root.count_nodes(),
            questions=root.count_questions(),
            answers=root.count_answers(),
            depth=root.depth(),
        )


__all__ = [
    "ANSWER_TAG",
    "QUESTION_TAG",
    "QuestionNode",
    "TreeStatistics",
]
