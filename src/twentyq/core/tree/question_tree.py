"""
Question tree game engine.

Plays rounds of twenty questions against the player, growing the tree each
time the computer guesses wrong, and reads/writes the tree in the preorder
text format from ``twentyq.io.tree_format``.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, TextIO, Tuple, Union

from twentyq.core.tree.models import QUESTION_TAG, QuestionNode, TreeStatistics
from twentyq.io.tree_format import TreeFormatError, format_record, parse_record
from twentyq.io.ui import UserInterface

logger = logging.getLogger(__name__)

DEFAULT_ANSWER = "computer"

LineSource = Union[TextIO, Iterable[str]]


class QuestionTree:
    """Decision tree of yes/no questions with session win/loss counters."""

    def __init__(self, ui: UserInterface, root: Optional[QuestionNode] = None):
        if ui is None:
            raise ValueError("a user interface is required")
        self.ui = ui
        self._root: Optional[QuestionNode] = root if root is not None else QuestionNode.answer(DEFAULT_ANSWER)
        self._games_played = 0
        self._games_won = 0

    @property
    def root(self) -> Optional[QuestionNode]:
        return self._root

    # =========================================================================
    # Playing
    # =========================================================================

    def play(self) -> None:
        """
        Play one game.

        Asks questions from the root down to an answer and guesses it. A
        correct guess counts as a win for the computer; a wrong guess asks the
        player for their object and a question that tells it apart, and grows
        the tree with it.
        """
        self._root = self._play(self._root)
        self._games_played += 1

    def _play(self, root: QuestionNode) -> QuestionNode:
        """Ask down to a guess; the returned root differs only when a lone answer was guessed wrong."""
        parent: Optional[QuestionNode] = None
        took_yes = False
        node = root
        while node.is_question:
            self.ui.print_text(node.text)
            parent, took_yes = node, self.ui.read_boolean()
            node = node.yes if took_yes else node.no

        self.ui.print_text(f"Would your object happen to be {node.text}?")
        if self.ui.read_boolean():
            self.ui.print_text("I win!")
            self._games_won += 1
            logger.info("Guessed correctly: %s", node.text)
            return root

        grown = self._grow(node)
        if parent is None:
            return grown
        if took_yes:
            parent.yes = grown
        else:
            parent.no = grown
        return root

    def _grow(self, wrong_guess: QuestionNode) -> QuestionNode:
        """Replace a wrong guess with a question separating it from the player's object."""
        self.ui.print_text("I lose. What is your object?")
        answer = self.ui.read_line()
        self.ui.print_text(f"Type a yes/no question to distinguish your item from {wrong_guess.text}:")
        question = self.ui.read_line()
        self.ui.print_text("And what is the answer for your object?")

        new_answer = QuestionNode.answer(answer)
        if self.ui.read_boolean():
            grown = QuestionNode.question(question, new_answer, wrong_guess)
        else:
            grown = QuestionNode.question(question, wrong_guess, new_answer)
        logger.info("Learned '%s' via '%s' (was '%s')", answer, question, wrong_guess.text)
        return grown

    # =========================================================================
    # Persistence
    # =========================================================================

    def save(self, output: TextIO) -> None:
        """Write the tree to ``output`` in preorder, one record per line."""
        _require_open(output, "output")
        count = 0
        if self._root is not None:
            for node in self._root.iter_preorder():
                output.write(format_record(node) + "\n")
                count += 1
        logger.info("Saved %d node(s)", count)

    def load(self, source: LineSource) -> None:
        """
        Replace the tree with one read from ``source``.

        The current tree is kept if the records are malformed; reading stops
        as soon as the tree is complete.
        """
        _require_open(source, "source")
        reader = _RecordReader(source)
        root = reader.read_tree()
        self._root = root
        logger.info("Loaded %d node(s) from %d line(s)", root.count_nodes(), reader.line_number)

    # =========================================================================
    # Statistics
    # =========================================================================

    def total_games_played(self) -> int:
        return self._games_played

    def total_games_won(self) -> int:
        """Games where the computer's final guess was confirmed."""
        return self._games_won

    def get_statistics(self) -> TreeStatistics:
        return TreeStatistics.from_root(self._root)


class _RecordReader:
    """Rebuilds nodes from a preorder record stream."""

    def __init__(self, source: LineSource):
        self._next_line = _line_reader(source)
        self.line_number = 0

    def read_tree(self) -> QuestionNode:
        # Questions still waiting for children, with the subtrees finished so far
        pending: List[Tuple[str, List[QuestionNode]]] = []
        while True:
            line = self._next_line()
            self.line_number += 1
            if line is None:
                raise TreeFormatError("unexpected end of input", line_number=self.line_number)
            tag, text = parse_record(line, self.line_number)
            if tag == QUESTION_TAG:
                pending.append((text, []))
                continue

            node = QuestionNode.answer(text)
            while pending:
                question, children = pending[-1]
                children.append(node)
                if len(children) < 2:
                    break
                pending.pop()
                node = QuestionNode.question(question, children[0], children[1])
            else:
                return node


def _line_reader(source: LineSource) -> Callable[[], Optional[str]]:
    readline = getattr(source, "readline", None)
    if readline is not None:
        # readline() returns "" only at end of input
        return lambda: readline() or None
    lines = iter(source)
    return lambda: next(lines, None)


def _require_open(stream: object, name: str) -> None:
    if stream is None:
        raise ValueError(f"{name} must not be None")
    if getattr(stream, "closed", False):
        raise ValueError(f"{name} is closed")


__all__ = ["DEFAULT_ANSWER", "QuestionTree"]
