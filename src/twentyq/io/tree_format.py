"""
Line-oriented text format for question trees.

One record per node, preorder (node, yes subtree, no subtree):

    Q:Does it use electricity?
    A:computer
    A:rock

The tag is one character followed by a colon; the rest of the line is the
node text, stored verbatim. There is no escaping, so text containing a line
break cannot be stored.
"""

from __future__ import annotations

from typing import Optional, Tuple

from twentyq.core.tree.models import ANSWER_TAG, QUESTION_TAG, QuestionNode

SEPARATOR = ":"
PREFIX_LENGTH = len(QUESTION_TAG) + len(SEPARATOR)
KNOWN_TAGS = (QUESTION_TAG, ANSWER_TAG)


class TreeFormatError(ValueError):
    """Raised when a question tree record stream is malformed."""

    def __init__(self, message: str, *, line_number: int, line: Optional[str] = None):
        self.message = message
        self.line_number = line_number
        self.line = line
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.line is None:
            return f"line {self.line_number}: {self.message}"
        return f"line {self.line_number}: {self.message}: {self.line!r}"

    def __str__(self) -> str:
        return self._build_message()


def format_record(node: QuestionNode) -> str:
    """Render a single node as a record, without line terminator."""
    return f"{node.tag}{SEPARATOR}{node.text}"


def parse_record(line: str, line_number: int) -> Tuple[str, str]:
    """Split a record into ``(tag, text)``.

    The trailing line terminator is dropped; everything after the two
    character prefix is returned untouched.
    """
    record = line.rstrip("\r\n")
    prefix = record[:PREFIX_LENGTH]
    tag = prefix[:1]
    if tag not in KNOWN_TAGS or prefix[1:] != SEPARATOR:
        raise TreeFormatError("unrecognized record tag", line_number=line_number, line=record)
    return tag, record[PREFIX_LENGTH:]


__all__ = [
    "KNOWN_TAGS",
    "PREFIX_LENGTH",
    "SEPARATOR",
    "TreeFormatError",
    "format_record",
    "parse_record",
]
