"""
Interactive I/O providers consumed by the question tree.

The tree only needs three operations: show a line of text, ask for a
yes/no response and ask for a free-text line. Interpreting raw input as a
boolean is the provider's job.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, Union, runtime_checkable

from rich.console import Console


@runtime_checkable
class UserInterface(Protocol):
    """Synchronous request/response channel to the player."""

    def print_text(self, text: str) -> None: ...

    def read_boolean(self) -> bool: ...

    def read_line(self) -> str: ...


class ConsoleUserInterface:
    """Terminal provider backed by a rich Console."""

    RETRY_MESSAGE = "Please answer yes or no."

    def __init__(self, console: Optional[Console] = None, prompt: str = "> "):
        self.console = console or Console(highlight=False)
        self.prompt = prompt

    def print_text(self, text: str) -> None:
        # Player-authored text is shown verbatim: no markup, no highlighting
        self.console.print(text, markup=False, highlight=False)

    def read_line(self) -> str:
        return self.console.input(self.prompt).strip()

    def read_boolean(self) -> bool:
        while True:
            response = self.console.input(self.prompt).strip().lower()
            if response.startswith("y"):
                return True
            if response.startswith("n"):
                return False
            self.console.print(self.RETRY_MESSAGE)


class ScriptedUserInterface:
    """
    Replays a fixed sequence of responses and records the transcript.

    Booleans answer ``read_boolean``; strings answer ``read_line``. Asking
    for a response of the other kind, or after the script is exhausted, is
    an error.
    """

    def __init__(self, responses: Iterable[Union[bool, str]] = ()):
        self.responses: List[Union[bool, str]] = list(responses)
        self.transcript: List[str] = []

    def print_text(self, text: str) -> None:
        self.transcript.append(text)

    def read_boolean(self) -> bool:
        response = self._next()
        if not isinstance(response, bool):
            raise TypeError(f"expected a yes/no response, got {response!r}")
        return response

    def read_line(self) -> str:
        response = self._next()
        if not isinstance(response, str):
            raise TypeError(f"expected a text response, got {response!r}")
        return response

    @property
    def remaining(self) -> int:
        return len(self.responses)

    def _next(self) -> Union[bool, str]:
        if not self.responses:
            raise EOFError("scripted responses exhausted")
        return self.responses.pop(0)


__all__ = [
    "ConsoleUserInterface",
    "ScriptedUserInterface",
    "UserInterface",
]
