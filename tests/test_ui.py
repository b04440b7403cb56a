"""
Tests for the interactive I/O providers.
"""

import io

import pytest
from rich.console import Console

from twentyq.io.ui import ConsoleUserInterface, ScriptedUserInterface, UserInterface


def _console_ui(monkeypatch, lines):
    replies = iter(lines)

    def fake_input(*args):
        try:
            return next(replies)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)
    output = io.StringIO()
    return ConsoleUserInterface(Console(file=output, width=120)), output


class TestConsoleUserInterface:
    """Tests for the rich console provider."""

    @pytest.mark.parametrize("reply, expected", [("y", True), ("Yes", True), ("  YES ", True), ("n", False), ("No", False)])
    def test_read_boolean(self, monkeypatch, reply, expected):
        ui, _ = _console_ui(monkeypatch, [reply])

        assert ui.read_boolean() is expected

    def test_read_boolean_reprompts(self, monkeypatch):
        ui, output = _console_ui(monkeypatch, ["", "perhaps", "no"])

        assert ui.read_boolean() is False
        assert output.getvalue().count(ConsoleUserInterface.RETRY_MESSAGE) == 2

    def test_read_line_trims(self, monkeypatch):
        ui, _ = _console_ui(monkeypatch, ["  a rubber duck \n"])

        assert ui.read_line() == "a rubber duck"

    def test_print_text_is_not_markup(self, monkeypatch):
        ui, output = _console_ui(monkeypatch, [])

        ui.print_text("Is it [red]red[/red]?")

        assert "Is it [red]red[/red]?" in output.getvalue()

    def test_end_of_input_propagates(self, monkeypatch):
        ui, _ = _console_ui(monkeypatch, [])

        with pytest.raises(EOFError):
            ui.read_line()


class TestScriptedUserInterface:
    """Tests for the scripted provider."""

    def test_replays_and_records(self):
        ui = ScriptedUserInterface([True, "dog"])

        ui.print_text("Hello")

        assert ui.read_boolean() is True
        assert ui.read_line() == "dog"
        assert ui.transcript == ["Hello"]
        assert ui.remaining == 0

    def test_exhausted(self):
        with pytest.raises(EOFError):
            ScriptedUserInterface().read_boolean()

    def test_wrong_kind(self):
        with pytest.raises(TypeError):
            ScriptedUserInterface(["dog"]).read_boolean()

        with pytest.raises(TypeError):
            ScriptedUserInterface([True]).read_line()


def test_providers_satisfy_protocol():
    assert isinstance(ScriptedUserInterface(), UserInterface)
    assert isinstance(ConsoleUserInterface(Console(file=io.StringIO())), UserInterface)


def test_print_text_is_not_highlighted():
    """Numbers and quotes in player text are not colored, even on a highlighting console."""
    output = io.StringIO()
    console = Console(file=output, force_terminal=True, color_system="truecolor", highlight=True)
    ui = ConsoleUserInterface(console)

    ui.print_text("Is it 42 'units' long?")

    assert "Is it 42 'units' long?" in output.getvalue()
    assert "\x1b[" not in output.getvalue()
