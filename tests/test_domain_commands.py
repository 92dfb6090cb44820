"""
Tests for the command parser.
"""

import pytest

from teleroute.core.domain.commands import COMMAND_PATTERN, ParsedCommand, parse_command


class TestParseCommand:
    """Test cases for parse_command."""

    def test_bare_command(self):
        """Test a command without arguments."""
        command = parse_command("/start")

        assert command == ParsedCommand(name="start", args_raw="", argv=[""])
        assert command.argc == 1

    def test_command_with_arguments(self):
        """Test that the tail after the first space is kept raw."""
        command = parse_command("/how does this")

        assert command is not None
        assert command.name == "how"
        assert command.args_raw == "does this"
        assert command.argv == ["does", "this"]

    def test_name_case_is_preserved(self):
        """Test that the parser does not normalize the name."""
        command = parse_command("/START")

        assert command is not None
        assert command.name == "START"
        assert command.name_equals("start")

    def test_consecutive_spaces_produce_empty_tokens(self):
        """Test the literal single-space split of the tail."""
        command = parse_command("/how  works")

        assert command is not None
        assert command.args_raw == " works"
        assert command.argv == ["", "works"]

    def test_trailing_space(self):
        """Test that a single trailing space leaves an empty tail."""
        command = parse_command("/start ")

        assert command is not None
        assert command.args_raw == ""

    @pytest.mark.parametrize("text", [
        "start",
        "/",
        "/ start",
        "",
        " /start",
        "/start\n",
        "/start\nmore",
        "/привет",
    ])
    def test_non_commands(self, text):
        """Test texts that are not command lines."""
        assert parse_command(text) is None

    def test_none_text(self):
        """Test that missing text is not a command."""
        assert parse_command(None) is None  # type: ignore[arg-type]

    def test_name_stops_at_non_word_character(self):
        """Test that punctuation after the name starts the tail."""
        command = parse_command("/start@my_bot")

        assert command is not None
        assert command.name == "start"
        assert command.args_raw == "@my_bot"

    def test_name_takes_all_word_characters(self):
        """Test that the name is never a prefix of a longer word."""
        command = parse_command("/starter")

        assert command is not None
        assert command.name == "starter"
        assert command.args_raw == ""

    def test_pattern_groups(self):
        """Test the capture groups of the shared pattern."""
        match = COMMAND_PATTERN.match("/help extra args")

        assert match is not None
        assert match.groups() == ("help", "extra args")
