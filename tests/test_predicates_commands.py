"""
Tests for the command predicates.
"""

import pytest

from teleroute.core.domain.updates import CallbackQuery, InlineQuery, Message, Update, UpdateKind
from teleroute.core.predicates import (
    any_command, command_equal, command_equal_argc, command_equal_argv, message_command,
)


def message(text: str) -> Update:
    return Update(UpdateKind.MESSAGE, Message(message_id=1, text=text))


class TestMessageCommand:
    """Test cases for extracting the command of an update."""

    def test_message_command(self):
        command = message_command(message("/help me"))

        assert command is not None
        assert command.name == "help"
        assert command.args_raw == "me"

    def test_other_slots_are_ignored(self):
        """Test that only the message slot is parsed."""
        edited = Update(UpdateKind.EDITED_MESSAGE, Message(message_id=1, text="/help"))
        post = Update(UpdateKind.CHANNEL_POST, Message(message_id=1, text="/help"))

        assert message_command(edited) is None
        assert message_command(post) is None


class TestAnyCommand:
    """Test cases for any_command."""

    @pytest.mark.parametrize("text", ["/start", "/how does this", "/a", "/x_1 y"])
    def test_commands(self, text):
        assert any_command()(message(text)) is True

    @pytest.mark.parametrize("text", ["start", "", "hello /start", "/start\nmore", "/"])
    def test_non_commands(self, text):
        assert any_command()(message(text)) is False

    def test_non_message_updates(self):
        assert any_command()(Update(UpdateKind.INLINE_QUERY, InlineQuery(id="q", query="/start"))) is False
        assert any_command()(Update(UpdateKind.CALLBACK_QUERY, CallbackQuery(id="c", data="/start"))) is False
        assert any_command()(Update(UpdateKind.UNKNOWN)) is False


class TestCommandEqual:
    """Test cases for command_equal."""

    @pytest.mark.parametrize("text", ["/start", "/START", "/Start", "/start with args"])
    def test_matches_case_insensitively(self, text):
        assert command_equal("start")(message(text)) is True

    @pytest.mark.parametrize("text", ["start", "/starter", "/sta", "/stop"])
    def test_rejects(self, text):
        assert command_equal("start")(message(text)) is False

    def test_name_argument_case_is_ignored(self):
        assert command_equal("HELP")(message("/help")) is True


class TestCommandEqualArgc:
    """Test cases for command_equal_argc."""

    def test_two_arguments(self):
        predicate = command_equal_argc("how", 2)

        assert predicate(message("/how does this")) is True
        assert predicate(message("/HOW does this")) is True
        assert predicate(message("/how")) is False
        assert predicate(message("/how does")) is False
        assert predicate(message("/how does this work")) is False

    def test_bare_command_counts_as_zero_and_one(self):
        """Test that an empty tail satisfies both argc 0 and argc 1."""
        assert command_equal_argc("start", 0)(message("/start")) is True
        assert command_equal_argc("start", 1)(message("/start")) is True
        assert command_equal_argc("start", 2)(message("/start")) is False

    def test_zero_requires_empty_tail(self):
        assert command_equal_argc("start", 0)(message("/start now")) is False

    def test_consecutive_spaces_add_tokens(self):
        """Test that tokens come from a literal single-space split."""
        assert command_equal_argc("how", 2)(message("/how  works")) is True
        assert command_equal_argc("how", 1)(message("/how  works")) is False

    def test_name_must_match(self):
        assert command_equal_argc("start", 0)(message("/stop")) is False


class TestCommandEqualArgv:
    """Test cases for command_equal_argv."""

    def test_exact_arguments(self):
        predicate = command_equal_argv("how", "works")

        assert predicate(message("/how works")) is True
        assert predicate(message("/How works")) is True

    @pytest.mark.parametrize("text", ["/how  works", "/how Works", "/how works ", "/how", "/how works fine"])
    def test_rejects_other_tails(self, text):
        """Test that the tail is compared as a raw string."""
        assert command_equal_argv("how", "works")(message(text)) is False

    def test_multiple_arguments(self):
        assert command_equal_argv("set", "a", "b")(message("/set a b")) is True

    def test_no_arguments(self):
        predicate = command_equal_argv("start")

        assert predicate(message("/start")) is True
        assert predicate(message("/start x")) is False

    def test_non_message_update(self):
        update = Update(UpdateKind.INLINE_QUERY, InlineQuery(id="q", query="/how works"))

        assert command_equal_argv("how", "works")(update) is False
