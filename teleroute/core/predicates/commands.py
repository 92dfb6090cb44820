"""
Command predicates built on the command parser.

All of them read the message slot only. Text that is not a command line
(no leading slash, no name, embedded newline) is a non-match.
"""

from typing import Optional, Tuple

from ..domain.commands import ParsedCommand, parse_command
from ..domain.updates import Update
from .base import Predicate


def message_command(update: Update) -> Optional[ParsedCommand]:
    """Parse the command of an update's message, if any."""
    message = update.message
    return parse_command(message.text) if message is not None else None


class CommandPredicate(Predicate):
    """Base class for predicates over the parsed command of a message."""

    def __call__(self, update: Update) -> bool:
        command = message_command(update)
        return command is not None and self.check(command)

    def check(self, command: ParsedCommand) -> bool:
        return True


class AnyCommand(CommandPredicate):
    """Message text is any command line."""

    def __repr__(self) -> str:
        return "AnyCommand()"


class CommandEqual(CommandPredicate):
    """Command name equals ``name`` ignoring case; any arguments."""

    def __init__(self, name: str) -> None:
        self.name = name

    def check(self, command: ParsedCommand) -> bool:
        return command.name_equals(self.name)

    def __repr__(self) -> str:
        return f"CommandEqual({self.name!r})"


class CommandEqualArgc(CommandEqual):
    """
    Command name matches and the tail has exactly ``argc`` tokens.

    Tokens come from splitting the tail on single spaces, so empty tokens
    count. ``argc == 0`` matches an empty tail.
    """

    def __init__(self, name: str, argc: int) -> None:
        super().__init__(name)
        self.argc = argc

    def check(self, command: ParsedCommand) -> bool:
        if not command.name_equals(self.name):
            return False
        return (self.argc == 0 and command.args_raw == "") or command.argc == self.argc

    def __repr__(self) -> str:
        return f"CommandEqualArgc({self.name!r}, {self.argc})"


class CommandEqualArgv(CommandEqual):
    """
    Command name matches and the tail is exactly ``argv`` joined by spaces.

    The comparison is on the raw string, so extra spaces in the message
    make it fail.
    """

    def __init__(self, name: str, *argv: str) -> None:
        super().__init__(name)
        self.argv: Tuple[str, ...] = argv

    def check(self, command: ParsedCommand) -> bool:
        if not command.name_equals(self.name):
            return False
        if not self.argv and command.args_raw == "":
            return True
        return command.args_raw == " ".join(self.argv)

    def __repr__(self) -> str:
        return f"CommandEqualArgv({', '.join(map(repr, (self.name,) + self.argv))})"


def any_command() -> Predicate:
    return AnyCommand()


def command_equal(name: str) -> Predicate:
    return CommandEqual(name)


def command_equal_argc(name: str, argc: int) -> Predicate:
    return CommandEqualArgc(name, argc)


def command_equal_argv(name: str, *argv: str) -> Predicate:
    return CommandEqualArgv(name, *argv)
