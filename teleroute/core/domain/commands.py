"""
Command parsing for slash-style message text.

A command line has the shape ``/<name>[ <args>]``. The name is one or more
ASCII word characters; everything after the single optional separator
space is the raw argument tail.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional


COMMAND_PATTERN = re.compile(r"^/(\w+) ?(.*)\Z", re.ASCII)
"""Matches a command line; group 1 is the name, group 2 the raw tail."""


@dataclass(frozen=True)
class ParsedCommand:
    """
    A command extracted from message text.

    ``argv`` is the tail split on single spaces, so consecutive spaces
    produce empty tokens and an empty tail yields ``[""]``.
    """

    name: str
    """Command name as written (case preserved)."""

    args_raw: str = ""
    """Raw argument tail, possibly empty."""

    argv: List[str] = field(default_factory=lambda: [""])
    """Tail split on single spaces."""

    @property
    def argc(self) -> int:
        """Number of space-separated tokens in the tail."""
        return len(self.argv)

    def name_equals(self, name: str) -> bool:
        """Check the command name against ``name`` ignoring case."""
        return self.name.casefold() == name.casefold()


def parse_command(text: str) -> Optional[ParsedCommand]:
    """
    Parse message text into a command.

    Args:
        text: Raw message text

    Returns:
        Parsed command, or None if the text is not a command line
    """
    match = COMMAND_PATTERN.match(text or "")
    if match is None:
        return None

    name, tail = match.group(1), match.group(2)
    return ParsedCommand(name=name, args_raw=tail, argv=tail.split(" "))
