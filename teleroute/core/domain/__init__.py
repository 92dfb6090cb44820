"""
Domain models: updates, their payloads, and parsed commands.
"""

from .updates import (
    CallbackQuery, Chat, ChatJoinRequest, ChatMemberUpdated, ChosenInlineResult,
    InlineQuery, Message, Poll, PollAnswer, PreCheckoutQuery, ShippingQuery,
    Update, UpdateKind, User,
)
from .commands import COMMAND_PATTERN, ParsedCommand, parse_command

__all__ = [
    "Update",
    "UpdateKind",
    "User",
    "Chat",
    "Message",
    "InlineQuery",
    "ChosenInlineResult",
    "CallbackQuery",
    "ShippingQuery",
    "PreCheckoutQuery",
    "Poll",
    "PollAnswer",
    "ChatMemberUpdated",
    "ChatJoinRequest",
    "COMMAND_PATTERN",
    "ParsedCommand",
    "parse_command",
]
