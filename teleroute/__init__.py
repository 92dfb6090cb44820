"""
Teleroute - predicate-based update dispatching for bots.

Handlers are registered together with predicates over incoming updates;
the bot handler runs the first handler whose predicates all hold.

    bh = BotHandler(bot, QueueUpdateSource())
    bh.handle(on_help, command_equal("help"))
    bh.handle(on_other, Union(Not(any_message()), text_equal("Hmm?")))
    await bh.start()
"""

__version__ = "0.1.0"

# Public API exports
from .core.domain.updates import (
    CallbackQuery, Chat, ChatJoinRequest, ChatMemberUpdated, ChosenInlineResult,
    InlineQuery, Message, Poll, PollAnswer, PreCheckoutQuery, ShippingQuery,
    Update, UpdateKind, User,
)
from .core.domain.commands import COMMAND_PATTERN, ParsedCommand, parse_command
from .core.exceptions import HandlerStateError, TelerouteError, UpdateSourceClosed
from .core.interfaces.dispatching import Handler, IBotHandler, IUpdateSource
from .core.predicates import *  # noqa: F401,F403
from .core.predicates import __all__ as _predicates_all
from .core.services.bot_handler import BotHandler, ErrorHandler, HandlerEntry, HandlerState
from .infrastructure.sources import IterableUpdateSource, JsonLinesUpdateSource, QueueUpdateSource

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
    "TelerouteError",
    "HandlerStateError",
    "UpdateSourceClosed",
    "Handler",
    "IBotHandler",
    "IUpdateSource",
    "BotHandler",
    "ErrorHandler",
    "HandlerEntry",
    "HandlerState",
    "QueueUpdateSource",
    "IterableUpdateSource",
    "JsonLinesUpdateSource",
] + list(_predicates_all)
