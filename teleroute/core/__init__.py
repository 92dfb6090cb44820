"""
Core module: update model, predicate algebra and the dispatch engine.

Nothing here depends on a transport, configuration files or logging
backends.
"""

from .interfaces.lifecycle import IComponent
from .interfaces.dispatching import IBotHandler, IUpdateSource
from .domain.updates import Update, UpdateKind
from .domain.commands import ParsedCommand, parse_command
from .services.bot_handler import BotHandler, HandlerState
from .exceptions import HandlerStateError, TelerouteError, UpdateSourceClosed

__all__ = [
    "IComponent",
    "IBotHandler",
    "IUpdateSource",
    "Update",
    "UpdateKind",
    "ParsedCommand",
    "parse_command",
    "BotHandler",
    "HandlerState",
    "TelerouteError",
    "HandlerStateError",
    "UpdateSourceClosed",
]
