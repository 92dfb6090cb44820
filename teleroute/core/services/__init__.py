"""
Core service implementations.
"""

from .bot_handler import BotHandler, ErrorHandler, HandlerEntry, HandlerState

__all__ = [
    "BotHandler",
    "ErrorHandler",
    "HandlerEntry",
    "HandlerState",
]
