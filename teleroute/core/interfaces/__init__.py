"""
Core interfaces defining the contracts between the dispatch engine and its
collaborators.
"""

from .lifecycle import IComponent
from .dispatching import Handler, IBotHandler, IUpdateSource

__all__ = [
    "IComponent",
    "Handler",
    "IBotHandler",
    "IUpdateSource",
]
