"""
Update sources feeding the dispatch loop.
"""

from .memory import QueueUpdateSource
from .iterable import IterableUpdateSource
from .jsonl import JsonLinesUpdateSource

__all__ = [
    "QueueUpdateSource",
    "IterableUpdateSource",
    "JsonLinesUpdateSource",
]
