"""
Logging infrastructure for applications embedding the dispatcher.
"""

from .setup import InterceptHandler, setup_logging

__all__ = [
    "setup_logging",
    "InterceptHandler",
]
