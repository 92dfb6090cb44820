"""
Configuration management.
"""

from .models import ApplicationConfig, DispatcherConfig, LoggingConfig
from .loader import ConfigLoader

__all__ = [
    "ApplicationConfig",
    "DispatcherConfig",
    "LoggingConfig",
    "ConfigLoader",
]
