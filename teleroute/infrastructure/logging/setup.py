"""
Logging backends for applications embedding the dispatcher.

Library modules log through ``logging.getLogger(__name__)``. An
application calls ``setup_logging`` once; with loguru installed the
standard library records are intercepted and written by loguru sinks,
otherwise plain ``logging`` handlers are installed.
"""

import logging
import sys
from pathlib import Path
from typing import Any

from ..config.models import LoggingConfig

loguru_logger: Any = None
try:
    from loguru import logger as loguru_logger
    LOGURU_AVAILABLE = True
except ImportError:
    LOGURU_AVAILABLE = False


LOG_FILE_NAME = "teleroute.log"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} - {message}"


def setup_logging(config: LoggingConfig) -> None:
    """
    Install log sinks for the whole process.

    Args:
        config: Logging section of the application configuration
    """
    if LOGURU_AVAILABLE:
        _setup_loguru_logging(config)
    else:
        _setup_standard_logging(config)


def _log_file(config: LoggingConfig) -> Path:
    directory = Path(config.log_directory)
    directory.mkdir(parents=True, exist_ok=True)
    return directory / LOG_FILE_NAME


class InterceptHandler(logging.Handler):
    """Forwards standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: Any = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Report the original call site, not the logging module
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        loguru_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _setup_loguru_logging(config: LoggingConfig) -> None:
    level = config.level.upper()
    loguru_logger.remove()

    if config.console_enabled:
        loguru_logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level,
                          colorize=True, backtrace=True, diagnose=False)

    if config.file_enabled:
        loguru_logger.add(_log_file(config), format=FILE_FORMAT, level=level,
                          rotation=config.max_file_size, retention=config.backup_count,
                          compression="zip", backtrace=True, diagnose=False)

    # Every logger in the process now ends up in the loguru sinks
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def _setup_standard_logging(config: LoggingConfig) -> None:
    level = getattr(logging, config.level.upper(), logging.INFO)
    formatter = logging.Formatter(config.format)

    handlers: list = []
    if config.console_enabled:
        handlers.append(logging.StreamHandler(sys.stderr))
    if config.file_enabled:
        handlers.append(logging.FileHandler(_log_file(config), encoding='utf-8'))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)
