"""
Configuration models and data structures.

This module defines the configuration models for the dispatch engine and
its ambient services, with validation of the values they accept.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class DispatcherConfig:
    """Dispatch engine configuration."""
    max_workers: int = 0
    """Concurrent handler invocations; 0 runs each handler inline."""

    source_error_delay: float = 1.0
    """Seconds to wait before fetching again after an update source error."""

    stop_timeout: float = 10.0
    """Seconds ``stop()`` waits for in-flight handlers before cancelling them."""

    queue_size: int = 0
    """Capacity of in-memory update queues; 0 means unbounded."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_workers < 0:
            raise ValueError(f"max_workers cannot be negative, got {self.max_workers}")
        if self.source_error_delay < 0:
            raise ValueError(
                f"source_error_delay cannot be negative, got {self.source_error_delay}")
        if self.stop_timeout <= 0:
            raise ValueError(f"stop_timeout must be positive, got {self.stop_timeout}")
        if self.queue_size < 0:
            raise ValueError(f"queue_size cannot be negative, got {self.queue_size}")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_directory: str = "logs"
    max_file_size: str = "10 MB"
    backup_count: int = 5
    console_enabled: bool = True
    file_enabled: bool = False


@dataclass
class ApplicationConfig:
    """Main application configuration."""

    name: str = "Teleroute"
    version: str = "0.1.0"
    debug: bool = False
    environment: str = "production"

    dispatcher: DispatcherConfig = field(default_factory=DispatcherConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    config_file_path: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.logging.level.upper() not in ("TRACE", "DEBUG", "INFO", "SUCCESS",
                                              "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {self.logging.level}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ApplicationConfig':
        """Create configuration from dictionary."""
        return cls(
            name=data.get('name', 'Teleroute'),
            version=str(data.get('version', '0.1.0')),
            debug=data.get('debug', False),
            environment=data.get('environment', 'production'),
            dispatcher=DispatcherConfig(**data.get('dispatcher', {})),
            logging=LoggingConfig(**data.get('logging', {})),
            config_file_path=data.get('config_file_path')
        )
