"""
Configuration loading and saving utilities.

Settings are layered: dataclass defaults, then an optional YAML or JSON
file, then ``TELEROUTE_*`` environment variables. The merged mapping is
validated by building an ``ApplicationConfig`` from it.
"""

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

import yaml

from .models import ApplicationConfig


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ('true', '1', 'yes', 'on', 'enabled')


ENV_OVERRIDES: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    "DEBUG": ("debug", _parse_bool),
    "ENVIRONMENT": ("environment", str),
    "MAX_WORKERS": ("dispatcher.max_workers", int),
    "SOURCE_ERROR_DELAY": ("dispatcher.source_error_delay", float),
    "STOP_TIMEOUT": ("dispatcher.stop_timeout", float),
    "QUEUE_SIZE": ("dispatcher.queue_size", int),
    "LOG_LEVEL": ("logging.level", str),
    "LOG_DIR": ("logging.log_directory", str),
}
"""Environment variable suffix -> (dotted config path, converter)."""


def _read_yaml(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}") from e


def _read_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e


_READERS: Dict[str, Callable[[str], Any]] = {
    '.yaml': _read_yaml,
    '.yml': _read_yaml,
    '.json': _read_json,
}


class ConfigLoader:
    """Builds an ``ApplicationConfig`` from files and the environment."""

    def __init__(self, env_prefix: str = "TELEROUTE_") -> None:
        self._env_prefix = env_prefix

    def load_config(self, config_file: Optional[str] = None) -> ApplicationConfig:
        """
        Load configuration from file and environment variables.

        Args:
            config_file: Path to a ``.yaml``, ``.yml`` or ``.json`` file

        Returns:
            Validated configuration

        Raises:
            FileNotFoundError: If ``config_file`` does not exist
            ValueError: If the file or an environment value is invalid
        """
        data = self._load_from_file(config_file) if config_file else {}
        data = self._merge_configs(data, self._load_from_environment())

        config = ApplicationConfig.from_dict(data)
        config.config_file_path = config_file
        return config

    def save_config(self, config: ApplicationConfig, file_path: str, format: str = "yaml") -> None:
        """
        Write ``config`` to ``file_path`` as YAML or JSON.

        The source file path is runtime state and is not written.
        """
        data = config.to_dict()
        data.pop('config_file_path', None)

        fmt = format.lower()
        if fmt == "yaml":
            text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
        elif fmt == "json":
            text = json.dumps(data, indent=2)
        else:
            raise ValueError(f"Unsupported format: {format}")

        Path(file_path).write_text(text, encoding='utf-8')

    def _load_from_file(self, file_path: str) -> Dict[str, Any]:
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        reader = _READERS.get(path.suffix.lower())
        if reader is None:
            raise ValueError(f"Unsupported configuration file format: {path.suffix}")

        try:
            data = reader(path.read_text(encoding='utf-8'))
        except ValueError as e:
            raise ValueError(f"{e} ({path})") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration in {path} must be a mapping, got {type(data).__name__}")
        return data

    def _load_from_environment(self) -> Dict[str, Any]:
        overrides: Dict[str, Any] = {}

        for suffix, (config_path, converter) in ENV_OVERRIDES.items():
            env_var = self._env_prefix + suffix
            raw = os.environ.get(env_var)
            if raw is None:
                continue
            try:
                value = converter(raw)
            except (ValueError, TypeError) as e:
                raise ValueError(f"Invalid value for {env_var}: {raw} ({e})") from e
            self._set_nested_value(overrides, config_path, value)

        return overrides

    @staticmethod
    def _set_nested_value(config: Dict[str, Any], path: str, value: Any) -> None:
        """Set ``value`` at a dotted ``path``, creating sections as needed."""
        *sections, key = path.split('.')
        target = config
        for section in sections:
            target = target.setdefault(section, {})
        target[key] = value

    @classmethod
    def _merge_configs(cls, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep-merge ``override`` into a copy of ``base``."""
        merged = dict(base)
        for key, value in override.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                merged[key] = cls._merge_configs(current, value)
            else:
                merged[key] = value
        return merged
