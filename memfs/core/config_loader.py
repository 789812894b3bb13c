"""
memfs Configuration Loader

Configuration management for the in-memory file system:
- JSON configuration file loading
- Configuration validation
- Default value handling
- Runtime configuration updates

Author: YSNRFD
Version: 1.0.0
"""

import json
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from memfs.exceptions import ConfigLoadError, ConfigValidationError
from memfs.logger import LogLevel, get_logger


@dataclass
class FilesystemConfig:
    """File tree limits."""
    max_file_size: int = 2000000  # bytes stored per file
    max_read_size: int = 2000  # characters returned by a read
    truncation_marker: str = " ...[truncated contents after {limit} chars]"


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: str = ""
    console_output: bool = True
    use_colors: bool = True


@dataclass
class ShellConfig:
    """Shell configuration settings."""
    prompt: str = "Enter command (or 'exit' to quit): "
    history_size: int = 1000


@dataclass
class Config:
    """
    Main configuration container.

    Holds every configuration section used by memfs.
    """
    filesystem: FilesystemConfig = field(default_factory=FilesystemConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    shell: ShellConfig = field(default_factory=ShellConfig)


# Expected type of every loadable setting
FIELD_TYPES: dict[str, type] = {
    'filesystem.max_file_size': int,
    'filesystem.max_read_size': int,
    'filesystem.truncation_marker': str,
    'logging.level': str,
    'logging.log_file': str,
    'logging.console_output': bool,
    'logging.use_colors': bool,
    'shell.prompt': str,
    'shell.history_size': int,
}


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files, validating
    settings, and providing runtime configuration access.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('memfs.json')
        >>> config.filesystem.max_file_size
        2000000
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
                cls._instance._logger = get_logger('config')
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigLoadError: If the file cannot be read or parsed
            ConfigValidationError: If a section or value has the wrong
                type, or a value is out of range
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigLoadError(
                f"Configuration file not found: {config_path}",
                path=config_path
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(
                f"Invalid JSON in configuration file: {e}",
                path=config_path
            ) from e
        except OSError as e:
            raise ConfigLoadError(
                f"Cannot read configuration file: {e}",
                path=config_path
            ) from e

        if not isinstance(data, dict):
            raise ConfigLoadError(
                "Configuration root must be a JSON object",
                path=config_path
            )

        config = self._parse_config(data)
        self._validate(config)

        self._config = config
        self._loaded = True
        self._logger.info("Configuration loaded", context={'path': config_path})
        return self._config

    @staticmethod
    def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
        """Return a section of the raw data, which must be a JSON object."""
        section = data.get(name, {})
        if not isinstance(section, dict):
            raise ConfigValidationError(
                f"{name} must be a JSON object, got {type(section).__name__}",
                key=name
            )
        return section

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        fs_data = self._section(data, 'filesystem')
        config.filesystem = FilesystemConfig(
            max_file_size=fs_data.get('max_file_size', config.filesystem.max_file_size),
            max_read_size=fs_data.get('max_read_size', config.filesystem.max_read_size),
            truncation_marker=fs_data.get('truncation_marker', config.filesystem.truncation_marker),
        )

        log_data = self._section(data, 'logging')
        config.logging = LoggingConfig(
            level=log_data.get('level', config.logging.level),
            log_file=log_data.get('log_file', config.logging.log_file),
            console_output=log_data.get('console_output', config.logging.console_output),
            use_colors=log_data.get('use_colors', config.logging.use_colors),
        )

        shell_data = self._section(data, 'shell')
        config.shell = ShellConfig(
            prompt=shell_data.get('prompt', config.shell.prompt),
            history_size=shell_data.get('history_size', config.shell.history_size),
        )

        return config

    @staticmethod
    def _validate(config: Config) -> None:
        """Reject values of the wrong type or that the file system cannot work with."""
        for key, expected in FIELD_TYPES.items():
            section, name = key.split('.')
            value = getattr(getattr(config, section), name)
            # bool is a subclass of int
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise ConfigValidationError(
                    f"{key} must be of type {expected.__name__}, got {value!r}",
                    key=key
                )

        for key in ('max_file_size', 'max_read_size'):
            value = getattr(config.filesystem, key)
            if value <= 0:
                raise ConfigValidationError(
                    f"filesystem.{key} must be a positive integer, got {value!r}",
                    key=f"filesystem.{key}"
                )

        if config.shell.history_size < 0:
            raise ConfigValidationError(
                "shell.history_size must not be negative",
                key="shell.history_size"
            )

        try:
            config.filesystem.truncation_marker.format(limit=0)
        except (KeyError, IndexError, ValueError) as e:
            raise ConfigValidationError(
                f"filesystem.truncation_marker is not a valid template: {e}",
                key="filesystem.truncation_marker"
            ) from e

        try:
            LogLevel.from_name(config.logging.level)
        except ValueError as e:
            raise ConfigValidationError(str(e), key="logging.level") from e

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'filesystem.max_file_size')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Args:
            key: Dot-notation key (e.g., 'filesystem.max_read_size')
            value: Value to set

        Note:
            File systems created earlier keep the section object they
            were given, so updates are visible to them too.
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        final_key = parts[-1]
        if not hasattr(obj, '__dataclass_fields__') or final_key not in obj.__dataclass_fields__:
            raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        setattr(obj, final_key, value)

    def reload(self, config_path: str) -> Config:
        """Reload configuration from file."""
        return self.load(config_path)

    def reset(self) -> None:
        """Drop any loaded configuration and return to defaults."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config
