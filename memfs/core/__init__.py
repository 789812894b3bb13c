"""
memfs Core Module

Shared infrastructure:
- Configuration Loader
"""

from .config_loader import (
    ConfigLoader,
    Config,
    FilesystemConfig,
    LoggingConfig,
    ShellConfig,
    get_config,
)

__all__ = [
    'ConfigLoader',
    'Config',
    'FilesystemConfig',
    'LoggingConfig',
    'ShellConfig',
    'get_config',
]
