"""
Configuration Exceptions

Errors raised while loading or changing the memfs configuration.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .fs_exceptions import MemFSError


class ConfigException(MemFSError):
    """
    Base exception for configuration errors.

    Attributes:
        message: Human-readable error description
        key: Configuration key or file involved (if applicable)
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        super().__init__(message, error_code=error_code or 5000, context=ctx)
        self.key = key


class ConfigLoadError(ConfigException):
    """
    The configuration file could not be read or parsed.

    Example:
        >>> raise ConfigLoadError("Configuration file not found: memfs.json")
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, key=path, error_code=5001, context=context)
        self.path = path


class ConfigValidationError(ConfigException):
    """A configuration value is missing, unknown or out of range."""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, key=key, error_code=5002, context=context)
