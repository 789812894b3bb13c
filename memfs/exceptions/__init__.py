"""
memfs Exception Hierarchy

All memfs exceptions inherit from MemFSError, with one branch for the
file tree and one for configuration.

Architecture:
    MemFSError (Base)
    ├── FileSystemException
    │   ├── DirectoryNotFoundError
    │   ├── FileNotFoundError
    │   ├── InvalidNameError
    │   │   └── EmptyNameError
    │   ├── NonEmptyDirectoryError
    │   ├── RecursiveRemoveOfFileError
    │   ├── NotADirectoryError
    │   ├── NotAFileError
    │   ├── CannotMoveDirectoryError
    │   ├── FileExistsError
    │   ├── LinkAlreadyExistsError
    │   ├── FileTooLargeError
    │   └── InvalidContentError
    └── ConfigException
        ├── ConfigLoadError
        └── ConfigValidationError
"""

from .fs_exceptions import (
    MemFSError,
    FileSystemException,
    DirectoryNotFoundError,
    FileNotFoundError,
    InvalidNameError,
    EmptyNameError,
    NonEmptyDirectoryError,
    RecursiveRemoveOfFileError,
    NotADirectoryError,
    NotAFileError,
    CannotMoveDirectoryError,
    FileExistsError,
    LinkAlreadyExistsError,
    FileTooLargeError,
    InvalidContentError,
)

from .config_exceptions import (
    ConfigException,
    ConfigLoadError,
    ConfigValidationError,
)

__all__ = [
    "MemFSError",
    # Filesystem exceptions
    "FileSystemException",
    "DirectoryNotFoundError",
    "FileNotFoundError",
    "InvalidNameError",
    "EmptyNameError",
    "NonEmptyDirectoryError",
    "RecursiveRemoveOfFileError",
    "NotADirectoryError",
    "NotAFileError",
    "CannotMoveDirectoryError",
    "FileExistsError",
    "LinkAlreadyExistsError",
    "FileTooLargeError",
    "InvalidContentError",
    # Config exceptions
    "ConfigException",
    "ConfigLoadError",
    "ConfigValidationError",
]
