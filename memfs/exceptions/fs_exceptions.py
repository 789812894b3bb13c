"""
Filesystem Exceptions

Exceptions raised by the in-memory file tree: path resolution,
creation, removal, file I/O and links.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class MemFSError(Exception):
    """
    Root of every exception raised by memfs.

    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 0
        self.context = context or {}

    def __str__(self) -> str:
        return f"[Error {self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code})"
        )


class FileSystemException(MemFSError):
    """
    Base exception for all filesystem-related errors.

    Attributes:
        message: Human-readable error description
        path: Path or name associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code=error_code or 4000, context=context)
        self.path = path
        if path:
            self.context["path"] = path

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.path:
            base = f"{base} (path={self.path})"
        return base


class DirectoryNotFoundError(FileSystemException):
    """
    A path segment does not name an existing directory.

    Raised by path resolution with the offending segment, and by
    removal when the named entry does not exist.

    Example:
        >>> raise DirectoryNotFoundError("dir1")
    """

    def __init__(
        self,
        name: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Directory not found: {name}",
            path=name,
            error_code=4001,
            context=context
        )
        self.name = name


class FileNotFoundError(FileSystemException):
    """
    The named file does not exist in the current directory.

    Example:
        >>> raise FileNotFoundError("test.txt")
    """

    def __init__(
        self,
        name: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"File {name} does not exist",
            path=name,
            error_code=4002,
            context=context
        )
        self.name = name


class InvalidNameError(FileSystemException):
    """
    A name cannot be used for a new file or directory.

    Example:
        >>> raise InvalidNameError("a/b", reason="/ character not supported in filenames")
    """

    def __init__(
        self,
        name: str,
        reason: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=reason or f"Invalid name: {name}",
            path=name,
            error_code=error_code or 4003,
            context=ctx
        )
        self.name = name
        self.reason = reason


class EmptyNameError(InvalidNameError):
    """No usable name was given (empty or whitespace-only path)."""

    def __init__(
        self,
        name: str = "",
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            name,
            reason="Must provide at least one directory name",
            error_code=4004,
            context=context
        )


class NonEmptyDirectoryError(FileSystemException):
    """
    Non-recursive removal of a directory that still has children.

    Example:
        >>> raise NonEmptyDirectoryError("dir1")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message="Method does not support removing non-empty directories. "
                    "Use the recursive option",
            path=path,
            error_code=4005,
            context=context
        )


class RecursiveRemoveOfFileError(FileSystemException):
    """Recursive removal was requested for a regular file."""

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message="Method does not support removing files recursively",
            path=path,
            error_code=4006,
            context=context
        )


class NotADirectoryError(FileSystemException):
    """
    Path is not a directory.

    Example:
        >>> raise NotADirectoryError("notes.txt")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Not a directory: {path}",
            path=path,
            error_code=4007,
            context=context
        )


class NotAFileError(FileSystemException):
    """
    Path is not a regular file.

    Raised when a file-only operation (such as a hard link) is
    attempted on a directory.
    """

    def __init__(
        self,
        path: str,
        actual_type: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if actual_type:
            ctx["actual_type"] = actual_type
        super().__init__(
            message=f"Not a file: {path}",
            path=path,
            error_code=4008,
            context=ctx
        )
        self.actual_type = actual_type


class CannotMoveDirectoryError(FileSystemException):
    """Only regular files can be moved."""

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"File {path} is a directory; cannot move",
            path=path,
            error_code=4009,
            context=context
        )


class FileExistsError(FileSystemException):
    """
    The name is already taken by an entry of the other kind.

    Example:
        >>> raise FileExistsError("docs")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"File already exists: {path}",
            path=path,
            error_code=4010,
            context=context
        )


class LinkAlreadyExistsError(FileSystemException):
    """The target already carries a link with this name."""

    def __init__(
        self,
        name: str,
        target: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if target:
            ctx["target"] = target
        super().__init__(
            message=f"Link with name {name} already exists",
            path=name,
            error_code=4011,
            context=ctx
        )
        self.target = target


class FileTooLargeError(FileSystemException):
    """
    A write would push the file past its maximum size.

    Example:
        >>> raise FileTooLargeError("big.bin", size=2000001, limit=2000000)
    """

    def __init__(
        self,
        path: str,
        size: int,
        limit: int,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["size"] = size
        ctx["limit"] = limit
        super().__init__(
            message=f"Exceeded max file size: size={size}, max={limit}",
            path=path,
            error_code=4012,
            context=ctx
        )
        self.size = size
        self.limit = limit


class InvalidContentError(FileSystemException):
    """Text to be written cannot be encoded for storage."""

    def __init__(
        self,
        path: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=f"Cannot encode contents for {path}",
            path=path,
            error_code=4013,
            context=ctx
        )
        self.reason = reason
