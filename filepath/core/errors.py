"""
Error types for the filepath package.

There are two classes of failure:

- Programmer errors (asking for the children of a file, writing to a
  directory, unwrapping a Failure...). These raise subclasses of
  PreconditionError immediately. PreconditionError is also an AssertionError,
  since it signals a bug in the caller rather than a runtime condition.
- Environmental failures reported by the OS (permission denied, not found,
  disk full...). These never raise out of a Path operation; they are carried
  as a FileError inside a Failure result.
"""

from __future__ import annotations

import errno as errno_codes
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FilePathError(Exception):
    """Base class for every exception raised by the filepath package."""


# ---------------------------------------------------------------------------
# Programmer errors (precondition violations)
# ---------------------------------------------------------------------------

class PreconditionError(FilePathError, AssertionError):
    """Raised when a caller violates a documented precondition.

    These are not recoverable and are never reported through Result.
    """


class PathNotFoundError(PreconditionError):
    """Raised when an operation requires an existing entry and there is none.

    Example: listing the children of a directory that was never created.
    """


class PathNotDirectoryError(PreconditionError):
    """Raised when an operation requires a directory but the entry is not one.

    Example: iterating over the descendants of a regular file.
    """


class PathIsDirectoryError(PreconditionError):
    """Raised when a file operation is attempted on a directory.

    Example: calling touch() or write_string() on a directory path.
    """


class ResultUnwrapError(PreconditionError):
    """Raised when unwrap() is called on a Failure."""


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class ConfigError(FilePathError):
    """Raised when a configuration value from the environment is invalid.

    Example: FILEPATH_LOG_LEVEL=LOUD.
    """


# ---------------------------------------------------------------------------
# Environmental failures (Result payload)
# ---------------------------------------------------------------------------

class ErrorKind(Enum):
    """OS-reported cause of a failed filesystem operation."""

    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    ALREADY_EXISTS = "already_exists"
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"
    DIRECTORY_NOT_EMPTY = "directory_not_empty"
    CROSS_DEVICE = "cross_device"
    NO_SPACE = "no_space"
    READ_ONLY = "read_only"
    OTHER = "other"


_ERRNO_KINDS = {
    errno_codes.ENOENT: ErrorKind.NOT_FOUND,
    errno_codes.EACCES: ErrorKind.PERMISSION_DENIED,
    errno_codes.EPERM: ErrorKind.PERMISSION_DENIED,
    errno_codes.EEXIST: ErrorKind.ALREADY_EXISTS,
    errno_codes.ENOTDIR: ErrorKind.NOT_A_DIRECTORY,
    errno_codes.EISDIR: ErrorKind.IS_A_DIRECTORY,
    errno_codes.ENOTEMPTY: ErrorKind.DIRECTORY_NOT_EMPTY,
    errno_codes.EXDEV: ErrorKind.CROSS_DEVICE,
    errno_codes.ENOSPC: ErrorKind.NO_SPACE,
    errno_codes.EROFS: ErrorKind.READ_ONLY,
}

# EDQUOT is missing on Windows.
if hasattr(errno_codes, "EDQUOT"):
    _ERRNO_KINDS[errno_codes.EDQUOT] = ErrorKind.NO_SPACE


def error_kind_for(errno: Optional[int]) -> ErrorKind:
    """Map an errno value to its ErrorKind (OTHER when unknown or None)."""
    if errno is None:
        return ErrorKind.OTHER
    return _ERRNO_KINDS.get(errno, ErrorKind.OTHER)


@dataclass(frozen=True)
class FileError:
    """
    Failure payload returned by mutating Path operations.

    - kind        : classified cause (ErrorKind)
    - path        : raw path string the operation was acting on
    - message     : human-readable description from the OS
    - errno       : errno value reported by the OS, if any
    - destination : target of a copy or move, if any
    """

    kind: ErrorKind
    path: str
    message: str
    errno: Optional[int] = None
    destination: Optional[str] = None

    @classmethod
    def from_os_error(
        cls, exc: Exception, path: str, destination: Optional[str] = None
    ) -> FileError:
        """Build a FileError from the exception raised while acting on ``path``.

        Besides OSError this accepts the ValueError the OS layer raises for
        unusable strings (e.g. an embedded NUL byte), classified as OTHER.
        """
        # shutil.copytree reports nested failures as shutil.Error without errno.
        code = getattr(exc, "errno", None)
        message = getattr(exc, "strerror", None) or str(exc) or exc.__class__.__name__
        return cls(
            kind=error_kind_for(code),
            path=path,
            message=message,
            errno=code,
            destination=destination,
        )

    @classmethod
    def already_exists(cls, path: str) -> FileError:
        """Destination collision detected before the OS was asked to act."""
        return cls(
            kind=ErrorKind.ALREADY_EXISTS,
            path=path,
            message="Destination already exists",
            errno=errno_codes.EEXIST,
        )

    def __str__(self) -> str:
        if self.destination is not None:
            return f"{self.kind.value}: {self.message} ({self.path} -> {self.destination})"
        return f"{self.kind.value}: {self.message} ({self.path})"
