"""
filepath - value-typed filesystem paths.

    from filepath import Path

    sandbox = Path.temporary_dir()["sandbox"]
    sandbox.mkdir()
    sandbox["notes.txt"].write_string("hello").on_failure(print)
    for entry in sandbox:
        print(entry, entry.is_dir)
"""

from __future__ import annotations

from .core.errors import (
    ConfigError,
    ErrorKind,
    FileError,
    FilePathError,
    PathIsDirectoryError,
    PathNotDirectoryError,
    PathNotFoundError,
    PreconditionError,
    ResultUnwrapError,
)
from .core.logger import configure_logging, get_logger
from .core.models import FileAttributes
from .core.path import Path
from .core.result import Failure, Result, Success
from .core.scanner import scan_tree
from .core.traversal import Traversal

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ErrorKind",
    "FileAttributes",
    "FileError",
    "FilePathError",
    "Failure",
    "Path",
    "PathIsDirectoryError",
    "PathNotDirectoryError",
    "PathNotFoundError",
    "PreconditionError",
    "Result",
    "ResultUnwrapError",
    "Success",
    "Traversal",
    "configure_logging",
    "get_logger",
    "scan_tree",
]
