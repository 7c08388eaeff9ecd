"""
Path value type.

A Path is an immutable wrapper around one OS-native path string. It never
validates, canonicalizes or caches anything: equality is string equality, and
every query (exists, is_dir, attributes) asks the OS again at call time.

Operations come in three flavours:

- derivation (child, parent, basename, extension): pure string work
- queries (exists, is_dir, attributes): never raise, a failed stat reads as
  "absent"
- mutations (mkdir, touch, write_*, remove, copy_to, move_to): return
  Success(path) or Failure(FileError); OS errors never escape

Calling an operation on the wrong kind of entry (children of a file, writing
to a directory) is a caller bug and raises a PreconditionError.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from . import fs
from .errors import (
    FileError,
    PathIsDirectoryError,
    PathNotDirectoryError,
    PathNotFoundError,
)
from .logger import get_logger
from .models import FileAttributes
from .result import Failure, Result, Success
from .traversal import Traversal
from ..utils import paths as well_known

logger = get_logger("path")

PathResult = Result["Path", FileError]
PathLike = Union["Path", str, os.PathLike]
BytesLike = Union[bytes, bytearray, memoryview]

# ---------------------------------------------------------------------------
# String helpers
# ---------------------------------------------------------------------------

_SEPARATORS: Tuple[str, ...] = tuple(dict.fromkeys(s for s in ("/", os.sep, os.altsep) if s))
_SEPARATOR_CHARS = "".join(sorted(set(_SEPARATORS)))


def _segments(name: str) -> List[str]:
    """Split ``name`` on every separator, dropping empty segments."""
    for sep in _SEPARATORS:
        name = name.replace(sep, "/")
    return [segment for segment in name.split("/") if segment]


def _last_separator(text: str) -> int:
    return max(text.rfind(sep) for sep in _SEPARATORS)


def _split_root(raw: str) -> Tuple[str, str, bool]:
    """
    Return (drive, body, is_root) for ``raw``.

    ``body`` has its trailing separators removed; ``is_root`` is True when
    ``raw`` consists of a drive and/or separators only (e.g. "/" or "C:\\").
    """
    drive, rest = os.path.splitdrive(raw)
    body = rest.rstrip(_SEPARATOR_CHARS)
    return drive, body, bool(rest) and not body


# ---------------------------------------------------------------------------
# Path
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Path:
    """
    Handle to a filesystem location identified by ``raw``.

    The location does not need to exist. Two Paths with the same ``raw``
    string are interchangeable.
    """

    raw: str

    def __post_init__(self) -> None:
        if isinstance(self.raw, os.PathLike):
            object.__setattr__(self, "raw", os.fspath(self.raw))

    # -----------------------------------------------------------------------
    # Well-known directories
    # -----------------------------------------------------------------------

    @classmethod
    def home_dir(cls) -> Path:
        return cls(well_known.home_dir())

    @classmethod
    def temporary_dir(cls) -> Path:
        return cls(well_known.temporary_dir())

    @classmethod
    def cache_dir(cls) -> Path:
        return cls(well_known.cache_dir())

    @classmethod
    def documents_dir(cls) -> Path:
        return cls(well_known.documents_dir())

    # -----------------------------------------------------------------------
    # Printing
    # -----------------------------------------------------------------------

    def __str__(self) -> str:
        return self.raw

    def __fspath__(self) -> str:
        return self.raw

    def to_string(self) -> str:
        return self.raw

    # -----------------------------------------------------------------------
    # Derivation
    # -----------------------------------------------------------------------

    def child(self, name: str) -> Path:
        """
        Return the path of ``name`` inside this path.

        Exactly one separator ends up between the two parts, whatever
        separators either side starts or ends with, so
        ``p.child("a").child("b") == p.child("a//b/")``. A leading separator
        in ``name`` does not make it absolute.
        """
        segments = _segments(name)
        if not segments:
            return self

        joined = os.sep.join(segments)
        if not self.raw:
            return Path(joined)

        drive, body, is_root = _split_root(self.raw)
        if is_root:
            # "/" or "C:\": the root already ends with its separator.
            return Path(self.raw[: len(drive) + 1] + joined)
        if not body:
            # Bare drive ("C:"), which is drive-relative.
            return Path(drive + joined)
        return Path(drive + body + os.sep + joined)

    def content(self, name: str) -> Path:
        """Alias of child()."""
        return self.child(name)

    def __getitem__(self, name: str) -> Path:
        return self.child(name)

    def __truediv__(self, name: str) -> Path:
        return self.child(name)

    @property
    def parent(self) -> Path:
        """
        This path with its last segment removed.

        The parent of the root is the root, so repeated ``parent`` calls
        settle there. A single relative segment has the empty path as parent.
        """
        drive, body, is_root = _split_root(self.raw)
        if is_root:
            return Path(self.raw[: len(drive) + 1])
        if not body:
            return self

        index = _last_separator(body)
        if index < 0:
            return Path(drive)

        head = body[:index].rstrip(_SEPARATOR_CHARS)
        if not head:
            # Only the root was left in front of the last segment.
            return Path(drive + body[0])
        return Path(drive + head)

    @property
    def basename(self) -> str:
        """Final segment, ignoring trailing separators. The root is its own basename."""
        drive, body, is_root = _split_root(self.raw)
        if is_root:
            return self.raw[len(drive) : len(drive) + 1]
        return body[_last_separator(body) + 1 :]

    @property
    def extension(self) -> str:
        """Suffix after the last '.' of basename, without the dot ('' if none)."""
        _, suffix = os.path.splitext(self.basename)
        return suffix[1:]

    # -----------------------------------------------------------------------
    # Queries (always hit the OS)
    # -----------------------------------------------------------------------

    @property
    def exists(self) -> bool:
        return os.path.exists(self.raw)

    @property
    def is_dir(self) -> bool:
        return os.path.isdir(self.raw)

    @property
    def is_file(self) -> bool:
        return self.exists and not self.is_dir

    @property
    def attributes(self) -> Optional[FileAttributes]:
        """Fresh metadata snapshot, or None when the entry cannot be stat'd."""
        try:
            return FileAttributes.from_stat(fs.stat(self.raw))
        except (OSError, ValueError):
            return None

    # -----------------------------------------------------------------------
    # Directory operations
    # -----------------------------------------------------------------------

    @property
    def children(self) -> Optional[List[Path]]:
        """
        Immediate entries of this directory, in the order the OS lists them.

        Precondition: the path is an existing directory (PathNotFoundError /
        PathNotDirectoryError otherwise). Returns None if the OS refuses the
        listing (e.g. permission denied).
        """
        self._require_directory("list children of")
        try:
            names = fs.list_directory(self.raw)
        except OSError as exc:
            logger.debug(f"Could not list '{self.raw}': {exc}")
            return None
        return [self.child(name) for name in names]

    @property
    def contents(self) -> Optional[List[Path]]:
        """Alias of children."""
        return self.children

    def walk(self) -> Traversal:
        """
        Return a new lazy, depth-first Traversal over every descendant.

        Precondition: the path is an existing directory.
        """
        self._require_directory("walk")
        return Traversal(self)

    def __iter__(self) -> Traversal:
        return self.walk()

    def mkdir(self) -> PathResult:
        """Create this directory and any missing parents (``mkdir -p``)."""
        return self._attempt("mkdir", lambda: fs.make_directories(self.raw))

    # -----------------------------------------------------------------------
    # File operations
    # -----------------------------------------------------------------------

    def touch(self, when: Optional[fs.Timestamp] = None) -> PathResult:
        """
        Create an empty file, or bump the modification time of an existing one.

        ``when`` (a datetime or POSIX timestamp) defaults to now. The content
        of an existing file is left alone.
        """
        self._require_not_directory("touch")
        if self.exists:
            return self.update_modification_date(when)

        created = self.write_string("")
        if when is None or created.is_failure:
            return created
        return self.update_modification_date(when)

    def update_modification_date(self, when: Optional[fs.Timestamp] = None) -> PathResult:
        """Set the modification time to ``when`` (default: now)."""
        return self._attempt(
            "update modification date",
            lambda: fs.set_modification_time(self.raw, when),
        )

    def read_data(self) -> Optional[bytes]:
        """Whole file content as bytes, or None if it cannot be read."""
        self._require_not_directory("read")
        try:
            return fs.read_bytes(self.raw)
        except (OSError, ValueError) as exc:
            logger.debug(f"Read failed for '{self.raw}': {exc}")
            return None

    def read_string(self) -> Optional[str]:
        """Whole file content decoded as UTF-8, or None if unreadable or not UTF-8."""
        data = self.read_data()
        if data is None:
            return None
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.debug(f"'{self.raw}' is not valid UTF-8: {exc}")
            return None

    def write_data(self, data: BytesLike) -> PathResult:
        """
        Atomically replace the file content with ``data``.

        ``data`` must be bytes-like; anything else raises TypeError.
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"write_data() expects bytes, not {type(data).__name__}")
        self._require_not_directory("write")
        return self._attempt("write", lambda: fs.write_bytes_atomic(self.raw, data))

    def write_string(self, text: str) -> PathResult:
        """Atomically replace the file content with ``text`` encoded as UTF-8."""
        self._require_not_directory("write")
        return self._attempt(
            "write",
            lambda: fs.write_bytes_atomic(self.raw, text.encode("utf-8")),
        )

    # -----------------------------------------------------------------------
    # Entry operations (files and directories)
    # -----------------------------------------------------------------------

    def remove(self) -> PathResult:
        """Delete the entry; directories are removed with all their descendants."""
        return self._attempt("remove", lambda: fs.delete(self.raw))

    def copy_to(self, destination: PathLike) -> PathResult:
        """
        Copy this file or directory tree to ``destination``.

        Fails with ALREADY_EXISTS when ``destination`` exists, and with OTHER
        when a directory would be copied into itself. Returns
        Success(destination).
        """
        target = _as_path(destination)
        if os.path.lexists(target.raw):
            return self._collision("copy", target)
        return self._attempt("copy", lambda: fs.copy(self.raw, target.raw), target)

    def move_to(self, destination: PathLike) -> PathResult:
        """
        Move this file or directory tree to ``destination``.

        A rename when possible, copy + delete across filesystems. Fails with
        ALREADY_EXISTS when ``destination`` exists. Returns
        Success(destination).
        """
        target = _as_path(destination)
        if os.path.lexists(target.raw):
            return self._collision("move", target)
        return self._attempt("move", lambda: fs.move(self.raw, target.raw), target)

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    def _attempt(
        self,
        operation: str,
        action: Callable[[], None],
        target: Optional[Path] = None,
    ) -> PathResult:
        """
        Run ``action`` and wrap the outcome.

        ``target`` is the destination of a copy or move: it is recorded on the
        FileError and becomes the success value.
        """
        destination = target.raw if target is not None else None
        try:
            action()
        except (OSError, ValueError) as exc:
            error = FileError.from_os_error(exc, self.raw, destination)
            logger.debug(f"{operation} failed for '{self.raw}': {error}")
            return Failure(error)
        return Success(target if target is not None else self)

    def _collision(self, operation: str, target: Path) -> PathResult:
        error = FileError.already_exists(target.raw)
        logger.debug(f"{operation} '{self.raw}' -> '{target.raw}' refused: {error}")
        return Failure(error)

    def _require_directory(self, action: str) -> None:
        if not self.exists:
            raise PathNotFoundError(f"Cannot {action} '{self.raw}': path does not exist.")
        if not self.is_dir:
            raise PathNotDirectoryError(f"Cannot {action} '{self.raw}': not a directory.")

    def _require_not_directory(self, action: str) -> None:
        if self.is_dir:
            raise PathIsDirectoryError(f"Cannot {action} '{self.raw}': it is a directory.")


def _as_path(value: PathLike) -> Path:
    return value if isinstance(value, Path) else Path(os.fspath(value))
