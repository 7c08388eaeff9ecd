"""
Thin OS layer used by Path.

Every function here performs one (or a small fixed number of) blocking calls
into os / shutil and lets OSError propagate. Converting failures into Result
values is Path's job, not this module's.
"""

from __future__ import annotations

import errno
import os
import secrets
import shutil
import stat as stat_module
from datetime import datetime
from typing import Iterator, List, Optional, Union

Timestamp = Union[datetime, float, int]

# Mode for freshly created files; the process umask is applied on top.
NEW_FILE_MODE = 0o666


def stat(path: str) -> os.stat_result:
    """Return ``os.stat(path)`` following symlinks."""
    return os.stat(path)


def list_directory(path: str) -> List[str]:
    """Return the names of the immediate entries of ``path`` in OS order."""
    return os.listdir(path)


def scan_directory(path: str) -> Iterator[os.DirEntry]:
    """Open an ``os.scandir`` iterator; the caller must close it."""
    return os.scandir(path)


def make_directories(path: str) -> None:
    """Create ``path`` and any missing parents (``mkdir -p``)."""
    os.makedirs(path, exist_ok=True)


def is_real_directory(path: str) -> bool:
    """True for a directory that is not a symlink."""
    try:
        return stat_module.S_ISDIR(os.lstat(path).st_mode)
    except OSError:
        return False


def delete(path: str) -> None:
    """Delete a file, symlink or (recursively) a directory."""
    if is_real_directory(path):
        shutil.rmtree(path)
    else:
        os.remove(path)


def read_bytes(path: str) -> bytes:
    with open(path, "rb") as handle:
        return handle.read()


def write_bytes_atomic(path: str, data: bytes) -> None:
    """
    Replace the content of ``path`` with ``data`` atomically.

    The bytes go to a uniquely named sibling file first, which is flushed to
    disk and then renamed over ``path``. Readers see either the old content or
    the new content, never a partial write. The permission bits of an existing
    file are kept.
    """
    directory, name = os.path.split(path)
    temp_path = os.path.join(directory, f".{name}.{secrets.token_hex(6)}.tmp")

    existing_mode: Optional[int] = None
    try:
        existing_mode = stat_module.S_IMODE(os.stat(path).st_mode)
    except OSError:
        pass

    flags = os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0)
    fd = os.open(temp_path, flags, NEW_FILE_MODE)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        if existing_mode is not None:
            os.chmod(temp_path, existing_mode)
        os.replace(temp_path, path)
    except BaseException:
        try:
            os.remove(temp_path)
        except OSError:
            pass
        raise


def _is_within(path: str, directory: str) -> bool:
    """True when ``path`` is ``directory`` itself or lies below it."""
    path = os.path.realpath(path)
    directory = os.path.realpath(directory)
    return path == directory or path.startswith(os.path.join(directory, ""))


def _discard(path: str) -> None:
    """Delete whatever a failed copy left at ``path``, ignoring errors."""
    if is_real_directory(path):
        shutil.rmtree(path, ignore_errors=True)
        return
    try:
        os.remove(path)
    except OSError:
        pass


def copy(source: str, destination: str) -> None:
    """
    Copy a file or a whole directory tree, keeping metadata and symlinks.

    A directory cannot be copied into itself or one of its descendants;
    that raises EINVAL before anything is written.
    """
    if is_real_directory(source):
        if _is_within(destination, source):
            raise OSError(
                errno.EINVAL,
                "Cannot copy a directory into itself",
                destination,
            )
        shutil.copytree(source, destination, symlinks=True)
    else:
        shutil.copy2(source, destination, follow_symlinks=False)


def move(source: str, destination: str) -> None:
    """
    Move ``source`` to ``destination``.

    Uses a single rename when both sides live on the same filesystem and falls
    back to copy + delete when the OS reports a cross-device move. If the copy
    fails, the partial destination is removed and the source is left as it was.
    """
    try:
        os.rename(source, destination)
    except OSError as exc:
        if exc.errno != errno.EXDEV:
            raise
        existed = os.path.lexists(destination)
        try:
            copy(source, destination)
        except BaseException:
            if not existed:
                _discard(destination)
            raise
        delete(source)


def set_modification_time(path: str, when: Optional[Timestamp] = None) -> None:
    """Set the mtime of ``path`` to ``when`` (default: now), keeping atime."""
    if when is None:
        when = datetime.now()
    mtime = when.timestamp() if isinstance(when, datetime) else float(when)
    atime = os.stat(path).st_atime
    os.utime(path, (atime, mtime))
