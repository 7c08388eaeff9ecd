"""
Lazy, depth-first traversal of a directory tree.

A Traversal pulls one entry at a time from os.scandir and yields it as a Path
relative to the traversal root. Directories are descended into right after
they are yielded (pre-order). Symlinked directories are yielded but not
followed. Order within a directory is whatever the OS reports.

A Traversal is single-use. Once exhausted or closed it keeps raising
StopIteration; walk the directory again with a new Traversal.

Open scandir handles are released:
- as soon as each directory is exhausted,
- by close(), or on leaving a ``with`` block (covers early ``break``),
- when the object is garbage collected.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from . import fs
from .logger import get_logger

if TYPE_CHECKING:
    from .path import Path

logger = get_logger("traversal")


class Traversal:
    """Single-pass iterator over every descendant of a directory."""

    def __init__(self, root: Path) -> None:
        self._root = root
        # (open scandir iterator, path of that directory relative to root)
        self._stack: List[Tuple[Iterator[os.DirEntry], str]] = []
        self._started = False
        self._finished = False

    @property
    def root(self) -> Path:
        return self._root

    @property
    def finished(self) -> bool:
        return self._finished

    def __iter__(self) -> Traversal:
        return self

    def __next__(self) -> Path:
        if self._finished:
            raise StopIteration

        if not self._started:
            self._started = True
            self._open(self._root.raw, "")

        while self._stack:
            entries, prefix = self._stack[-1]
            entry = self._next_entry(entries, prefix)
            if entry is None:
                self._stack.pop()
                _close_quietly(entries)
                continue

            relative = os.path.join(prefix, entry.name) if prefix else entry.name
            if _is_directory(entry):
                self._open(entry.path, relative)
            return self._root.child(relative)

        self._finished = True
        raise StopIteration

    def close(self) -> None:
        """Release every open OS handle and mark the traversal finished."""
        while self._stack:
            entries, _ = self._stack.pop()
            _close_quietly(entries)
        self._started = True
        self._finished = True

    def __enter__(self) -> Traversal:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        # Attributes may be missing if __init__ never completed.
        if getattr(self, "_stack", None):
            self.close()

    def __repr__(self) -> str:
        state = "finished" if self._finished else "open"
        return f"Traversal({self._root.raw!r}, {state})"

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    def _open(self, directory: str, relative: str) -> None:
        try:
            entries = fs.scan_directory(directory)
        except OSError as exc:
            # Unreadable subdirectory: yield it, but do not descend.
            logger.debug(f"Skipping unreadable directory '{directory}': {exc}")
            return
        self._stack.append((entries, relative))

    @staticmethod
    def _next_entry(entries: Iterator[os.DirEntry], prefix: str) -> Optional[os.DirEntry]:
        try:
            return next(entries)
        except StopIteration:
            return None
        except OSError as exc:
            logger.debug(f"Stopped reading directory '{prefix or '.'}': {exc}")
            return None


def _is_directory(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _close_quietly(entries: Iterator[os.DirEntry]) -> None:
    close = getattr(entries, "close", None)
    if close is not None:
        close()
