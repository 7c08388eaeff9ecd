"""
Well-known directory lookups for the filepath package.

Each helper resolves a logical role (home, temp, cache, documents) to an
absolute path string for the current platform. A FILEPATH_*_DIR environment
variable (see utils.env) takes precedence over the platform default. The
results are plain strings; Path's class-level factories wrap them.
"""

from __future__ import annotations

import os
import sys
import tempfile

from .env import get_dir_override


def home_dir() -> str:
    """Return the current user's home directory."""
    override = get_dir_override("home")
    if override:
        return os.path.abspath(override)
    return os.path.expanduser("~")


def temporary_dir() -> str:
    """Return the directory used for temporary files (honours TMPDIR etc.)."""
    override = get_dir_override("temp")
    if override:
        return os.path.abspath(override)
    return tempfile.gettempdir()


def cache_dir() -> str:
    """
    Return the per-user cache directory.

    - Linux / other POSIX: $XDG_CACHE_HOME or ~/.cache
    - macOS: ~/Library/Caches
    - Windows: %LOCALAPPDATA% (falling back to ~/AppData/Local)
    """
    override = get_dir_override("cache")
    if override:
        return os.path.abspath(override)

    if sys.platform == "darwin":
        return os.path.join(home_dir(), "Library", "Caches")

    if sys.platform.startswith("win"):
        local = os.getenv("LOCALAPPDATA")
        return local or os.path.join(home_dir(), "AppData", "Local")

    xdg = os.getenv("XDG_CACHE_HOME")
    if xdg and os.path.isabs(xdg):
        return xdg
    return os.path.join(home_dir(), ".cache")


def documents_dir() -> str:
    """
    Return the per-user documents directory.

    Honours $XDG_DOCUMENTS_DIR on POSIX; otherwise ~/Documents.
    """
    override = get_dir_override("documents")
    if override:
        return os.path.abspath(override)

    xdg = os.getenv("XDG_DOCUMENTS_DIR")
    if xdg and not sys.platform.startswith("win"):
        return os.path.abspath(os.path.expandvars(os.path.expanduser(xdg)))
    return os.path.join(home_dir(), "Documents")
