"""
Data models for the filepath package.

FileAttributes is a plain snapshot of one stat call. It is never cached on a
Path; every Path.attributes access builds a fresh one.
"""

from __future__ import annotations

import os
import stat as stat_module
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FileAttributes:
    """
    Metadata for a single filesystem entry, as reported by the OS.

    - size_bytes         : size of the entry in bytes
    - posix_permissions  : permission bits only (e.g. 0o644 == 420)
    - mode               : full st_mode, including the file type bits
    - modification_time  : last content modification (local time)
    - access_time        : last access (local time)
    - is_directory       : True for directories
    - owner_id / group_id: numeric uid / gid (0 on platforms without them)
    """

    size_bytes: int
    posix_permissions: int
    mode: int
    modification_time: datetime
    access_time: datetime
    is_directory: bool
    owner_id: int
    group_id: int

    @classmethod
    def from_stat(cls, result: os.stat_result) -> FileAttributes:
        """Build a snapshot from an ``os.stat_result``."""
        return cls(
            size_bytes=result.st_size,
            posix_permissions=stat_module.S_IMODE(result.st_mode),
            mode=result.st_mode,
            modification_time=datetime.fromtimestamp(result.st_mtime),
            access_time=datetime.fromtimestamp(result.st_atime),
            is_directory=stat_module.S_ISDIR(result.st_mode),
            owner_id=result.st_uid,
            group_id=result.st_gid,
        )

    def file_posix_permissions(self) -> int:
        """Permission bits of the entry, e.g. ``0o644``."""
        return self.posix_permissions
