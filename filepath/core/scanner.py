"""
Tabular directory scan for the filepath package.

Responsibilities:

- Walk a root directory with a Traversal (lazy, depth-first).
- For each entry, collect:
  - file_name
  - extension
  - full_path
  - size_bytes
  - modified_time
  - is_dir
- Return a Pandas DataFrame with those columns.
- If the root does not exist, raise PathNotFoundError.
- If the root exists but is not a directory, raise PathNotDirectoryError.
"""

from __future__ import annotations

from typing import List, Union

import pandas as pd

from .logger import get_logger
from .path import Path

logger = get_logger("scanner")

COLUMNS = [
    "file_name",
    "extension",
    "full_path",
    "size_bytes",
    "modified_time",
    "is_dir",
]


def scan_tree(root: Union[Path, str], *, include_dirs: bool = False) -> pd.DataFrame:
    """
    Recursively scan ``root`` and return a DataFrame with one row per entry.

    The returned DataFrame has columns:

    - file_name       (str)
    - extension       (str; lowercase, without the dot, e.g. "pdf")
    - full_path       (str)
    - size_bytes      (int)
    - modified_time   (datetime64; local time)
    - is_dir          (bool)

    Behavior:

    - Directories are listed only when ``include_dirs`` is True.
    - Entries that disappear (or cannot be stat'd) between enumeration and
      stat are skipped rather than failing the whole scan.
    - An empty tree yields an empty DataFrame with the same columns.
    - Row order follows the traversal order, which is whatever the OS reports.

    Parameters
    ----------
    root : Path | str
        Root directory to scan.
    include_dirs : bool
        Also emit rows for directories.

    Returns
    -------
    pd.DataFrame
        DataFrame with one row per discovered entry.

    Raises
    ------
    PathNotFoundError
        If the path does not exist.
    PathNotDirectoryError
        If the path is not a directory.
    """
    root_path = root if isinstance(root, Path) else Path(root)

    rows: List[dict] = []
    skipped = 0

    with root_path.walk() as entries:
        for entry in entries:
            attributes = entry.attributes
            if attributes is None:
                skipped += 1
                continue

            if attributes.is_directory and not include_dirs:
                continue

            rows.append(
                {
                    "file_name": entry.basename,
                    "extension": entry.extension.lower(),
                    "full_path": entry.raw,
                    "size_bytes": attributes.size_bytes,
                    "modified_time": attributes.modification_time,
                    "is_dir": attributes.is_directory,
                }
            )

    if skipped:
        logger.debug(f"Skipped {skipped} vanished or unreadable entries under '{root_path}'")

    df = pd.DataFrame(rows, columns=COLUMNS)
    df["modified_time"] = pd.to_datetime(df["modified_time"])
    return df
