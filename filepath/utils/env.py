"""
Environment helper utilities for the filepath package.

Responsible for:
- Loading environment variables from a .env file.
- Providing helpers to read the package's configuration in a safe,
  centralized way.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from ..core.errors import ConfigError

# Names of the env vars understood by the package.
LOG_LEVEL_ENV_VAR = "FILEPATH_LOG_LEVEL"
DIR_OVERRIDE_ENV_VARS = {
    "home": "FILEPATH_HOME_DIR",
    "temp": "FILEPATH_TEMP_DIR",
    "cache": "FILEPATH_CACHE_DIR",
    "documents": "FILEPATH_DOCUMENTS_DIR",
}

DEFAULT_LOG_LEVEL = logging.WARNING

# ---------------------------------------------------------------------------
# .env loading
# ---------------------------------------------------------------------------

# Load from a .env in the current working directory or its parents, once at
# import time. Variables already set in the process environment win.
DOTENV_LOADED = load_dotenv()

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def get_log_level() -> int:
    """
    Return the logging level configured through FILEPATH_LOG_LEVEL.

    - Accepts level names (``debug``, ``INFO``...) or numeric levels.
    - Falls back to WARNING when the variable is unset or empty.
    - Raises ConfigError for anything else.
    """
    raw = os.getenv(LOG_LEVEL_ENV_VAR, "").strip()
    if not raw:
        return DEFAULT_LOG_LEVEL

    if raw.isdigit():
        return int(raw)

    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise ConfigError(
            f"{LOG_LEVEL_ENV_VAR}={raw!r} is not a valid logging level."
        )
    return level


def get_dir_override(role: str) -> Optional[str]:
    """
    Return the configured override for a well-known directory, if any.

    ``role`` is one of ``home``, ``temp``, ``cache`` or ``documents``.
    Overrides have ``~`` and environment variables expanded.
    """
    try:
        env_var = DIR_OVERRIDE_ENV_VARS[role]
    except KeyError:
        raise ConfigError(f"Unknown well-known directory role: {role!r}") from None

    value = os.getenv(env_var)
    if not value:
        return None
    return os.path.expandvars(os.path.expanduser(value))
