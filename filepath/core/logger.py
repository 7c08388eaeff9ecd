"""
Logging setup for the filepath package.

Every module gets its logger from get_logger("<module>"). Importing
the package never prints anything: the package logger only carries a
NullHandler until configure_logging() attaches a Rich handler.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ..utils.env import get_log_level

PACKAGE_LOGGER_NAME = "filepath"

# Single shared console instance; diagnostics go to stderr.
console = Console(stderr=True)

_package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
_package_logger.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: Short module name, e.g. ``"path"``.

    Returns:
        A child of the package logger (``filepath.<name>``).
    """
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")


def configure_logging(level: Optional[int] = None) -> logging.Logger:
    """
    Attach a RichHandler to the package logger.

    Args:
        level: Logging level. Defaults to FILEPATH_LOG_LEVEL (or WARNING).

    Returns:
        The configured package logger. Calling this again only updates the
        level; it never stacks a second handler.
    """
    if level is None:
        level = get_log_level()

    _package_logger.setLevel(level)

    rich_handlers = [h for h in _package_logger.handlers if isinstance(h, RichHandler)]
    if not rich_handlers:
        handler = RichHandler(console=console, show_path=False)
        _package_logger.addHandler(handler)
        rich_handlers = [handler]

    for handler in rich_handlers:
        handler.setLevel(level)

    return _package_logger
