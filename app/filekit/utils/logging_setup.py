"""Logging configuration for the filekit CLI.

Library code only creates module loggers; handlers are installed here, by
the CLI, and nowhere else.
"""

import logging
import os
from typing import Final

from rich.logging import RichHandler

from filekit.utils.formatting import err_console

_LOG_LEVEL_ENV: Final[str] = "FILEKIT_LOG_LEVEL"
_DEFAULT_LEVEL_NAME: Final[str] = "WARNING"
_TRACE_LOGGER: Final[str] = "filekit.trace"


def _resolve_level(verbose: bool) -> int:
    """Return DEBUG when verbose, else the level named by FILEKIT_LOG_LEVEL."""
    if verbose:
        return logging.DEBUG
    level_name = os.getenv(_LOG_LEVEL_ENV, _DEFAULT_LEVEL_NAME).upper()
    level = getattr(logging, level_name, logging.WARNING)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(verbose: bool = False) -> None:
    """Install a single Rich handler on the ``filekit`` logger.

    The ``filekit.trace`` logger used by LoggingSink is kept at INFO or
    lower so trace lines stay visible. Calling this again only adjusts the
    levels.
    """
    level = _resolve_level(verbose)
    package_logger = logging.getLogger("filekit")
    package_logger.setLevel(level)
    logging.getLogger(_TRACE_LOGGER).setLevel(min(level, logging.INFO))

    if any(isinstance(h, RichHandler) for h in package_logger.handlers):
        return

    handler = RichHandler(console=err_console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
