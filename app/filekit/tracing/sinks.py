"""Output sinks for rendered trace lines."""

import logging
from typing import Protocol

from rich.console import Console

from filekit.core.theme import get_theme
from filekit.tracing.models import LogLevel

_STDLIB_LEVELS: dict[LogLevel, int] = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class LogSink(Protocol):
    """Destination of rendered trace lines."""

    def write(self, level: LogLevel, name: str, message: str) -> None:
        """Write one rendered line."""
        ...


class ConsoleSink:
    """Print trace lines on Rich consoles.

    info and debug lines go to stdout, warn and error lines to stderr.
    Each line is styled with the theme's ``level.<name>`` style.

    Args:
        console: Console for info/debug lines.
        err_console: Console for warn/error lines.
    """

    def __init__(
        self,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self._console = console or Console(theme=get_theme())
        self._err_console = err_console or Console(theme=get_theme(), stderr=True)

    def write(self, level: LogLevel, name: str, message: str) -> None:
        """Print the message on the console selected by level."""
        target = self._err_console if level in (LogLevel.WARN, LogLevel.ERROR) else self._console
        # Paths may contain brackets, so markup stays off
        target.print(message, style=f"level.{level.value}", markup=False, highlight=False)


class LoggingSink:
    """Forward trace lines to the standard logging module.

    The event name becomes a child of ``logger_name``, so hosts can route
    filekit traces through their own handlers.
    """

    def __init__(self, logger_name: str = "filekit.trace") -> None:
        self._logger_name = logger_name

    def write(self, level: LogLevel, name: str, message: str) -> None:
        """Log the message at the stdlib level matching ``level``."""
        logging.getLogger(f"{self._logger_name}.{name}").log(_STDLIB_LEVELS[level], message)
