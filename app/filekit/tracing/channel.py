"""Synchronous multicast trace channel.

Every filesystem component reports progress through a LogChannel. Before a
line is printed the channel hands the mutable LogEvent to each registered
observer, in registration order. Observers decide whether and how the line
is printed: they may translate it, rewrite its arguments, or drop it.
"""

import logging
from collections.abc import Callable

from filekit.tracing.models import LogEvent, LogLevel, ObserverOutcome
from filekit.tracing.sinks import ConsoleSink, LogSink

logger = logging.getLogger(__name__)

LogObserver = Callable[[LogEvent], ObserverOutcome | None]


class LogChannel:
    """Observer list plus an output sink.

    Observer exceptions are not caught: a failing observer aborts the emit
    call and the exception reaches the code that emitted the event.

    Args:
        name: Default event name used when an emitter passes an empty name.
        sink: Destination of rendered lines. Defaults to a ConsoleSink.
    """

    def __init__(self, name: str = "filekit", sink: LogSink | None = None) -> None:
        self._name = name
        self._sink: LogSink = sink if sink is not None else ConsoleSink()
        self._observers: list[LogObserver] = []

    @property
    def name(self) -> str:
        """Default event name."""
        return self._name

    @property
    def sink(self) -> LogSink:
        """Destination of rendered lines."""
        return self._sink

    @property
    def observers(self) -> tuple[LogObserver, ...]:
        """Registered observers in call order."""
        return tuple(self._observers)

    def add_observer(self, observer: LogObserver) -> LogObserver:
        """Register an observer at the end of the call order.

        Returns the observer unchanged, so this works as a decorator.
        """
        self._observers.append(observer)
        logger.debug("Registered log observer %r on channel %s", observer, self._name)
        return observer

    def remove_observer(self, observer: LogObserver) -> bool:
        """Unregister the first registration of an observer.

        Returns:
            True if the observer was registered, False otherwise.
        """
        try:
            self._observers.remove(observer)
        except ValueError:
            return False
        return True

    def emit(self, level: LogLevel | str, name: str, label: str, *arguments: object) -> bool:
        """Notify observers of an event, then render it unless suppressed.

        Args:
            level: Event level, as LogLevel or its string value.
            name: Emitter name; empty selects the channel name.
            label: printf-style template (``%s``, ``%d``).
            *arguments: Values for the label placeholders.

        Returns:
            True if a line was written to the sink.
        """
        event = LogEvent(
            level=LogLevel(level),
            name=name or self._name,
            label=label,
            arguments=list(arguments),
        )

        dropped = False
        for observer in list(self._observers):
            if observer(event) is ObserverOutcome.DROP:
                dropped = True

        if dropped or not event.label:
            return False

        self._sink.write(LogLevel(event.level), event.name, event.render())
        return True

    def info(self, name: str, label: str, *arguments: object) -> bool:
        """Emit an info event."""
        return self.emit(LogLevel.INFO, name, label, *arguments)

    def warn(self, name: str, label: str, *arguments: object) -> bool:
        """Emit a warn event."""
        return self.emit(LogLevel.WARN, name, label, *arguments)

    def error(self, name: str, label: str, *arguments: object) -> bool:
        """Emit an error event."""
        return self.emit(LogLevel.ERROR, name, label, *arguments)

    def debug(self, name: str, label: str, *arguments: object) -> bool:
        """Emit a debug event."""
        return self.emit(LogLevel.DEBUG, name, label, *arguments)


def drop_levels(*levels: LogLevel) -> LogObserver:
    """Build an observer that drops every event of the given levels."""
    muted = frozenset(levels)

    def _observer(event: LogEvent) -> ObserverOutcome | None:
        if event.level in muted:
            return ObserverOutcome.DROP
        return None

    return _observer
