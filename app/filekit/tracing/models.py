"""Trace event models.

A LogEvent is deliberately mutable: observers registered on a LogChannel
receive the same instance and may translate the label, rewrite the
arguments, or suppress the line before it is rendered.
"""

from dataclasses import dataclass, field
from enum import Enum


class LogLevel(str, Enum):
    """Severity of a trace event.

    Attributes:
        INFO: Progress of an operation (directory created, file written).
        WARN: Recoverable surprise (scan root not found).
        ERROR: Failure reported by the caller.
        DEBUG: Verbose detail.
    """

    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    DEBUG = "debug"


class ObserverOutcome(str, Enum):
    """Explicit decision an observer may return for an event.

    Attributes:
        KEEP: Let the event continue to the sink (same as returning None).
        DROP: Suppress rendering of the event.
    """

    KEEP = "keep"
    DROP = "drop"


@dataclass(slots=True)
class LogEvent:
    """A trace message on its way to the sink.

    Attributes:
        level: Severity, selects the sink stream and style.
        name: Emitter identifier (defaults to the channel name).
        label: printf-style template; empty means "do not print".
        arguments: Values substituted into the label placeholders.
    """

    level: LogLevel
    name: str
    label: str
    arguments: list[object] = field(default_factory=list)

    def render(self) -> str:
        """Substitute the arguments into the label.

        A label without arguments is returned verbatim, so a literal ``%``
        needs no escaping. When the label and the arguments do not match,
        which happens once an observer has translated the label, the label
        is followed by the arguments separated by spaces.
        """
        if not self.arguments:
            return self.label
        try:
            return self.label % tuple(self.arguments)
        except (TypeError, ValueError):
            return " ".join([self.label, *(str(a) for a in self.arguments)])
