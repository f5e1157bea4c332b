"""Observable trace channel.

This module provides the mutable trace event, the observer channel that
every filesystem component reports through, and the sinks that finally
print or log rendered lines.
"""

from filekit.tracing.channel import LogChannel, LogObserver, drop_levels
from filekit.tracing.models import LogEvent, LogLevel, ObserverOutcome
from filekit.tracing.sinks import ConsoleSink, LoggingSink, LogSink

__all__ = [
    "ConsoleSink",
    "LogChannel",
    "LogEvent",
    "LogLevel",
    "LogObserver",
    "LogSink",
    "LoggingSink",
    "ObserverOutcome",
    "drop_levels",
]
