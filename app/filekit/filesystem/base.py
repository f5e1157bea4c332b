"""Common base for components that trace through a LogChannel."""

from filekit.tracing.channel import LogChannel
from filekit.tracing.models import LogLevel


class TracedComponent:
    """Base class holding the injected channel and the component's event name.

    Attributes:
        event_name: Name attached to every event this component emits.
    """

    event_name: str = ""

    def __init__(self, channel: LogChannel) -> None:
        self._channel = channel

    @property
    def channel(self) -> LogChannel:
        """The channel this component reports to."""
        return self._channel

    def _trace(self, level: LogLevel, label: str, *arguments: object) -> None:
        self._channel.emit(level, self.event_name, label, *arguments)
