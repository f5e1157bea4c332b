"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from filekit.filesystem.toolkit import FileSystem
from filekit.tracing.channel import LogChannel
from filekit.tracing.models import LogEvent, LogLevel


class RecordingSink:
    """Sink that keeps rendered lines instead of printing them."""

    def __init__(self) -> None:
        self.lines: list[tuple[LogLevel, str, str]] = []

    def write(self, level: LogLevel, name: str, message: str) -> None:
        self.lines.append((level, name, message))

    def messages(self, level: LogLevel | None = None) -> list[str]:
        return [m for lvl, _, m in self.lines if level is None or lvl == level]


@pytest.fixture
def sink() -> RecordingSink:
    """A sink recording every rendered line."""
    return RecordingSink()


@pytest.fixture
def channel(sink: RecordingSink) -> LogChannel:
    """A channel writing to the recording sink."""
    return LogChannel(name="test", sink=sink)


@pytest.fixture
def events(channel: LogChannel) -> list[LogEvent]:
    """Every event emitted on the channel, recorded by an observer."""
    recorded: list[LogEvent] = []
    channel.add_observer(recorded.append)
    return recorded


@pytest.fixture
def fs(channel: LogChannel) -> FileSystem:
    """A FileSystem tracing to the recording channel."""
    return FileSystem(channel=channel)


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """A small tree of text and binary files.

    Layout::

        src/
            a.txt
            b.bin
            docs/
                readme.md
                nested/
                    deep.txt
            empty/
    """
    root = tmp_path / "src"
    (root / "docs" / "nested").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "a.txt").write_text("alpha")
    (root / "b.bin").write_bytes(bytes(range(256)))
    (root / "docs" / "readme.md").write_text("# readme")
    (root / "docs" / "nested" / "deep.txt").write_text("deep")
    return root
