"""The FileSystem facade.

Wires one LogChannel into every component and exposes the whole toolkit as
a single, caller-constructed object. There is no shared default instance:
code that needs the toolkit receives the FileSystem it should use.
"""

import os
from collections.abc import Sequence

from filekit.core.paths import StrPath, join
from filekit.core.settings import Settings
from filekit.filesystem.copier import Copier
from filekit.filesystem.creator import DirectoryCreator
from filekit.filesystem.filters import FilterLike, as_filter
from filekit.filesystem.finder import AncestorFinder
from filekit.filesystem.remover import Remover
from filekit.filesystem.scanner import Scanner
from filekit.filesystem.writer import USE_DEFAULT, Encoding, Writer
from filekit.tracing.channel import LogChannel, LogObserver
from filekit.tracing.models import LogLevel
from filekit.tracing.sinks import ConsoleSink, LoggingSink, LogSink


def build_channel(settings: Settings) -> LogChannel:
    """Create a LogChannel configured from settings."""
    sink: LogSink = LoggingSink() if settings.sink == "logging" else ConsoleSink()
    return LogChannel(name=settings.channel_name, sink=sink)


class FileSystem:
    """Synchronous filesystem toolkit with an observable trace channel.

    Args:
        channel: Channel all components trace to. Built from ``settings``
            when omitted.
        settings: Encoding and channel configuration. Defaults to Settings().
    """

    def __init__(self, channel: LogChannel | None = None, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()
        self._channel = channel if channel is not None else build_channel(self._settings)

        self._scanner = Scanner(self._channel)
        self._creator = DirectoryCreator(self._channel)
        self._remover = Remover(self._channel, self._scanner)
        self._writer = Writer(self._channel, self._creator, encoding=self._settings.encoding)
        self._copier = Copier(self._scanner, self._writer)
        self._finder = AncestorFinder()

    @property
    def channel(self) -> LogChannel:
        """The channel shared by all components."""
        return self._channel

    @property
    def settings(self) -> Settings:
        """Settings this instance was built with."""
        return self._settings

    # === Traversal and mutation ===

    def scan(self, root: StrPath, path_filter: FilterLike = None) -> list[str]:
        """List regular files under ``root``, sorted. See Scanner.scan()."""
        return self._scanner.scan(root, as_filter(path_filter))

    def remove_tree(
        self,
        root: StrPath,
        trace_levels: int = 0,
        path_filter: FilterLike = None,
    ) -> int:
        """Delete filter-accepted files and collapse emptied directories.

        See Remover.remove_tree().
        """
        return self._remover.remove_tree(root, trace_levels, as_filter(path_filter))

    def clean(self, root: StrPath, trace_levels: int = 0, path_filter: FilterLike = None) -> int:
        """Delete the contents of ``root`` but keep ``root``. See Remover.clean()."""
        return self._remover.clean(root, trace_levels, as_filter(path_filter))

    def copy_tree(self, source_root: StrPath, dest_root: StrPath) -> list[str]:
        """Copy every file under ``source_root`` into ``dest_root``."""
        return self._copier.copy_tree(source_root, dest_root)

    def ensure_dir(self, path: StrPath) -> None:
        """Create ``path`` and its missing ancestors."""
        self._creator.ensure_dir(path)

    def write_file(
        self,
        path: StrPath,
        content: str | bytes,
        encoding: Encoding = USE_DEFAULT,
    ) -> None:
        """Write a file, creating parent directories. None encoding means bytes."""
        self._writer.write_file(path, content, encoding)

    def read_file(self, path: StrPath, encoding: Encoding = USE_DEFAULT) -> str | bytes:
        """Read a file as text, or as bytes when ``encoding`` is None."""
        return self._writer.read_file(path, encoding)

    def find_up(self, start_dir: StrPath, filename: str, as_file: bool = False) -> str | None:
        """Find the nearest ancestor holding ``filename``. None when absent."""
        return self._finder.find_up(start_dir, filename, as_file)

    def rename(self, old_path: StrPath, new_path: StrPath) -> None:
        """Rename a file or directory.

        Raises:
            OSError: If the rename fails (missing source, invalid target).
        """
        self._channel.emit(
            LogLevel.INFO,
            "rename",
            "Renaming %s to %s",
            os.fspath(old_path),
            os.fspath(new_path),
        )
        os.rename(old_path, new_path)

    # === Queries ===

    def exists(self, segments: Sequence[StrPath] | StrPath) -> bool:
        """Check whether the path built from ``segments`` exists.

        Args:
            segments: Ordered path segments joined before the check. A
                single path is accepted as a one-segment sequence.
        """
        if isinstance(segments, (str, os.PathLike)):
            segments = [segments]
        return os.path.exists(join(segments))

    def is_directory(self, path: StrPath) -> bool:
        """Check if ``path`` is a directory (following symlinks)."""
        return os.path.isdir(path)

    def is_file(self, path: StrPath) -> bool:
        """Check if ``path`` is a regular file (following symlinks)."""
        return os.path.isfile(path)

    # === Tracing ===

    def emit(self, level: LogLevel | str, name: str, label: str, *arguments: object) -> bool:
        """Emit an event on the shared channel. See LogChannel.emit()."""
        return self._channel.emit(level, name, label, *arguments)

    def add_observer(self, observer: LogObserver) -> LogObserver:
        """Register a log observer on the shared channel."""
        return self._channel.add_observer(observer)

    def remove_observer(self, observer: LogObserver) -> bool:
        """Unregister a log observer from the shared channel."""
        return self._channel.remove_observer(observer)
