"""File reading and writing with automatic parent creation."""

from enum import Enum

from filekit.core.paths import StrPath, parent, resolve
from filekit.filesystem.base import TracedComponent
from filekit.filesystem.creator import DirectoryCreator
from filekit.tracing.channel import LogChannel
from filekit.tracing.models import LogLevel

DEFAULT_ENCODING = "utf-8"


class _Default(Enum):
    TOKEN = 0


# Marker for "use the writer's configured encoding"
USE_DEFAULT = _Default.TOKEN

Encoding = str | None | _Default


class Writer(TracedComponent):
    """Reads and writes whole files.

    Passing ``encoding=None`` switches both directions to raw bytes, which
    is what binary-safe copying relies on.

    Args:
        channel: Channel to trace to.
        creator: Creates the parent directories of written files.
        encoding: Default text encoding.
    """

    event_name = "writer"

    def __init__(
        self,
        channel: LogChannel,
        creator: DirectoryCreator,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        super().__init__(channel)
        self._creator = creator
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        """Default text encoding."""
        return self._encoding

    def read_file(self, path: StrPath, encoding: Encoding = USE_DEFAULT) -> str | bytes:
        """Return the content of a file.

        Args:
            path: File to read.
            encoding: Text encoding, None for raw bytes. Defaults to the
                writer's encoding.

        Returns:
            Decoded text, or bytes when ``encoding`` is None.
        """
        if encoding is USE_DEFAULT:
            encoding = self._encoding
        if encoding is None:
            with open(path, "rb") as f:
                return f.read()
        with open(path, encoding=encoding) as f:
            return f.read()

    def write_file(
        self,
        path: StrPath,
        content: str | bytes,
        encoding: Encoding = USE_DEFAULT,
    ) -> None:
        """Write a file, creating its missing parent directories first.

        An existing file is overwritten.

        Args:
            path: Destination file.
            content: Text, or bytes (always written verbatim).
            encoding: Text encoding; None requires bytes content. Defaults
                to the writer's encoding.

        Raises:
            TypeError: If text content is given with ``encoding=None``.
            OSError: If a directory or the file cannot be written.
        """
        if encoding is USE_DEFAULT:
            encoding = self._encoding
        if isinstance(content, bytes):
            data = content
        elif encoding is None:
            msg = "Text content requires an encoding"
            raise TypeError(msg)
        else:
            data = content.encode(encoding)

        target = resolve(path)
        self._creator.ensure_dir(parent(target))
        self._trace(LogLevel.INFO, "Writing %s bytes to file %s", len(data), target)
        with open(target, "wb") as f:
            f.write(data)
