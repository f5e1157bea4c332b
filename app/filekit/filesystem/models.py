"""Filesystem entry models.

Entries are probed on demand with ``os.lstat`` and never cached, so every
operation sees the current state of the tree. Symlinks are classified as
such and never followed.
"""

import os
import stat
from dataclasses import dataclass
from enum import Enum

from filekit.core.paths import StrPath


class EntryKind(str, Enum):
    """Kind of a filesystem entry.

    Attributes:
        REGULAR: Regular file.
        DIRECTORY: Directory.
        SYMLINK: Symbolic link, live or dead.
        UNSUPPORTED: Anything else (FIFO, socket, device).
    """

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True, slots=True)
class FileSystemEntry:
    """A path together with its kind at the time it was probed.

    Attributes:
        path: Path as given to probe().
        kind: Kind of the entry.
    """

    path: str
    kind: EntryKind

    @classmethod
    def probe(cls, path: StrPath) -> "FileSystemEntry | None":
        """Classify a path without following symlinks.

        Args:
            path: Path to classify.

        Returns:
            The entry, or None if nothing exists at the path.

        Raises:
            OSError: For failures other than a missing path (e.g. permission).
        """
        path_str = os.fspath(path)
        try:
            mode = os.lstat(path_str).st_mode
        except (FileNotFoundError, NotADirectoryError):
            return None
        return cls(path=path_str, kind=_kind_from_mode(mode))

    @property
    def is_directory(self) -> bool:
        """Check if the entry is a directory."""
        return self.kind == EntryKind.DIRECTORY

    @property
    def is_regular(self) -> bool:
        """Check if the entry is a regular file."""
        return self.kind == EntryKind.REGULAR

    @property
    def is_symlink(self) -> bool:
        """Check if the entry is a symbolic link."""
        return self.kind == EntryKind.SYMLINK


def _kind_from_mode(mode: int) -> EntryKind:
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.REGULAR
    return EntryKind.UNSUPPORTED
