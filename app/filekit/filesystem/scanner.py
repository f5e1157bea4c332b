"""Recursive, filtered listing of regular files."""

import logging
import os

from filekit.core.paths import StrPath, resolve
from filekit.filesystem.base import TracedComponent
from filekit.filesystem.filters import PathFilter
from filekit.filesystem.models import EntryKind, FileSystemEntry
from filekit.tracing.models import LogLevel

logger = logging.getLogger(__name__)


class Scanner(TracedComponent):
    """Lists every regular file under a root.

    The filter is tested against every visited path, directories included:
    a rejected directory contributes nothing even if some of its children
    would pass. Symlinks are never followed nor listed. Entries that are
    neither files, directories nor symlinks are reported with an ``info``
    event and skipped.
    """

    event_name = "scanner"

    def scan(self, root: StrPath, path_filter: PathFilter | None = None) -> list[str]:
        """Recursively list the regular files under ``root``.

        A missing root is not an error: a ``warn`` event is emitted and an
        empty list returned.

        Args:
            root: File or directory to scan. Made absolute before scanning.
            path_filter: Optional predicate; None accepts everything.

        Returns:
            Absolute file paths, sorted lexicographically.

        Raises:
            OSError: If a directory cannot be listed (e.g. permission denied).
        """
        if FileSystemEntry.probe(root) is None:
            self._trace(LogLevel.WARN, "Directory not found: %s", os.fspath(root))
            return []
        return self._scan(resolve(root), path_filter)

    def _scan(self, path: str, path_filter: PathFilter | None) -> list[str]:
        if path_filter is not None and not path_filter(path):
            logger.debug("Filter rejected %s", path)
            return []

        entry = FileSystemEntry.probe(path)
        if entry is None:
            # Vanished between listing and probing
            return []

        files: list[str] = []
        if entry.kind == EntryKind.DIRECTORY:
            for name in os.listdir(path):
                files.extend(self._scan(os.path.join(path, name), path_filter))
        elif entry.kind == EntryKind.REGULAR:
            files.append(path)
        elif entry.kind == EntryKind.UNSUPPORTED:
            self._trace(LogLevel.INFO, "Unsupported file type: %s", path)

        return sorted(files)
