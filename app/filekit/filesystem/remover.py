"""Recursive, filtered deletion with empty-directory collapse."""

import logging
import os

from filekit.core.paths import StrPath, resolve
from filekit.filesystem.base import TracedComponent
from filekit.filesystem.filters import PathFilter
from filekit.filesystem.models import EntryKind, FileSystemEntry
from filekit.filesystem.scanner import Scanner
from filekit.tracing.channel import LogChannel
from filekit.tracing.models import LogLevel

logger = logging.getLogger(__name__)


class Remover(TracedComponent):
    """Deletes the filter-accepted files of a tree.

    After its children are processed, a directory is removed once a scan
    finds no regular file left in it and it has no remaining entries. A
    directory that still holds filter-rejected files is therefore kept,
    even when every accepted file inside it was deleted.

    Only regular files and symlinks are counted; removed directories are
    not.

    Args:
        channel: Channel to trace to.
        scanner: Scanner used for the emptiness check.
    """

    event_name = "remover"

    def __init__(self, channel: LogChannel, scanner: Scanner) -> None:
        super().__init__(channel)
        self._scanner = scanner

    def remove_tree(
        self,
        root: StrPath,
        trace_levels: int = 0,
        path_filter: PathFilter | None = None,
    ) -> int:
        """Delete the contents of ``root`` and ``root`` itself once empty.

        A root that is not a directory is left alone and counts 0.

        Args:
            root: Directory to delete.
            trace_levels: Number of directory levels, starting at ``root``,
                that report their progress with ``info`` events.
            path_filter: Optional predicate; a rejected path and its subtree
                are left untouched.

        Returns:
            Number of files and symlinks deleted.

        Raises:
            OSError: If a deletion fails. Files already deleted stay deleted.
        """
        return self._remove_root(root, trace_levels, path_filter, keep_root=False)

    def clean(
        self,
        root: StrPath,
        trace_levels: int = 0,
        path_filter: PathFilter | None = None,
    ) -> int:
        """Delete the contents of ``root`` like remove_tree() but keep ``root``.

        Returns:
            Number of files and symlinks deleted.
        """
        return self._remove_root(root, trace_levels, path_filter, keep_root=True)

    def _remove_root(
        self,
        root: StrPath,
        trace_levels: int,
        path_filter: PathFilter | None,
        *,
        keep_root: bool,
    ) -> int:
        path = resolve(root)
        entry = FileSystemEntry.probe(path)
        if entry is None or not entry.is_directory:
            logger.debug("%s is not a directory, nothing to remove", path)
            return 0
        return self._remove(path, trace_levels, path_filter, keep_root=keep_root)

    def _remove(
        self,
        path: str,
        trace_levels: int,
        path_filter: PathFilter | None,
        *,
        keep_root: bool = False,
    ) -> int:
        if path_filter is not None and not path_filter(path):
            logger.debug("Filter rejected %s, leaving it in place", path)
            return 0

        entry = FileSystemEntry.probe(path)
        if entry is None:
            logger.debug("Nothing to remove at %s", path)
            return 0

        if entry.kind in (EntryKind.REGULAR, EntryKind.SYMLINK):
            os.unlink(path)
            return 1

        if entry.kind == EntryKind.UNSUPPORTED:
            self._trace(LogLevel.INFO, "Unsupported file type: %s", path)
            return 0

        if trace_levels > 0:
            self._trace(LogLevel.INFO, "Removing files in %s", path)

        count = 0
        for name in os.listdir(path):
            count += self._remove(os.path.join(path, name), trace_levels - 1, path_filter)

        if not keep_root and self._is_empty(path):
            os.rmdir(path)

        if trace_levels > 0:
            self._trace(LogLevel.INFO, "%s file(s) removed", count)
        return count

    def _is_empty(self, directory: str) -> bool:
        # Unsupported entries left here were already traced once by _remove
        with os.scandir(directory) as entries:
            if next(entries, None) is not None:
                return False
        return not self._scanner.scan(directory)
