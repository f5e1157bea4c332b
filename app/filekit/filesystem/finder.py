"""Upward search for the nearest directory holding a given child."""

import logging
import os

from filekit.core.paths import StrPath, is_root, join, parent, resolve

logger = logging.getLogger(__name__)


class AncestorFinder:
    """Walks from a directory towards the filesystem root.

    The walk stops at the root of the resolved start path. The root itself
    is checked once; a miss there means "not found", never a guessed path.
    """

    def find_up(self, start_dir: StrPath, filename: str, as_file: bool = False) -> str | None:
        """Find the nearest ancestor of ``start_dir`` containing ``filename``.

        ``start_dir`` itself counts as an ancestor.

        Args:
            start_dir: Directory to start from; resolved to an absolute path.
            filename: Name of the child to look for (file or directory).
            as_file: Return the path of the child instead of its directory.

        Returns:
            The matching directory (or child path), or None if not found.
        """
        current = resolve(start_dir)
        while True:
            candidate = join([current, filename])
            if os.path.lexists(candidate):
                return candidate if as_file else current
            if is_root(current):
                logger.debug("Reached %s without finding %s", current, filename)
                return None
            current = parent(current)
