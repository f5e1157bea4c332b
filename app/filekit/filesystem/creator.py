"""Recursive, idempotent directory creation."""

import os

from filekit.core.paths import StrPath, is_root, parent, resolve
from filekit.filesystem.base import TracedComponent
from filekit.tracing.models import LogLevel


class DirectoryCreator(TracedComponent):
    """Creates a directory and any missing ancestors, one level at a time.

    Each directory actually created is reported with an ``info`` event.
    A non-directory already sitting on the path is not worked around:
    the error from ``os.mkdir`` propagates.
    """

    event_name = "mkdir"

    def ensure_dir(self, path: StrPath) -> None:
        """Make sure ``path`` exists as a directory.

        Args:
            path: Directory to create.

        Raises:
            FileExistsError: If a non-directory exists at ``path``.
            NotADirectoryError: If an ancestor is a non-directory.
            OSError: For any other creation failure.
        """
        target = resolve(path)
        if os.path.isdir(target):
            return

        if not is_root(target):
            self.ensure_dir(parent(target))
        os.mkdir(target)
        self._trace(LogLevel.INFO, "Directory %s created", target)
