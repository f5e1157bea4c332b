"""Tree copy built on Scanner and Writer."""

from filekit.core.paths import StrPath, basename, join, relative, resolve
from filekit.filesystem.scanner import Scanner
from filekit.filesystem.writer import Writer


class Copier:
    """Copies every regular file under a source into a destination.

    Files are copied as raw bytes through the writer, so destination
    directories are created on the way and existing files are overwritten.
    Symlinks and unsupported entries are not copied, since the scanner
    does not list them.

    Args:
        scanner: Enumerates the source files.
        writer: Reads the sources and writes the copies.
    """

    def __init__(self, scanner: Scanner, writer: Writer) -> None:
        self._scanner = scanner
        self._writer = writer

    def copy_tree(self, source_root: StrPath, dest_root: StrPath) -> list[str]:
        """Copy ``source_root`` into ``dest_root``.

        A single source file lands directly in ``dest_root`` under its own
        name; the files of a source directory keep their path relative to
        it.

        Args:
            source_root: File or directory to copy.
            dest_root: Destination directory.

        Returns:
            The written destination paths, in scan order.

        Raises:
            OSError: If a read or write fails. Files copied before the
                failure are left in place.
        """
        source = resolve(source_root)
        written: list[str] = []

        for file_path in self._scanner.scan(source):
            if file_path == source:
                target = join([dest_root, basename(file_path)])
            else:
                target = join([dest_root, relative(source, file_path)])
            self._writer.write_file(target, self._writer.read_file(file_path, None), None)
            written.append(resolve(target))

        return written
