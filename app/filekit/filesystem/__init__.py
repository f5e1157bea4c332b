"""Filesystem traversal and mutation components.

This module provides recursive scanning, filtered removal, directory
creation, file reading/writing, tree copying and ancestor lookup, plus the
FileSystem facade wiring them to one trace channel.
"""

from filekit.filesystem.copier import Copier
from filekit.filesystem.creator import DirectoryCreator
from filekit.filesystem.filters import (
    AllOf,
    FilesOnly,
    GlobFilter,
    PathFilter,
    PatternFilter,
    as_filter,
)
from filekit.filesystem.finder import AncestorFinder
from filekit.filesystem.models import EntryKind, FileSystemEntry
from filekit.filesystem.remover import Remover
from filekit.filesystem.scanner import Scanner
from filekit.filesystem.toolkit import FileSystem, build_channel
from filekit.filesystem.writer import Writer

__all__ = [
    "AllOf",
    "AncestorFinder",
    "Copier",
    "DirectoryCreator",
    "EntryKind",
    "FilesOnly",
    "FileSystem",
    "FileSystemEntry",
    "GlobFilter",
    "PathFilter",
    "PatternFilter",
    "Remover",
    "Scanner",
    "Writer",
    "as_filter",
    "build_channel",
]
