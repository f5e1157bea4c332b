"""Shared CLI helpers: context access and filter construction."""

from pathlib import Path

import typer
from rich.markup import escape

from filekit.core.settings import Settings, SettingsError, load_settings
from filekit.filesystem.filters import AllOf, FilesOnly, GlobFilter, PathFilter, PatternFilter
from filekit.filesystem.toolkit import FileSystem
from filekit.tracing.channel import drop_levels
from filekit.tracing.models import LogLevel
from filekit.utils.formatting import print_error


def build_filesystem(settings_path: Path | None, quiet: bool) -> tuple[Settings, FileSystem]:
    """Load settings and build the FileSystem used by every command.

    ``--quiet`` is implemented as an observer that drops info and debug
    events, so warnings and errors still reach the console.

    Raises:
        typer.Exit: If the settings file is invalid.
    """
    try:
        settings = load_settings(settings_path)
    except SettingsError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from None

    fs = FileSystem(settings=settings)
    if quiet:
        fs.add_observer(drop_levels(LogLevel.INFO, LogLevel.DEBUG))
    return settings, fs


def get_filesystem(ctx: typer.Context) -> FileSystem:
    """Return the FileSystem created by the main callback."""
    return ctx.obj["fs"]


def get_settings(ctx: typer.Context) -> Settings:
    """Return the Settings loaded by the main callback."""
    return ctx.obj["settings"]


def build_filter(
    match: str | None,
    globs: list[str] | None,
    ignore: list[str] | None = None,
) -> PathFilter | None:
    """Combine CLI filter options into one predicate.

    ``match`` and ``globs`` select files only, so directories are still
    descended. ``ignore`` applies to every path and prunes whole
    directories.

    Args:
        match: Regular expression a file path must contain.
        globs: Glob patterns of which a file must match one.
        ignore: Glob patterns no path may match.

    Returns:
        The combined filter, or None when no option was given.
    """
    filters: list[PathFilter] = []
    if match:
        filters.append(FilesOnly(PatternFilter(match)))
    if globs:
        filters.append(FilesOnly(GlobFilter(globs)))
    if ignore:
        filters.append(GlobFilter(ignore, exclude=True))

    if not filters:
        return None
    if len(filters) == 1:
        return filters[0]
    return AllOf(*filters)
