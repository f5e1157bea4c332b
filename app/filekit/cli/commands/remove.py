"""Remove command implementation.

Deletes the files of a tree, optionally filtered, collapsing directories
that end up empty.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from filekit.cli.types import build_filter, get_filesystem, get_settings
from filekit.utils.formatting import print_error, print_info, print_success


def remove(
    ctx: typer.Context,
    root: Annotated[Path, typer.Argument(help="Directory to remove.")],
    match: Annotated[
        str | None,
        typer.Option("--match", "-m", help="Only remove files whose path matches this regex."),
    ] = None,
    globs: Annotated[
        list[str] | None,
        typer.Option("--glob", "-g", help="Only remove files matching this glob (repeatable)."),
    ] = None,
    trace_levels: Annotated[
        int | None,
        typer.Option(
            "--trace-levels",
            "-t",
            min=0,
            help="Directory levels that report progress (default from settings).",
        ),
    ] = None,
    keep_root: Annotated[
        bool,
        typer.Option("--keep-root", help="Empty ROOT but do not remove it."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Remove files under ROOT and the directories left empty."""
    fs = get_filesystem(ctx)
    settings = get_settings(ctx)

    if not fs.exists(root):
        print_info(f"Nothing to remove: {escape(str(root))} does not exist.")
        return
    if root.is_symlink() or not fs.is_directory(root):
        print_info(f"Nothing to remove: {escape(str(root))} is not a directory.")
        return

    if not yes:
        confirmed = typer.confirm(f"Remove files under {root}?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    path_filter = build_filter(match, globs, settings.ignore)
    levels = settings.trace_levels if trace_levels is None else trace_levels

    try:
        if keep_root:
            count = fs.clean(root, levels, path_filter)
        else:
            count = fs.remove_tree(root, levels, path_filter)
    except OSError as e:
        print_error(f"Removal failed: {escape(str(e))}")
        raise typer.Exit(code=1) from None

    print_success(f"{count} file(s) removed.")
