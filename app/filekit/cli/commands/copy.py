"""Copy command implementation."""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from filekit.cli.types import get_filesystem
from filekit.utils.formatting import print_error, print_success, print_warning


def copy(
    ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="File or directory to copy.")],
    dest: Annotated[Path, typer.Argument(help="Destination directory.")],
) -> None:
    """Copy every file under SOURCE into DEST, keeping relative paths."""
    fs = get_filesystem(ctx)

    if not fs.exists(source):
        print_error(f"Source does not exist: {escape(str(source))}")
        raise typer.Exit(code=1)

    try:
        written = fs.copy_tree(source, dest)
    except OSError as e:
        print_error(f"Copy failed: {escape(str(e))}")
        raise typer.Exit(code=1) from None

    if not written:
        print_warning("No files to copy.")
        return
    print_success(f"{len(written)} file(s) copied to {escape(str(dest))}.")
