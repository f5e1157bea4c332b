"""Mkdir command implementation."""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from filekit.cli.types import get_filesystem
from filekit.utils.formatting import print_error


def mkdir(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Directory to create.")],
) -> None:
    """Create PATH and any missing parent directories."""
    fs = get_filesystem(ctx)

    try:
        fs.ensure_dir(path)
    except OSError as e:
        print_error(f"Cannot create {escape(str(path))}: {escape(str(e))}")
        raise typer.Exit(code=1) from None
