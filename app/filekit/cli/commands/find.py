"""Find-up command implementation."""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from filekit.cli.types import get_filesystem
from filekit.utils.formatting import print_error


def find_up(
    ctx: typer.Context,
    filename: Annotated[str, typer.Argument(help="Name of the file or directory to find.")],
    start: Annotated[
        Path,
        typer.Option("--from", help="Directory to start from."),
    ] = Path("."),
    as_file: Annotated[
        bool,
        typer.Option("--file", help="Print the path of FILENAME instead of its directory."),
    ] = False,
) -> None:
    """Print the nearest ancestor directory containing FILENAME."""
    fs = get_filesystem(ctx)

    found = fs.find_up(start, filename, as_file)
    if found is None:
        print_error(f"{escape(filename)} not found above {escape(str(start.resolve()))}")
        raise typer.Exit(code=1)

    typer.echo(found)
