"""Scan command implementation.

Lists the regular files under a directory, optionally filtered.
"""

import json
import os
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from filekit.cli.types import build_filter, get_filesystem, get_settings
from filekit.core.paths import relative, resolve
from filekit.utils.formatting import console, format_size, print_error, print_info


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    PLAIN = "plain"


def scan(
    ctx: typer.Context,
    root: Annotated[Path, typer.Argument(help="File or directory to scan.")],
    match: Annotated[
        str | None,
        typer.Option("--match", "-m", help="Only files whose path matches this regex."),
    ] = None,
    globs: Annotated[
        list[str] | None,
        typer.Option("--glob", "-g", help="Only files matching this glob (repeatable)."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List regular files under ROOT, sorted by path."""
    fs = get_filesystem(ctx)
    settings = get_settings(ctx)

    try:
        files = fs.scan(root, build_filter(match, globs, settings.ignore))
    except OSError as e:
        print_error(f"Scan failed: {escape(str(e))}")
        raise typer.Exit(code=1) from None

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(files))
        return

    if output_format == OutputFormat.PLAIN:
        for path in files:
            typer.echo(path)
        return

    if not files:
        print_info("No files found.")
        return

    _print_table(files, resolve(root))


def _print_table(files: list[str], root: str) -> None:
    """Display scanned files as a Rich table."""
    table = Table(
        title=f"Files in {escape(root)}",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", no_wrap=True)
    table.add_column("Size", style="info", justify="right")

    total = 0
    for path in files:
        size = _size_of(path)
        total += size or 0
        shown = relative(root, path) if path != root else os.path.basename(path)
        table.add_row(escape(shown), format_size(size))

    console.print(table)
    console.print(f"\n[dim]{len(files)} file(s), {format_size(total)} total[/dim]")


def _size_of(path: str) -> int | None:
    try:
        return os.path.getsize(path)
    except OSError:
        return None
