"""Settings commands.

Shows the effective settings and writes a settings file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from filekit.cli.types import get_settings
from filekit.core.paths import get_settings_path
from filekit.core.settings import Settings, SettingsError, save_settings
from filekit.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize settings.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective settings."""
    settings = get_settings(ctx)
    path = _settings_path(ctx)

    table = Table(
        title="Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", style="bold")
    table.add_column("Value")

    for key, value in settings.model_dump().items():
        table.add_row(key, escape(str(value)))

    console.print(table)
    source = str(path) if path.exists() else f"{path} (not present, defaults)"
    console.print(f"\n[dim]Source: {escape(source)}[/dim]")


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file holding the default values."""
    path = _settings_path(ctx)

    if path.exists() and not force:
        print_info(f"Settings file already exists: {escape(str(path))} (use --force)")
        raise typer.Exit(code=0)

    try:
        written = save_settings(Settings(), path, include_defaults=True)
    except SettingsError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from None

    print_success(f"Settings written to {escape(str(written))}")


def _settings_path(ctx: typer.Context) -> Path:
    """Return the --config path given to the main command, or the default."""
    configured: Path | None = ctx.obj.get("config_path") if ctx.obj else None
    return configured or get_settings_path()
