"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from filekit import __version__
from filekit.cli.commands import config, copy, find, mkdir, remove, scan
from filekit.cli.types import build_filesystem
from filekit.utils.logging_setup import configure_logging

# Create main Typer app
app = typer.Typer(
    name="filekit",
    help="Scan, copy, clean and search directory trees.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"filekit version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress info traces.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file (default: ~/.config/filekit/config.toml).",
        ),
    ] = None,
) -> None:
    """filekit - synchronous filesystem toolkit.

    Every operation reports its progress as trace lines which can be
    silenced with --quiet.
    """
    configure_logging(verbose)
    settings, fs = build_filesystem(config_path, quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path
    ctx.obj["settings"] = settings
    ctx.obj["fs"] = fs


# Register commands
app.command(name="scan")(scan.scan)
app.command(name="rm")(remove.remove)
app.command(name="cp")(copy.copy)
app.command(name="mkdir")(mkdir.mkdir)
app.command(name="find-up")(find.find_up)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
