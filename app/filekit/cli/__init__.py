"""CLI package for filekit.

This package contains the Typer application and all subcommands.
"""

from filekit.cli.main import app

__all__ = ["app"]
