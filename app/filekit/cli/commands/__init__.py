"""CLI commands for filekit.

This package contains all subcommand implementations.
"""

from filekit.cli.commands import config, copy, find, mkdir, remove, scan

__all__ = ["config", "copy", "find", "mkdir", "remove", "scan"]
