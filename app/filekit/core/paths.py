"""Path primitives and XDG-compliant locations for filekit.

The first half of this module wraps the platform path functions that every
filesystem component relies on (joining, parent and root detection,
relative paths). All of them work on plain strings and accept any
``os.PathLike``.

The second half provides standardized paths following the XDG Base
Directory Specification for configuration storage:
- Config: ~/.config/filekit/
"""

import os
from collections.abc import Iterable
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "filekit"

StrPath = str | os.PathLike[str]


def join(segments: Iterable[StrPath]) -> str:
    """Join an ordered sequence of path segments into one path.

    Args:
        segments: Path segments, first to last.

    Returns:
        The joined path string.

    Raises:
        ValueError: If no segments are given.
    """
    parts = [os.fspath(s) for s in segments]
    if not parts:
        msg = "At least one path segment is required"
        raise ValueError(msg)
    return os.path.join(*parts)


def parent(path: StrPath) -> str:
    """Return the parent directory of a path."""
    return os.path.dirname(os.fspath(path))


def basename(path: StrPath) -> str:
    """Return the final component of a path."""
    return os.path.basename(os.fspath(path))


def relative(start: StrPath, path: StrPath) -> str:
    """Return ``path`` relative to ``start``."""
    return os.path.relpath(os.fspath(path), os.fspath(start))


def resolve(path: StrPath) -> str:
    """Return the absolute, normalized form of a path.

    Symlinks are not resolved.
    """
    return os.path.abspath(os.fspath(path))


def is_root(path: StrPath) -> bool:
    """Check whether an absolute path is its own parent (``/`` or a drive root)."""
    path_str = os.fspath(path)
    return os.path.dirname(path_str) == path_str


def root_of(path: StrPath) -> str:
    """Return the terminal ancestor of a path once resolved.

    Args:
        path: Any path; it is made absolute first.

    Returns:
        The filesystem root containing the path.
    """
    current = resolve(path)
    while not is_root(current):
        current = os.path.dirname(current)
    return current


# =============================================================================
# XDG locations
# =============================================================================


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/filekit/ (or XDG_CONFIG_HOME/filekit/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_settings_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/filekit/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/filekit/theme.toml.
    """
    return get_config_dir() / "theme.toml"
