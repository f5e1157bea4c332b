"""Theme management for filekit console output.

Trace levels and CLI messages are colored from a TOML palette: the bundled
``filekit/data/theme.toml`` merged with the user's optional override file.
"""

import logging
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, field_validator
from rich.theme import Theme

from filekit.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)


class LevelColors(BaseModel):
    """Color palette for filekit output.

    All colors must be valid hex codes (#RRGGBB or #RGB).
    """

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    success: str = "#03b971"

    # One color per trace level
    info: str = "#0ec1c8"
    warn: str = "#f5b332"
    error: str = "#f53263"
    debug: str = "#7f8c8d"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Validate that all color values are valid hex codes."""
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        if not color.startswith("#"):
            msg = f"{info.field_name}: color must start with '#'"
            raise ValueError(msg)
        color_part = color[1:]
        if len(color_part) not in (3, 6):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        try:
            int(color_part, 16)
        except ValueError:
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg) from None
        return color


def get_bundled_theme_path() -> Path:
    """Get the bundled default theme path."""
    return resources.files("filekit.data").joinpath("theme.toml")  # type: ignore[return-value]


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Load the ``[colors]`` table from a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Dictionary of color name to hex value, or None if loading failed.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        logger.warning("Failed to parse TOML file %s: %s", path, e)
        return None
    except OSError as e:
        logger.warning("Failed to read theme file %s: %s", path, e)
        return None

    colors_raw: object = data.get("colors", {})
    if not isinstance(colors_raw, dict):
        logger.warning("Invalid 'colors' section in %s", path)
        return None
    return {
        key: value
        for key, value in cast(dict[str, object], colors_raw).items()
        if isinstance(value, str)
    }


def load_colors(user_path: Path | None = None) -> LevelColors:
    """Load the color palette with user override support.

    Args:
        user_path: Override file to merge on top of the bundled palette.
            Defaults to ~/.config/filekit/theme.toml.

    Returns:
        Validated LevelColors; defaults when the merged palette is invalid.
    """
    bundled = _load_toml_colors(Path(get_bundled_theme_path())) or {}
    user = _load_toml_colors(user_path or get_user_theme_path())
    merged = {**bundled, **user} if user else bundled

    try:
        return LevelColors(**merged)
    except ValueError as e:
        logger.warning("Theme validation failed, using defaults: %s", e)
        return LevelColors()


def get_rich_theme(colors: LevelColors | None = None) -> Theme:
    """Convert a color palette to a Rich Theme.

    Level styles are registered both bare (``info``) and namespaced
    (``level.info``) so sinks and CLI messages can share them.
    """
    if colors is None:
        colors = load_colors()

    styles: dict[str, str] = {
        "text": colors.text,
        "muted": colors.muted,
        "dim": colors.muted,
        "header": colors.header,
        "bold_header": f"bold {colors.header}",
        "border": colors.border,
        "success": colors.success,
        "info": colors.info,
        "warning": colors.warn,
        "error": f"bold {colors.error}",
        "level.info": colors.info,
        "level.warn": colors.warn,
        "level.error": f"bold {colors.error}",
        "level.debug": colors.debug,
    }
    return Theme(styles)


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, loading and caching it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
