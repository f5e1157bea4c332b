"""User settings for filekit.

Settings are stored in ~/.config/filekit/config.toml. A missing file is not
an error: every field has a default.
"""

import codecs
import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from filekit.core.paths import get_settings_path

logger = logging.getLogger(__name__)

SinkKind = Literal["console", "logging"]


class Settings(BaseModel):
    """Runtime configuration of a FileSystem instance and the CLI.

    Attributes:
        encoding: Default text encoding for read_file/write_file.
        channel_name: Default event name of the log channel.
        sink: Where rendered trace lines go ("console" or "logging").
        trace_levels: Default number of directory levels traced by rm.
        ignore: Glob patterns excluded from CLI scan and rm.
    """

    model_config = ConfigDict(extra="forbid")

    encoding: Annotated[str, Field(description="Default text encoding")] = "utf-8"
    channel_name: Annotated[
        str,
        Field(min_length=1, description="Default log event name"),
    ] = "filekit"
    sink: Annotated[SinkKind, Field(description="Trace output sink")] = "console"
    trace_levels: Annotated[
        int,
        Field(ge=0, description="Directory levels traced during removal"),
    ] = 0
    ignore: Annotated[
        list[str],
        Field(default_factory=list, description="Glob patterns skipped by the CLI"),
    ]

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings the codec registry does not know."""
        try:
            codecs.lookup(v)
        except LookupError:
            msg = f"Unknown text encoding: {v}"
            raise ValueError(msg) from None
        return v


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file is not valid TOML."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Settings file. If None, uses the default settings path.

    Returns:
        Validated Settings; defaults if the file does not exist.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or its content is invalid.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return Settings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def save_settings(
    settings: Settings,
    path: Path | None = None,
    *,
    include_defaults: bool = False,
) -> Path:
    """Save settings to a TOML file.

    The file is written to a temporary sibling first and moved into place
    with os.replace().

    Args:
        settings: Settings to save.
        path: Destination. If None, uses the default settings path.
        include_defaults: Also write fields that still hold their default.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    data = _settings_to_dict(settings, include_defaults=include_defaults)

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def _settings_to_dict(settings: Settings, *, include_defaults: bool) -> dict[str, object]:
    """Convert Settings to a dictionary for TOML serialization."""
    return settings.model_dump(exclude_defaults=not include_defaults)
