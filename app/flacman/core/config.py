"""flacman configuration and settings.

This module provides the configuration model and I/O functions for the
music library: where the library lives and how files are imported into it.

Configuration is stored in ~/.config/flacman/config.toml
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from flacman.core.paths import get_config_path, get_default_library_dir
from flacman.fs.transfer import TransferMode


class FlacmanConfig(BaseModel):
    """Configuration for the music library.

    Attributes:
        library_dir: Root directory of the music library.
        default_mode: Transfer mode used by ``update`` when none is given.
        overwrite: Replace existing library files on import.
        confirm: Ask for confirmation before modifying the library.
        audio_only: Only import files with a known audio extension.
    """

    model_config = ConfigDict(extra="forbid")

    library_dir: Annotated[
        Path,
        Field(
            default_factory=get_default_library_dir,
            description="Root directory of the music library",
        ),
    ]
    default_mode: Annotated[
        TransferMode,
        Field(description="Default transfer mode for imports"),
    ] = TransferMode.COPY
    overwrite: Annotated[
        bool,
        Field(description="Replace existing library files on import"),
    ] = False
    confirm: Annotated[
        bool,
        Field(description="Ask before modifying the library"),
    ] = True
    audio_only: Annotated[
        bool,
        Field(description="Only import known audio file types"),
    ] = True

    @field_validator("library_dir", mode="after")
    @classmethod
    def expand_library_dir(cls, v: Path) -> Path:
        """Expand a leading ``~`` in the library path."""
        return v.expanduser()


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> FlacmanConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated FlacmanConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return FlacmanConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> FlacmanConfig:
    """Load configuration, falling back to defaults if no file exists.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        return FlacmanConfig()


def save_config(config: FlacmanConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The FlacmanConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    data = config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: FlacmanConfig) -> dict[str, object]:
    """Convert FlacmanConfig to a dictionary for TOML serialization.

    Args:
        config: The FlacmanConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    return {
        "library_dir": str(config.library_dir),
        "default_mode": config.default_mode.value,
        "overwrite": config.overwrite,
        "confirm": config.confirm,
        "audio_only": config.audio_only,
    }
