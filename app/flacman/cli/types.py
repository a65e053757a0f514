"""Shared types and utilities for CLI commands.

This module provides helpers used across multiple CLI command modules
to avoid code duplication.
"""

from enum import Enum
from pathlib import Path

import typer

from flacman.core.config import ConfigError, FlacmanConfig, load_config_or_default
from flacman.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


def get_config_path(ctx: typer.Context) -> Path | None:
    """Get the config path given with the global --config option, if any."""
    obj = ctx.obj or {}
    return obj.get("config_path")


def require_config(ctx: typer.Context) -> FlacmanConfig:
    """Load config (or defaults) or exit with a helpful error message.

    Args:
        ctx: Typer context carrying the global options.

    Returns:
        Loaded and validated FlacmanConfig.

    Raises:
        typer.Exit: If the config file exists but cannot be loaded.
    """
    try:
        return load_config_or_default(get_config_path(ctx))
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e


def display_path(path: Path, base: Path) -> str:
    """Format a path relative to ``base`` when it lies inside it."""
    try:
        return str(path.relative_to(base))
    except ValueError:
        return str(path)
