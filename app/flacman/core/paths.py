"""XDG-compliant path management for flacman.

This module provides standardized paths following the XDG Base Directory
Specification for configuration storage, plus the default library location.

XDG defaults:
- Config: ~/.config/flacman/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "flacman"


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
        Path to ~/.config/flacman/ (or XDG_CONFIG_HOME/flacman/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the default config file path.

    Returns:
        Path to ~/.config/flacman/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_theme_path() -> Path:
    """Get the user theme override file path.

    Returns:
        Path to ~/.config/flacman/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_default_library_dir() -> Path:
    """Get the default music library directory.

    Returns:
        Path to ~/Music/flacman.
    """
    return Path.home() / "Music" / APP_NAME


def ensure_config_dir() -> Path:
    """Create the configuration directory if it doesn't exist.

    Returns:
        Path to the configuration directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    path = get_config_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create config directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create config directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path
