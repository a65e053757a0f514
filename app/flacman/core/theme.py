"""Color theme for flacman's terminal output.

The bundled ``data/theme.toml`` provides the palette. Users can override
any subset of it in ``~/.config/flacman/theme.toml``::

    [colors]
    track = "#ffaa00"
"""

import logging
import string
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from flacman.core.paths import get_theme_path

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits)


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) for every style flacman prints with."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    # Message levels
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    # Library changes: imported, removed, linked files
    added: str = "#c1ff62"
    removed: str = "#f53263"
    linked: str = "#0e8ac8"

    track: str = "#69B9A1"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, v: object, info: Any) -> str:
        """Reject anything that is not a #RGB or #RRGGBB string."""
        name = info.field_name
        if not isinstance(v, str):
            raise ValueError(f"{name}: color must be a string")
        color = v.strip()
        if not color.startswith("#"):
            raise ValueError(f"{name}: color must start with '#'")
        digits = color[1:]
        if len(digits) not in (3, 6):
            raise ValueError(f"{name}: color must be #RGB or #RRGGBB format")
        if not _HEX_DIGITS.issuperset(digits):
            raise ValueError(f"{name}: invalid hex color '{color}'")
        return color


def get_bundled_theme_path() -> Path:
    """Location of the theme shipped inside the package."""
    return Path(str(resources.files("flacman.data").joinpath("theme.toml")))


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Read the ``[colors]`` table of a theme file.

    Non-string values are dropped. Returns None when the file is missing,
    unreadable or malformed.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return None

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return None
    return {key: value for key, value in colors.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Load the bundled palette with the user's overrides applied.

    An invalid override falls back to the built-in defaults as a whole,
    so a typo never leaves the CLI half-styled.
    """
    colors = _load_toml_colors(get_bundled_theme_path())
    if colors is None:
        logger.error("Bundled theme is missing, flacman may be installed incorrectly")
        colors = {}

    user_path = get_theme_path()
    overrides = _load_toml_colors(user_path)
    if overrides:
        logger.debug("Applying theme overrides from %s", user_path)
        colors.update(overrides)

    try:
        return ThemeColors(**colors)
    except ValidationError as e:
        logger.warning("Invalid theme, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme used by both consoles.

    Args:
        colors: Palette to use. Loaded with ``load_theme`` when omitted.

    Returns:
        Rich Theme with one style per color plus ``bold_header`` and ``dim``.
    """
    palette = colors or load_theme()
    styles = palette.model_dump()
    styles["error"] = f"bold {palette.error}"
    styles["track"] = f"bold {palette.track}"
    styles["bold_header"] = f"bold {palette.header}"
    styles["dim"] = palette.muted
    return Theme(styles)


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Return the Rich theme, building it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
