"""flacman - Pacman-style manager for a local music library."""

__version__ = "0.1.0"
