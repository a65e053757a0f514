"""Core configuration, paths and theming for flacman."""
