"""Bundled data files for flacman."""
