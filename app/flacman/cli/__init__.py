"""CLI package for flacman.

This package contains the Typer application and all subcommands.
"""

from flacman.cli.main import app

__all__ = ["app"]
