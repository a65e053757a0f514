"""CLI commands for flacman.

This package contains all subcommand implementations.
"""

from flacman.cli.commands import config, query, remove, update, validate

__all__ = ["config", "query", "remove", "update", "validate"]
