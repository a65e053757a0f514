"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from flacman import __version__
from flacman.cli.commands import config, query, remove, update, validate
from flacman.utils.log import setup_logging

# Create main Typer app
app = typer.Typer(
    name="flacman",
    help="Pacman-style music library manager.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"flacman version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Use this config file instead of ~/.config/flacman/config.toml.",
        ),
    ] = None,
) -> None:
    """flacman - Pacman-style music library manager.

    Import music into a local library and query, validate or prune it.
    """
    setup_logging(verbose=verbose, quiet=quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="update")(update.update)
app.command(name="query")(query.query)
app.command(name="remove")(remove.remove)
app.command(name="validate")(validate.validate)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
