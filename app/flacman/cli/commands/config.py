"""Config command implementation.

Shows, initializes and locates the flacman configuration file.
"""

from typing import Annotated

import typer

from flacman.cli.types import get_config_path, require_config
from flacman.core.config import ConfigError, FlacmanConfig, config_to_dict, save_config
from flacman.core.paths import get_config_path as get_default_config_path
from flacman.utils.formatting import console, create_table, print_error, print_success

app = typer.Typer(
    help="Show and initialize the configuration.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    config = require_config(ctx)
    path = get_config_path(ctx) or get_default_config_path()

    table = create_table("Configuration", "Key", "Value")
    for key, value in config_to_dict(config).items():
        table.add_row(key, f"[info]{value}[/info]")
    console.print(table)

    source = str(path) if path.exists() else "defaults (no config file)"
    console.print(f"\n[dim]Source: {source}[/dim]")


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a default configuration file."""
    path = get_config_path(ctx) or get_default_config_path()

    if path.exists() and not force:
        print_error(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(FlacmanConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the config file path."""
    typer.echo(str(get_config_path(ctx) or get_default_config_path()))
