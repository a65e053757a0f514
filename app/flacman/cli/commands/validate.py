"""Validate command implementation.

Walks the whole library and reports every part of it that cannot be read.
"""

import typer

from flacman.cli.types import display_path, require_config
from flacman.fs.errors import FsError
from flacman.library.catalog import LibraryCatalog
from flacman.utils.formatting import console, create_table, print_error, print_success


def validate(ctx: typer.Context) -> None:
    """Check that the whole local library is readable."""
    config = require_config(ctx)
    catalog = LibraryCatalog(config.library_dir)

    try:
        errors = catalog.validate()
    except FsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not errors:
        print_success(f"Library is valid: {config.library_dir}")
        return

    table = create_table("Unreadable Library Entries", "Path", "Reason")
    for error in errors:
        reason = error.cause.strerror if error.cause and error.cause.strerror else str(error)
        path = display_path(error.path, config.library_dir) if error.path else "?"
        table.add_row(path, f"[error]{reason}[/error]")
    console.print(table)

    print_error(f"{len(errors)} unreadable entr{'y' if len(errors) == 1 else 'ies'} found.")
    raise typer.Exit(code=1)
