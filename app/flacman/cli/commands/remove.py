"""Remove command implementation.

Removes tracks from the local music library by exact file name.
"""

from pathlib import Path
from typing import Annotated

import typer

from flacman.cli.display import create_remove_results_table, print_results_summary
from flacman.cli.types import display_path, require_config
from flacman.fs.errors import FsError
from flacman.library.catalog import LibraryCatalog
from flacman.utils.formatting import console, create_table, print_error, print_info, print_warning


def remove(
    ctx: typer.Context,
    names: Annotated[
        list[str],
        typer.Argument(help="File names of the tracks to remove (e.g. song.flac)."),
    ],
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be removed."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Remove tracks from the library."""
    config = require_config(ctx)
    catalog = LibraryCatalog(config.library_dir)

    targets: list[Path] = []
    try:
        for name in names:
            matches = catalog.find(name)
            if not matches:
                print_warning(f"No library file named {name}")
            targets.extend(matches)
    except FsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    # A name given twice must not fail on its second removal
    targets = list(dict.fromkeys(targets))

    if not targets:
        print_info("Nothing to remove.")
        raise typer.Exit(code=1)

    label = "Planned Removals (dry-run)" if dry_run else "Planned Removals"
    table = create_table(label, "Track")
    for path in targets:
        table.add_row(f"[removed]{display_path(path, config.library_dir)}[/removed]")
    console.print(table)

    # Confirm unless --yes, --dry-run or confirm = false in config
    if not dry_run and not yes and config.confirm:
        confirmed = typer.confirm(
            f"\nProceed with removing {len(targets)} file(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    results = catalog.remove(targets, dry_run=dry_run)

    console.print(create_remove_results_table(results, config.library_dir))
    print_results_summary(results, "file(s)")

    if any(not r.success for r in results):
        raise typer.Exit(code=1)
