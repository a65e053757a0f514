"""Update command implementation.

Imports music files into the library by copying, moving, symlinking or
hardlinking them.
"""

from pathlib import Path
from typing import Annotated

import typer

from flacman.cli.display import (
    create_import_plan_table,
    create_import_results_table,
    print_results_summary,
)
from flacman.cli.types import require_config
from flacman.fs.transfer import TransferMode
from flacman.library.importer import LibraryImporter
from flacman.utils.formatting import console, print_info, print_warning


def update(
    ctx: typer.Context,
    sources: Annotated[
        list[Path],
        typer.Argument(help="Files or directories to import into the library."),
    ],
    mode: Annotated[
        TransferMode | None,
        typer.Option(
            "--mode",
            "-m",
            help="Transfer mode (default from config).",
            case_sensitive=False,
        ),
    ] = None,
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-r", help="Import directories recursively."),
    ] = False,
    overwrite: Annotated[
        bool,
        typer.Option("--overwrite", help="Replace existing files in the library."),
    ] = False,
    all_files: Annotated[
        bool,
        typer.Option("--all-files", help="Import non-audio files as well."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be imported."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Import music files into the library."""
    config = require_config(ctx)
    effective_mode = mode or config.default_mode

    importer = LibraryImporter(
        config.library_dir,
        effective_mode,
        overwrite=overwrite or config.overwrite,
        recursive=recursive,
        audio_only=config.audio_only and not all_files,
        dry_run=dry_run,
    )

    planned, rejected = importer.plan(sources)
    for result in rejected:
        print_warning(f"Skipping {result.source}: {result.error}")

    if not planned:
        print_info("No files to import.")
        raise typer.Exit(code=1 if rejected else 0)

    console.print(
        create_import_plan_table(planned, effective_mode, config.library_dir, dry_run=dry_run)
    )

    # Confirm unless --yes, --dry-run or confirm = false in config
    if not dry_run and not yes and config.confirm:
        verb = effective_mode.value
        confirmed = typer.confirm(
            f"\nProceed with {verb} of {len(planned)} file(s) into {config.library_dir}?",
            default=True,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    results = importer.execute(planned)

    console.print(create_import_results_table(results, config.library_dir))
    print_results_summary(results, "file(s)")

    if rejected or any(not r.success for r in results):
        raise typer.Exit(code=1)
