"""Query command implementation.

Lists and searches tracks in the local music library.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from flacman.cli.types import OutputFormat, display_path, require_config
from flacman.fs.errors import FsError
from flacman.library.catalog import LibraryCatalog
from flacman.utils.formatting import console, create_table, print_error, print_info


def query(
    ctx: typer.Context,
    terms: Annotated[
        list[str] | None,
        typer.Argument(help="Search terms; all must match. Lists everything if omitted."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List or search tracks in the local library."""
    config = require_config(ctx)
    catalog = LibraryCatalog(config.library_dir)

    try:
        tracks = catalog.search(terms) if terms else catalog.tracks()
    except FsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        _print_json(tracks, config.library_dir)
        return

    if not tracks:
        print_info("No tracks found.")
        return

    _print_table(tracks, config.library_dir)
    console.print(f"\n[dim]Found {len(tracks)} track(s) in {config.library_dir}[/dim]")


# === Private helper functions ===


def _print_table(tracks: list[Path], library_dir: Path) -> None:
    """Display tracks as a Rich table."""
    table = create_table("Library Tracks", "Track", "Format")
    for track in tracks:
        table.add_row(
            f"[track]{display_path(track, library_dir)}[/track]",
            track.suffix.lstrip(".").lower(),
        )
    console.print(table)


def _print_json(tracks: list[Path], library_dir: Path) -> None:
    """Display tracks as JSON."""
    data = [
        {
            "path": str(track),
            "relative_path": display_path(track, library_dir),
            "format": track.suffix.lstrip(".").lower(),
        }
        for track in tracks
    ]
    console.print_json(json.dumps(data))
