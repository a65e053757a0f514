"""Shared Rich display functions for planned operations and results.

Provides reusable table builders and summary printers for the update
and remove commands.
"""

from pathlib import Path

from rich.table import Table

from flacman.cli.types import display_path
from flacman.fs.transfer import TransferMode
from flacman.library.catalog import RemoveResult
from flacman.library.importer import ImportResult, PlannedImport
from flacman.utils.formatting import console, create_table, print_info, print_success

_MODE_STYLES: dict[TransferMode, str] = {
    TransferMode.COPY: "added",
    TransferMode.MOVE: "warning",
    TransferMode.SYMLINK: "linked",
    TransferMode.HARDLINK: "linked",
}


def create_import_plan_table(
    planned: list[PlannedImport],
    mode: TransferMode,
    library_dir: Path,
    dry_run: bool = False,
) -> Table:
    """Create a Rich table displaying planned imports.

    Args:
        planned: Files to import with their library destinations.
        mode: Transfer mode used for every file.
        library_dir: Library root, used to shorten destination paths.
        dry_run: Whether this is a dry-run (changes table title).

    Returns:
        Rich Table configured for import plan display.
    """
    title = "Planned Imports (Dry Run)" if dry_run else "Planned Imports"
    table = create_table(title, "Mode", "Source", "Destination")

    style = _MODE_STYLES[mode]
    for item in planned:
        table.add_row(
            f"[{style}]{mode.value}[/{style}]",
            item.source.name,
            f"[muted]{display_path(item.destination, library_dir)}[/muted]",
        )

    return table


def create_import_results_table(results: list[ImportResult], library_dir: Path) -> Table:
    """Create a Rich table displaying import results.

    Successful results show "OK" status; failed results show "FAIL" with
    the error message.
    """
    table = create_table("Import Results", "Status", "Source", "Details")

    for result in results:
        if result.dry_run:
            status = "[info]dry-run[/]"
            detail = display_path(result.destination, library_dir) if result.destination else ""
        elif result.success:
            status = "[success]OK[/success]"
            detail = display_path(result.destination, library_dir) if result.destination else ""
        else:
            status = "[error]FAIL[/error]"
            detail = result.error or "Unknown error"
        table.add_row(status, result.source.name, f"[muted]{detail}[/muted]")

    return table


def create_remove_results_table(results: list[RemoveResult], library_dir: Path) -> Table:
    """Create a Rich table displaying removal results."""
    table = create_table("Removal Results", "Status", "Track", "Details")

    for result in results:
        if result.dry_run:
            status = "[info]dry-run[/]"
            detail = "Would remove"
        elif result.success:
            status = "[success]removed[/]"
            detail = ""
        else:
            status = "[error]failed[/]"
            detail = result.error or "Unknown error"
        table.add_row(status, display_path(result.path, library_dir), f"[muted]{detail}[/muted]")

    return table


def print_results_summary(results: list[ImportResult] | list[RemoveResult], noun: str) -> None:
    """Print a summary of import or removal results.

    Shows a success message when everything succeeded, a dry-run count,
    or a count of succeeded/failed entries when there are failures.

    Args:
        results: Results to summarize.
        noun: Plural description of the entries, e.g. "file(s)".
    """
    success_count = sum(1 for r in results if r.success and not r.dry_run)
    dry_count = sum(1 for r in results if r.dry_run)
    fail_count = sum(1 for r in results if not r.success)

    if dry_count:
        print_info(f"Dry-run: {dry_count} {noun} would be processed.")
    elif fail_count == 0:
        print_success(f"All {success_count} {noun} processed successfully.")
    else:
        console.print(
            f"\n[success]{success_count} succeeded[/success], [error]{fail_count} failed[/error]"
        )
