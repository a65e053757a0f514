"""Shared Rich consoles and message helpers for flacman.

Tables and results go to ``console`` (stdout). Warnings, errors and log
records go to ``err_console`` so piped output such as
``flacman query -f json`` stays machine-readable.
"""

import sys

from rich.console import Console
from rich.table import Table

from flacman.core.theme import get_theme


def _color_system() -> str | None:
    """Use truecolor on a terminal so hex theme colors render exactly."""
    return "truecolor" if sys.stdout.isatty() else None


console = Console(theme=get_theme(), color_system=_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_color_system())


def create_table(title: str, *columns: str) -> Table:
    """Create a pre-configured table with the flacman header and border styles.

    Args:
        title: Table title.
        columns: Column headers, added in order.

    Returns:
        Rich Table ready for rows.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    for column in columns:
        table.add_column(column)
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
