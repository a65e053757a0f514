"""Logging setup for the flacman CLI.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves; the CLI calls ``setup_logging`` once.
"""

import logging

from rich.logging import RichHandler

from flacman.utils.formatting import err_console


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Log at DEBUG level.
        quiet: Only log errors. Ignored when ``verbose`` is set.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=[handler],
        force=True,
    )
