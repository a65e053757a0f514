"""Music library operations.

This module provides importing files into the library and listing,
searching, validating and pruning its contents.
"""

from flacman.library.catalog import LibraryCatalog, RemoveResult
from flacman.library.importer import ImportResult, LibraryImporter, PlannedImport

__all__ = [
    "ImportResult",
    "LibraryCatalog",
    "LibraryImporter",
    "PlannedImport",
    "RemoveResult",
]
