"""Library catalog: listing, searching, validating and removing tracks.

All lookups are backed by the traversal engine. The library directory
must exist; otherwise the engine's FsPathNotFoundError propagates.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from flacman.fs.errors import FsNotAFileError, FsPathNotFoundError, FsWalkError
from flacman.fs.walker import find_audio_files, find_match_all, path_text, walk

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RemoveResult:
    """Result of removing a single file from the library.

    Attributes:
        path: Path that was operated on.
        success: Whether the removal completed successfully.
        error: Error message if the removal failed, None otherwise.
        dry_run: Whether this was a dry-run (nothing deleted).
    """

    path: Path
    success: bool
    error: str | None = None
    dry_run: bool = False


class LibraryCatalog:
    """Read and prune the contents of a music library.

    Args:
        library_dir: Root of the music library.
    """

    def __init__(self, library_dir: Path) -> None:
        self._library_dir = library_dir

    @property
    def library_dir(self) -> Path:
        return self._library_dir

    def tracks(self) -> list[Path]:
        """List all audio files in the library, sorted by path.

        Raises:
            FsPathNotFoundError: If the library directory does not exist.
        """
        return sorted(find_audio_files(self._library_dir))

    def search(self, terms: list[str]) -> list[Path]:
        """Find tracks whose library-relative path contains every term.

        Matching is case-insensitive. Tracks whose path is not valid text
        are skipped.

        Args:
            terms: Search terms; an empty list matches every track.

        Returns:
            Matching tracks, sorted by path.
        """
        needles = [term.casefold() for term in terms]
        matches: list[Path] = []
        for track in self.tracks():
            text = path_text(track.relative_to(self._library_dir))
            if text is None:
                continue
            haystack = text.casefold()
            if all(needle in haystack for needle in needles):
                matches.append(track)
        return matches

    def find(self, name: str) -> list[Path]:
        """Find all library files named exactly ``name``.

        Raises:
            FsWalkError: If part of the library cannot be read.
        """
        return find_match_all(self._library_dir, Path(name))

    def validate(self) -> list[FsWalkError]:
        """Walk the whole library and collect traversal errors.

        Returns:
            Errors for every part of the library that could not be read.
            An empty list means the whole tree is readable.
        """
        errors: list[FsWalkError] = []
        file_count = 0
        for item in walk(self._library_dir):
            if isinstance(item, FsWalkError):
                errors.append(item)
            else:
                file_count += 1
        logger.debug("Validated %d files, %d errors", file_count, len(errors))
        return errors

    def remove(self, paths: list[Path], *, dry_run: bool = False) -> list[RemoveResult]:
        """Remove files from the library.

        Paths outside the library are rejected. Failures are isolated per
        path.

        Args:
            paths: Files to remove.
            dry_run: Report what would be removed without deleting.

        Returns:
            List of RemoveResult, one per input path.
        """
        return [self._remove_single(path, dry_run) for path in paths]

    def _remove_single(self, path: Path, dry_run: bool) -> RemoveResult:
        if not self._contains(path):
            return RemoveResult(
                path=path,
                success=False,
                error=f"Path is outside the library: {path}",
            )

        if dry_run:
            logger.info("Dry-run: would remove %s", path)
            return RemoveResult(path=path, success=True, dry_run=True)

        if path.is_dir() and not path.is_symlink():
            return RemoveResult(path=path, success=False, error=str(FsNotAFileError(path)))

        try:
            path.unlink()
        except FileNotFoundError:
            return RemoveResult(path=path, success=False, error=str(FsPathNotFoundError(path)))
        except OSError as e:
            return RemoveResult(path=path, success=False, error=str(e))

        logger.debug("Removed %s", path)
        return RemoveResult(path=path, success=True)

    def _contains(self, path: Path) -> bool:
        try:
            path.absolute().relative_to(self._library_dir.absolute())
        except ValueError:
            return False
        return True
