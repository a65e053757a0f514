"""Library importer.

Imports files and directories into the music library using the
transfer engine, with dry-run support and per-file failure isolation.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from flacman.fs.errors import FsError, FsNotAFileError, FsPathNotFoundError
from flacman.fs.transfer import TransferMode, transfer_file
from flacman.fs.walker import find_audio_files, is_audio_file, walk_lenient

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ImportResult:
    """Result of importing a single file into the library.

    Attributes:
        source: Path that was imported (or attempted).
        destination: Target path inside the library, None if not planned.
        success: Whether the import completed successfully.
        error: Error message if the import failed, None otherwise.
        dry_run: Whether this was a dry-run (nothing transferred).
    """

    source: Path
    destination: Path | None
    success: bool
    error: str | None = None
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class PlannedImport:
    """A single source file and its destination inside the library."""

    source: Path
    destination: Path


class LibraryImporter:
    """Imports files into the music library.

    Files are placed directly under the library root. Directories (with
    ``recursive``) keep their structure under ``<library>/<dir name>/``.

    Args:
        library_dir: Root of the music library.
        mode: Transfer mode for every file.
        overwrite: Replace existing files in the library.
        recursive: Allow directory sources.
        audio_only: Skip files without a known audio extension.
        dry_run: Plan only, do not touch the filesystem.
    """

    def __init__(
        self,
        library_dir: Path,
        mode: TransferMode = TransferMode.COPY,
        *,
        overwrite: bool = False,
        recursive: bool = False,
        audio_only: bool = True,
        dry_run: bool = False,
    ) -> None:
        self._library_dir = library_dir
        self._mode = mode
        self._overwrite = overwrite
        self._recursive = recursive
        self._audio_only = audio_only
        self._dry_run = dry_run

    @property
    def library_dir(self) -> Path:
        return self._library_dir

    @property
    def mode(self) -> TransferMode:
        return self._mode

    def plan(self, sources: list[Path]) -> tuple[list[PlannedImport], list[ImportResult]]:
        """Resolve sources into per-file imports.

        Args:
            sources: Files and directories given by the user.

        Returns:
            Tuple of (planned imports, failed results for unusable sources).
        """
        planned: list[PlannedImport] = []
        rejected: list[ImportResult] = []

        for raw_source in sources:
            # Absolute so symlinks created in the library stay valid
            source = raw_source.absolute()
            if not source.exists():
                rejected.append(_failed(source, str(FsPathNotFoundError(source))))
                continue

            if source.is_dir():
                if not self._recursive:
                    rejected.append(
                        _failed(source, f"{FsNotAFileError(source)} (use --recursive)")
                    )
                    continue
                planned.extend(self._plan_directory(source))
                continue

            if self._audio_only and not is_audio_file(source):
                logger.info("Skipping non-audio file: %s", source)
                continue

            planned.append(PlannedImport(source, self._library_dir / source.name))

        return planned, rejected

    def import_paths(self, sources: list[Path]) -> list[ImportResult]:
        """Import sources into the library and return results.

        Each file is transferred independently; a failure is recorded in
        its result and does not stop the remaining imports.

        Args:
            sources: Files and directories to import.

        Returns:
            List of ImportResult, rejected sources first, then one per file.
        """
        planned, results = self.plan(sources)
        results.extend(self.execute(planned))
        return results

    def execute(self, planned: list[PlannedImport]) -> list[ImportResult]:
        """Transfer each planned file into the library."""
        return [self._import_single(item) for item in planned]

    def _plan_directory(self, directory: Path) -> list[PlannedImport]:
        """Plan every file below ``directory``, keeping relative structure."""
        if self._audio_only:
            files = find_audio_files(directory)
        else:
            files = list(walk_lenient(directory))

        base = self._library_dir / directory.resolve().name
        return [
            PlannedImport(path, base / path.relative_to(directory))
            for path in sorted(files)
        ]

    def _import_single(self, item: PlannedImport) -> ImportResult:
        if self._dry_run:
            logger.info(
                "Dry-run: would %s %s -> %s", self._mode.value, item.source, item.destination
            )
            return ImportResult(
                source=item.source,
                destination=item.destination,
                success=True,
                dry_run=True,
            )

        created = _missing_dirs(item.destination.parent)
        try:
            item.destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            error = f"Cannot create {item.destination.parent}: {e}"
            return _failed(item.source, error, item.destination)

        try:
            dest = transfer_file(item.source, item.destination, self._mode, self._overwrite)
        except FsError as e:
            logger.debug("Import of %s failed: %s", item.source, e)
            _remove_empty_dirs(created)
            return _failed(item.source, str(e), item.destination)

        return ImportResult(source=item.source, destination=dest, success=True)


def _failed(source: Path, error: str, destination: Path | None = None) -> ImportResult:
    return ImportResult(source=source, destination=destination, success=False, error=error)


def _missing_dirs(directory: Path) -> list[Path]:
    """Return ``directory`` and its missing ancestors, deepest first."""
    missing: list[Path] = []
    for path in (directory, *directory.parents):
        if path.exists():
            break
        missing.append(path)
    return missing


def _remove_empty_dirs(directories: list[Path]) -> None:
    """Remove directories created for a failed import, deepest first."""
    for directory in directories:
        try:
            directory.rmdir()
        except OSError as e:
            # Another import may have filled it in the meantime
            logger.debug("Keeping %s: %s", directory, e)
            return
