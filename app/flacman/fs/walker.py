"""Directory traversal and file discovery.

Provides a depth-first walk over a directory tree in two flavours:

- ``walk``: strict. Each yielded item is either a file ``Path`` or an
  ``FsWalkError`` describing a subtree that could not be read. Errors are
  yielded in-stream so the remainder of the tree is still visited.
- ``walk_lenient``: yields only file paths and silently drops errors.

Both validate the root eagerly, when called, not on the first pull. The
returned iterators are single-pass; walk again to restart. Traversal order
follows directory enumeration order and is unspecified between runs.

The ``find_*`` helpers are built on top of these walks.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from flacman.fs.errors import FsNotADirectoryError, FsPathNotFoundError, FsWalkError

logger = logging.getLogger(__name__)

AUDIO_EXTENSIONS: frozenset[str] = frozenset(
    {"flac", "mp3", "m4a", "ogg", "opus", "wav", "aac", "wma"}
)


def walk(root: str | Path) -> Iterator[Path | FsWalkError]:
    """Walk a directory tree, yielding files and in-stream errors.

    Args:
        root: Directory to walk from.

    Returns:
        Iterator over regular files below ``root``. Items are ``FsWalkError``
        instances where a subdirectory could not be read.

    Raises:
        FsPathNotFoundError: If ``root`` does not exist.
        FsNotADirectoryError: If ``root`` is a file.
    """
    walk_path = _validate_root(root)
    return _iter_tree(walk_path)


def walk_lenient(root: str | Path) -> Iterator[Path]:
    """Walk a directory tree, silently skipping anything that errors.

    Use this where permissiveness is preferable to precision, e.g.
    best-effort discovery across partially unreadable trees.

    Raises:
        FsPathNotFoundError: If ``root`` does not exist.
        FsNotADirectoryError: If ``root`` is a file.
    """
    walk_path = _validate_root(root)
    return (item for item in _iter_tree(walk_path) if isinstance(item, Path))


def find_match_one(root: str | Path, target: str | Path) -> Path | None:
    """Find the first file whose name and extension equal those of ``target``.

    Raises:
        FsWalkError: If the walk hits an error before a match is found.
    """
    target_path = Path(target)
    for path in _strict_files(root):
        if _same_name(path, target_path):
            return path
    return None


def find_match_all(root: str | Path, target: str | Path) -> list[Path]:
    """Find all files whose name and extension equal those of ``target``.

    Matches are returned in traversal order.

    Raises:
        FsWalkError: If the walk hits an error before it is exhausted.
    """
    target_path = Path(target)
    return [path for path in _strict_files(root) if _same_name(path, target_path)]


def find_ext(root: str | Path, ext: str) -> list[Path]:
    """Find all files with the given extension, compared case-insensitively.

    Args:
        root: Directory to search.
        ext: Extension with or without a leading dot (e.g. "flac" or ".flac").

    Returns:
        Matching file paths in traversal order.
    """
    wanted = ext.lstrip(".").lower()
    return [path for path in _strict_files(root) if _extension(path) == wanted]


def find_pattern(root: str | Path, pattern: str) -> list[Path]:
    """Find all files whose full path contains ``pattern``.

    Paths that cannot be represented as text are skipped.
    """
    matches: list[Path] = []
    for path in _strict_files(root):
        text = path_text(path)
        if text is not None and pattern in text:
            matches.append(path)
    return matches


def find_audio_files(root: str | Path) -> list[Path]:
    """Find all audio files below ``root``.

    Uses the lenient walk, so unreadable subdirectories are skipped.
    Audio files are recognised by extension (see ``AUDIO_EXTENSIONS``).
    """
    return [path for path in walk_lenient(root) if is_audio_file(path)]


def is_audio_file(path: str | Path) -> bool:
    """Check whether a path has one of the known audio extensions."""
    return _extension(Path(path)) in AUDIO_EXTENSIONS


def path_text(path: Path) -> str | None:
    """Return the path as UTF-8 representable text, or None if it is not."""
    text = str(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return text


# === Private helpers ===


def _validate_root(root: str | Path) -> Path:
    walk_path = Path(root)
    if not walk_path.exists():
        raise FsPathNotFoundError(walk_path)
    if walk_path.is_file():
        raise FsNotADirectoryError(walk_path)
    return walk_path


def _iter_tree(root: Path) -> Iterator[Path | FsWalkError]:
    """Depth-first traversal yielding regular files and walk errors.

    Symbolic links below the root are neither followed nor yielded.
    """
    stack: list[Path] = [root]
    while stack:
        directory = stack.pop()
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            logger.debug("Cannot read directory %s: %s", directory, e)
            yield FsWalkError(directory, e)
            continue

        subdirs: list[Path] = []
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(Path(entry.path))
                elif entry.is_file(follow_symlinks=False):
                    yield Path(entry.path)
            except OSError as e:
                yield FsWalkError(entry.path, e)

        # Reversed so subdirectories are visited in enumeration order
        stack.extend(reversed(subdirs))


def _strict_files(root: str | Path) -> Iterator[Path]:
    """Strict walk that raises the first walk error instead of yielding it."""
    for item in walk(root):
        if isinstance(item, FsWalkError):
            raise item
        yield item


def _same_name(path: Path, target: Path) -> bool:
    return path.name == target.name and path.suffix == target.suffix


def _extension(path: Path) -> str:
    return path.suffix[1:].lower()
