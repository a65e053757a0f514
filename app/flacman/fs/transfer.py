"""Validated file transfers: copy, move, symlink and hardlink.

All four operations run the same pre-flight checks before touching the
filesystem:

1. Source: must exist, must not be a directory, metadata must be readable.
2. Destination: must not be the same entity as the source, its parent
   directory must exist, it must not exist unless overwrite is set, and it
   must never be a directory.
3. Writability (overwrite only): an existing destination must not be
   read-only. It is then removed right before the mutation, except for
   copy which overwrites in place.

A failed check leaves both source and destination untouched. The checks
are point-in-time; concurrent changes between check and use are not
guarded against.
"""

import errno
import logging
import os
import shutil
import stat
from enum import Enum
from pathlib import Path

from flacman.fs.errors import (
    FsFileExistsError,
    FsIoError,
    FsNotAFileError,
    FsPathNotFoundError,
    FsPermissionError,
    FsSameFileError,
)

logger = logging.getLogger(__name__)

_WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


class TransferMode(str, Enum):
    """How a file is transferred to its destination.

    Attributes:
        COPY: Duplicate content; source is left intact.
        MOVE: Rename (or copy and delete across devices); source is removed.
        SYMLINK: Create a symbolic link pointing at the source path.
        HARDLINK: Create another directory entry for the same content.
    """

    COPY = "copy"
    MOVE = "move"
    SYMLINK = "symlink"
    HARDLINK = "hardlink"

    @property
    def keeps_source(self) -> bool:
        """Whether the source path still exists after a successful transfer."""
        return self is not TransferMode.MOVE


def copy_file(source: str | Path, dest: str | Path, overwrite: bool = False) -> Path:
    """Copy a file's content and permission bits to ``dest``.

    Args:
        source: File to copy.
        dest: Destination file path.
        overwrite: Whether an existing destination may be replaced.

    Returns:
        The destination path.

    Raises:
        FsError: A subclass describing the failed check or I/O call.
    """
    src, dst = Path(source), Path(dest)
    _validate(src, dst, overwrite)

    if overwrite and _lexists(dst):
        _validate_writable(dst)

    try:
        shutil.copy(src, dst)
    except OSError as e:
        raise FsIoError(dst, e) from e

    logger.debug("Copied %s -> %s", src, dst)
    return dst


def move_file(source: str | Path, dest: str | Path, overwrite: bool = False) -> Path:
    """Move a file to ``dest``.

    Tries an atomic rename first. If source and destination live on
    different devices, falls back to copying and then deleting the
    source, which is not atomic. Any other rename failure is raised
    without attempting the fallback.

    Returns:
        The destination path.

    Raises:
        FsError: A subclass describing the failed check or I/O call.
    """
    src, dst = Path(source), Path(dest)
    _validate(src, dst, overwrite)
    _clear_destination(dst, overwrite)

    try:
        os.rename(src, dst)
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise FsIoError(src, e) from e
        logger.debug("Cross-device move, copying %s -> %s", src, dst)
        _copy_then_delete(src, dst)
    else:
        logger.debug("Moved %s -> %s", src, dst)

    return dst


def symlink_file(source: str | Path, dest: str | Path, overwrite: bool = False) -> Path:
    """Create a symbolic link at ``dest`` pointing at ``source``.

    The link stores the source path as given, not its content. Platforms
    without symlink support raise FsIoError.

    Returns:
        The destination (link) path.
    """
    src, dst = Path(source), Path(dest)
    _validate(src, dst, overwrite)
    _clear_destination(dst, overwrite)

    try:
        os.symlink(src, dst)
    except (OSError, NotImplementedError) as e:
        cause = e if isinstance(e, OSError) else OSError(errno.ENOSYS, str(e))
        raise FsIoError(dst, cause) from e

    logger.debug("Symlinked %s -> %s", dst, src)
    return dst


def hardlink_file(source: str | Path, dest: str | Path, overwrite: bool = False) -> Path:
    """Create a hard link at ``dest`` for the content of ``source``.

    Source and destination must be on the same filesystem; otherwise the
    platform error is raised as FsIoError.

    Returns:
        The destination (link) path.
    """
    src, dst = Path(source), Path(dest)
    _validate(src, dst, overwrite)
    _clear_destination(dst, overwrite)

    try:
        os.link(src, dst)
    except OSError as e:
        raise FsIoError(dst, e) from e

    logger.debug("Hardlinked %s -> %s", dst, src)
    return dst


def transfer_file(
    source: str | Path,
    dest: str | Path,
    mode: TransferMode,
    overwrite: bool = False,
) -> Path:
    """Transfer a file using the given mode.

    Dispatch only; all validation happens in the per-mode function.
    """
    match TransferMode(mode):
        case TransferMode.COPY:
            return copy_file(source, dest, overwrite)
        case TransferMode.MOVE:
            return move_file(source, dest, overwrite)
        case TransferMode.SYMLINK:
            return symlink_file(source, dest, overwrite)
        case TransferMode.HARDLINK:
            return hardlink_file(source, dest, overwrite)


# === Pre-flight checks ===


def _validate(src: Path, dst: Path, overwrite: bool) -> None:
    _validate_source(src)
    _validate_destination(src, dst, overwrite)


def _validate_source(path: Path) -> None:
    """Check that the source exists, is not a directory and is readable."""
    if not path.exists():
        raise FsPathNotFoundError(path)
    if path.is_dir():
        raise FsNotAFileError(path)
    try:
        path.stat()
    except OSError as e:
        raise FsIoError(path, e) from e


def _validate_destination(src: Path, dst: Path, overwrite: bool) -> None:
    """Check same-file, parent existence and the overwrite policy."""
    if _is_same_file(src, dst):
        raise FsSameFileError(dst)

    parent = dst.parent
    if not parent.exists():
        raise FsPathNotFoundError(parent)

    if _lexists(dst) and not overwrite:
        raise FsFileExistsError(dst)

    # Only files are replaced; copying onto a directory would write inside it
    if dst.is_dir():
        raise FsNotAFileError(dst)


def _validate_writable(path: Path) -> None:
    """Raise FsPermissionError if an existing destination is read-only."""
    if not path.exists():
        # Dangling symlink; the link itself is replaced
        return
    try:
        mode = path.stat().st_mode
    except OSError as e:
        raise FsIoError(path, e) from e
    if not mode & _WRITE_BITS:
        raise FsPermissionError(path)


def _clear_destination(dst: Path, overwrite: bool) -> None:
    """Remove an existing destination once overwrite has been validated."""
    if not (overwrite and _lexists(dst)):
        return
    _validate_writable(dst)
    try:
        dst.unlink()
    except OSError as e:
        raise FsIoError(dst, e) from e


def _is_same_file(src: Path, dst: Path) -> bool:
    """Whether both paths resolve to the same filesystem entity.

    Returns False when either side cannot be resolved (e.g. missing).
    """
    try:
        return os.path.samefile(src, dst)
    except OSError:
        return False


def _lexists(path: Path) -> bool:
    return path.exists() or path.is_symlink()


def _copy_then_delete(src: Path, dst: Path) -> None:
    try:
        shutil.copy(src, dst)
    except OSError as e:
        raise FsIoError(dst, e) from e
    try:
        src.unlink()
    except OSError as e:
        raise FsIoError(src, e) from e
