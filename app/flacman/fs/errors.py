"""Error taxonomy for filesystem operations.

Every fallible traversal and transfer operation raises a subclass of
FsError. Each subclass corresponds to exactly one FsErrorKind, so callers
can either catch a specific subclass or match on ``error.kind``. The
offending path is always preserved, and any underlying OSError is chained
as ``__cause__`` and exposed as ``error.cause``.
"""

from enum import Enum
from pathlib import Path
from typing import ClassVar


class FsErrorKind(str, Enum):
    """Closed set of filesystem failure kinds.

    Attributes:
        IO: Underlying I/O failure not covered by another kind.
        PATH_NOT_FOUND: A required path does not exist.
        FILE_ALREADY_EXISTS: Destination exists and overwrite was not requested.
        SAME_FILE: Source and destination designate the same entity.
        PERMISSION: Destination is read-only.
        NOT_A_FILE: Operation requires a file but got a directory.
        NOT_A_DIRECTORY: Operation requires a directory but got a file.
        WALK_DIR: Error encountered while descending a directory tree.
    """

    IO = "io"
    PATH_NOT_FOUND = "path_not_found"
    FILE_ALREADY_EXISTS = "file_already_exists"
    SAME_FILE = "same_file"
    PERMISSION = "permission"
    NOT_A_FILE = "not_a_file"
    NOT_A_DIRECTORY = "not_a_directory"
    WALK_DIR = "walk_dir"


class FsError(Exception):
    """Base exception for filesystem engine errors.

    Attributes:
        kind: The failure kind (fixed per subclass).
        path: The path that caused the failure, if known.
        cause: The underlying OSError, if any.
    """

    kind: ClassVar[FsErrorKind]
    _template: ClassVar[str] = "{path}"

    def __init__(self, path: str | Path | None, cause: OSError | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self.cause = cause
        super().__init__(self._format())
        if cause is not None:
            self.__cause__ = cause

    def _format(self) -> str:
        return self._template.format(path=self.path, cause=self.cause)


class FsIoError(FsError):
    """Raised when an underlying I/O call fails."""

    kind = FsErrorKind.IO

    def _format(self) -> str:
        if self.path is None:
            return f"IO error: {self.cause}"
        return f"IO error on {self.path}: {self.cause}"


class FsPathNotFoundError(FsError):
    """Raised when a required path does not exist."""

    kind = FsErrorKind.PATH_NOT_FOUND
    _template = "Path was not found: {path}"


class FsFileExistsError(FsError):
    """Raised when the destination exists and overwrite is off."""

    kind = FsErrorKind.FILE_ALREADY_EXISTS
    _template = "File already exists: {path}"


class FsSameFileError(FsError):
    """Raised when source and destination are the same entity."""

    kind = FsErrorKind.SAME_FILE
    _template = "Source and destination are the same: {path}"


class FsPermissionError(FsError):
    """Raised when the destination is marked read-only."""

    kind = FsErrorKind.PERMISSION
    _template = "You have no permission to edit that file: {path}"


class FsNotAFileError(FsError):
    """Raised when a file operation is attempted on a directory."""

    kind = FsErrorKind.NOT_A_FILE
    _template = "Cannot operate on directory: {path}"


class FsNotADirectoryError(FsError):
    """Raised when a directory walk is attempted on a file."""

    kind = FsErrorKind.NOT_A_DIRECTORY
    _template = "Path is not a directory: {path}"


class FsWalkError(FsError):
    """Error encountered while descending into part of a directory tree.

    In a strict walk these are yielded as items rather than raised, so
    the rest of the tree is still traversed.
    """

    kind = FsErrorKind.WALK_DIR

    def _format(self) -> str:
        if self.cause is None:
            return f"Error while walking directory: {self.path}"
        return f"Error while walking directory {self.path}: {self.cause.strerror or self.cause}"
