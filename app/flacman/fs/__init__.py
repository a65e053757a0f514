"""Filesystem traversal and transfer engine.

This module provides the directory walker and its derived file filters,
validated copy/move/symlink/hardlink transfers, and the error taxonomy
shared by both.
"""

from flacman.fs.errors import (
    FsError,
    FsErrorKind,
    FsFileExistsError,
    FsIoError,
    FsNotADirectoryError,
    FsNotAFileError,
    FsPathNotFoundError,
    FsPermissionError,
    FsSameFileError,
    FsWalkError,
)
from flacman.fs.transfer import (
    TransferMode,
    copy_file,
    hardlink_file,
    move_file,
    symlink_file,
    transfer_file,
)
from flacman.fs.walker import (
    AUDIO_EXTENSIONS,
    find_audio_files,
    find_ext,
    find_match_all,
    find_match_one,
    find_pattern,
    is_audio_file,
    walk,
    walk_lenient,
)

__all__ = [
    "AUDIO_EXTENSIONS",
    "FsError",
    "FsErrorKind",
    "FsFileExistsError",
    "FsIoError",
    "FsNotADirectoryError",
    "FsNotAFileError",
    "FsPathNotFoundError",
    "FsPermissionError",
    "FsSameFileError",
    "FsWalkError",
    "TransferMode",
    "copy_file",
    "find_audio_files",
    "find_ext",
    "find_match_all",
    "find_match_one",
    "find_pattern",
    "hardlink_file",
    "is_audio_file",
    "move_file",
    "symlink_file",
    "transfer_file",
    "walk",
    "walk_lenient",
]
