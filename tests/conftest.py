"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def music_tree(tmp_path: Path) -> Path:
    """A small source directory with audio and non-audio files.

    Layout::

        music/
            song.flac
            cover.jpg
            Artist/
                Album/
                    01 Intro.FLAC
                    02 Track.mp3
                    notes.txt
    """
    root = tmp_path / "music"
    album = root / "Artist" / "Album"
    album.mkdir(parents=True)
    (root / "song.flac").write_bytes(b"fLaC song")
    (root / "cover.jpg").write_bytes(b"\xff\xd8 jpeg")
    (album / "01 Intro.FLAC").write_bytes(b"fLaC intro")
    (album / "02 Track.mp3").write_bytes(b"ID3 track")
    (album / "notes.txt").write_text("liner notes")
    return root


@pytest.fixture
def library_dir(tmp_path: Path) -> Path:
    """An existing, empty library directory."""
    library = tmp_path / "library"
    library.mkdir()
    return library


@pytest.fixture
def config_file(tmp_path: Path, library_dir: Path) -> Path:
    """A config file pointing at ``library_dir`` with confirmation disabled."""
    path = tmp_path / "config.toml"
    path.write_text(f'library_dir = "{library_dir.as_posix()}"\nconfirm = false\n')
    return path
