"""Unit tests for LibraryCatalog.

Tests listing, searching, finding, validating and removing tracks.
"""

import errno
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from flacman.fs.errors import FsPathNotFoundError, FsWalkError
from flacman.library.catalog import LibraryCatalog


class TestTracks:
    """Tests for tracks and search."""

    def test_tracks_sorted_audio_only(self, music_tree: Path) -> None:
        """Only audio files are listed, sorted by path."""
        catalog = LibraryCatalog(music_tree)

        tracks = catalog.tracks()

        assert tracks == sorted(tracks)
        assert {t.name for t in tracks} == {"song.flac", "01 Intro.FLAC", "02 Track.mp3"}

    def test_tracks_missing_library(self, tmp_path: Path) -> None:
        """A missing library raises FsPathNotFoundError."""
        catalog = LibraryCatalog(tmp_path / "missing")

        with pytest.raises(FsPathNotFoundError):
            catalog.tracks()

    def test_search_single_term(self, music_tree: Path) -> None:
        """Search matches the library-relative path case-insensitively."""
        catalog = LibraryCatalog(music_tree)

        result = catalog.search(["album"])

        assert {t.name for t in result} == {"01 Intro.FLAC", "02 Track.mp3"}

    def test_search_all_terms_must_match(self, music_tree: Path) -> None:
        """Every term has to be present."""
        catalog = LibraryCatalog(music_tree)

        assert [t.name for t in catalog.search(["artist", "intro"])] == ["01 Intro.FLAC"]
        assert catalog.search(["artist", "song"]) == []

    def test_search_ignores_library_location(self, tmp_path: Path) -> None:
        """Terms are not matched against the library root itself."""
        library = tmp_path / "Jazz"
        library.mkdir()
        (library / "track.flac").write_text("")

        assert LibraryCatalog(library).search(["jazz"]) == []

    def test_search_no_terms(self, music_tree: Path) -> None:
        """An empty search returns every track."""
        catalog = LibraryCatalog(music_tree)

        assert catalog.search([]) == catalog.tracks()


class TestFind:
    """Tests for find."""

    def test_find_by_name(self, music_tree: Path) -> None:
        """All files with the exact name are found."""
        catalog = LibraryCatalog(music_tree)

        assert catalog.find("02 Track.mp3") == [music_tree / "Artist" / "Album" / "02 Track.mp3"]

    def test_find_non_audio(self, music_tree: Path) -> None:
        """Find is not limited to audio files."""
        assert LibraryCatalog(music_tree).find("notes.txt") != []

    def test_find_nothing(self, music_tree: Path) -> None:
        """An empty list is returned for unknown names."""
        assert LibraryCatalog(music_tree).find("missing.flac") == []


class TestValidate:
    """Tests for validate."""

    def test_valid_library(self, music_tree: Path) -> None:
        """A readable library has no errors."""
        assert LibraryCatalog(music_tree).validate() == []

    def test_unreadable_directory(self, music_tree: Path) -> None:
        """Unreadable directories are reported."""
        locked = music_tree / "Artist"
        real_scandir = os.scandir

        def fake_scandir(path: str | Path):  # type: ignore[no-untyped-def]
            if Path(path) == locked:
                raise PermissionError(errno.EACCES, "Permission denied", str(path))
            return real_scandir(path)

        with patch("flacman.fs.walker.os.scandir", side_effect=fake_scandir):
            errors = LibraryCatalog(music_tree).validate()

        assert len(errors) == 1
        assert isinstance(errors[0], FsWalkError)
        assert errors[0].path == locked

    def test_missing_library(self, tmp_path: Path) -> None:
        """A missing library raises instead of returning errors."""
        with pytest.raises(FsPathNotFoundError):
            LibraryCatalog(tmp_path / "missing").validate()


class TestRemove:
    """Tests for remove."""

    def test_remove_file(self, music_tree: Path) -> None:
        """Files inside the library are deleted."""
        target = music_tree / "song.flac"

        results = LibraryCatalog(music_tree).remove([target])

        assert len(results) == 1
        assert results[0].success is True
        assert results[0].path == target
        assert not target.exists()

    def test_remove_symlink_keeps_target(self, music_tree: Path, tmp_path: Path) -> None:
        """Removing a symlinked track leaves the original file alone."""
        original = tmp_path / "original.flac"
        original.write_text("content")
        link = music_tree / "linked.flac"
        link.symlink_to(original)

        results = LibraryCatalog(music_tree).remove([link])

        assert results[0].success is True
        assert not link.is_symlink()
        assert original.exists()

    def test_remove_outside_library_rejected(self, music_tree: Path, tmp_path: Path) -> None:
        """Paths outside the library are never deleted."""
        outside = tmp_path / "outside.flac"
        outside.write_text("keep me")

        results = LibraryCatalog(music_tree).remove([outside])

        assert results[0].success is False
        assert results[0].error is not None
        assert "outside the library" in results[0].error
        assert outside.exists()

    def test_remove_directory_rejected(self, music_tree: Path) -> None:
        """Directories are not removed."""
        results = LibraryCatalog(music_tree).remove([music_tree / "Artist"])

        assert results[0].success is False
        assert results[0].error is not None
        assert "Cannot operate on directory" in results[0].error
        assert (music_tree / "Artist").is_dir()

    def test_remove_missing(self, music_tree: Path) -> None:
        """Removing a missing file fails for that file only."""
        target = music_tree / "song.flac"
        missing = music_tree / "missing.flac"

        results = LibraryCatalog(music_tree).remove([missing, target])

        assert [r.success for r in results] == [False, True]
        assert results[0].error is not None
        assert "Path was not found" in results[0].error

    def test_remove_dry_run(self, music_tree: Path) -> None:
        """Dry-run keeps files in place."""
        target = music_tree / "song.flac"

        results = LibraryCatalog(music_tree).remove([target], dry_run=True)

        assert results[0].success is True
        assert results[0].dry_run is True
        assert target.exists()
