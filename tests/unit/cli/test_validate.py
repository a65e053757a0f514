"""Unit tests for the validate command.

Tests reporting of unreadable library directories.
"""

import errno
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from flacman.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def library_config(tmp_path: Path, music_tree: Path) -> Path:
    """A config file whose library is the sample music tree."""
    path = tmp_path / "library.toml"
    path.write_text(f'library_dir = "{music_tree.as_posix()}"\n')
    return path


class TestValidate:
    """Tests for the validate command."""

    def test_valid_library(self, library_config: Path) -> None:
        """A readable library passes."""
        result = runner.invoke(app, ["-c", str(library_config), "validate"])

        assert result.exit_code == 0
        assert "Library is valid" in result.stdout

    def test_unreadable_directory(self, library_config: Path, music_tree: Path) -> None:
        """Unreadable directories are listed and fail the command."""
        locked = music_tree / "Artist"
        real_scandir = os.scandir

        def fake_scandir(path: str | Path):  # type: ignore[no-untyped-def]
            if Path(path) == locked:
                raise PermissionError(errno.EACCES, "Permission denied", str(path))
            return real_scandir(path)

        with patch("flacman.fs.walker.os.scandir", side_effect=fake_scandir):
            result = runner.invoke(app, ["-c", str(library_config), "validate"])

        assert result.exit_code == 1
        assert "Unreadable Library Entries" in result.stdout
        assert "Permission denied" in result.stdout
        assert "1 unreadable entry found." in result.output

    def test_missing_library(self, tmp_path: Path) -> None:
        """A missing library is an error."""
        config_path = tmp_path / "missing.toml"
        config_path.write_text(f'library_dir = "{(tmp_path / "nope").as_posix()}"\n')

        result = runner.invoke(app, ["-c", str(config_path), "validate"])

        assert result.exit_code == 1
        assert "Path was not found" in result.output
