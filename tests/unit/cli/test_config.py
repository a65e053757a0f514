"""Unit tests for config CLI commands.

Tests for the flacman config show, init and path commands.
"""

from pathlib import Path

import pytest
from flacman.cli.main import app
from flacman.core.config import load_config
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigPath:
    """Tests for config path."""

    def test_prints_given_path(self, tmp_path: Path) -> None:
        """The --config path is printed as is."""
        config_path = tmp_path / "custom.toml"

        result = runner.invoke(app, ["--config", str(config_path), "config", "path"])

        assert result.exit_code == 0
        assert result.stdout.strip() == str(config_path)

    def test_prints_default_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The XDG config path is used without --config."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        result = runner.invoke(app, ["config", "path"])

        assert result.exit_code == 0
        assert result.stdout.strip() == str(tmp_path / "flacman" / "config.toml")


class TestConfigShow:
    """Tests for config show."""

    def test_show_config_file(self, config_file: Path) -> None:
        """Values from the config file are displayed."""
        result = runner.invoke(app, ["--config", str(config_file), "config", "show"])

        assert result.exit_code == 0
        assert "Configuration" in result.stdout
        assert "default_mode" in result.stdout
        assert "copy" in result.stdout
        assert "Source:" in result.stdout

    def test_show_defaults(self, tmp_path: Path) -> None:
        """Defaults are shown when no config file exists."""
        result = runner.invoke(app, ["-c", str(tmp_path / "none.toml"), "config", "show"])

        assert result.exit_code == 0
        assert "defaults (no config file)" in result.stdout


class TestConfigInit:
    """Tests for config init."""

    def test_init_writes_defaults(self, tmp_path: Path) -> None:
        """A default config file is written."""
        config_path = tmp_path / "sub" / "config.toml"

        result = runner.invoke(app, ["-c", str(config_path), "config", "init"])

        assert result.exit_code == 0
        assert "Config written" in result.stdout
        assert load_config(config_path).confirm is True

    def test_init_refuses_existing(self, config_file: Path) -> None:
        """An existing config is kept without --force."""
        before = config_file.read_text()

        result = runner.invoke(app, ["-c", str(config_file), "config", "init"])

        assert result.exit_code == 1
        assert "Config already exists" in result.output
        assert config_file.read_text() == before

    def test_init_force(self, config_file: Path) -> None:
        """--force replaces an existing config."""
        result = runner.invoke(app, ["-c", str(config_file), "config", "init", "--force"])

        assert result.exit_code == 0
        assert load_config(config_file).confirm is True
