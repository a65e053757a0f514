"""Unit tests for the main CLI application.

Tests global options, help output and logging setup.
"""

import logging
from pathlib import Path

from flacman import __version__
from flacman.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestGlobalOptions:
    """Tests for options handled by the main callback."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"flacman version {__version__}" in result.stdout

    def test_version_short(self) -> None:
        """-V is an alias for --version."""
        result = runner.invoke(app, ["-V"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_help_lists_commands(self) -> None:
        """--help lists every command."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("update", "query", "remove", "validate", "config"):
            assert command in result.stdout

    def test_no_args_shows_help(self) -> None:
        """Running without a command prints usage."""
        result = runner.invoke(app, [])

        assert "Usage" in result.output

    def test_verbose_enables_debug_logging(self, config_file: Path) -> None:
        """--verbose sets the root logger to DEBUG."""
        result = runner.invoke(app, ["--verbose", "--config", str(config_file), "config", "path"])

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_quiet_only_logs_errors(self, config_file: Path) -> None:
        """--quiet sets the root logger to ERROR."""
        result = runner.invoke(app, ["-q", "-c", str(config_file), "config", "path"])

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.ERROR

    def test_default_log_level(self, config_file: Path) -> None:
        """Without flags only warnings are logged."""
        result = runner.invoke(app, ["-c", str(config_file), "config", "path"])

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.WARNING

    def test_invalid_config_reported(self, tmp_path: Path) -> None:
        """A broken config file fails commands with a clear error."""
        config_path = tmp_path / "config.toml"
        config_path.write_text("library_dir = [")

        result = runner.invoke(app, ["-c", str(config_path), "query"])

        assert result.exit_code == 1
        assert "Failed to load config" in result.output
