"""Tests for the root CLI group."""

from __future__ import annotations

from click.testing import CliRunner

from optica import __version__
from optica.cli import cli


class TestCli:
    def test_help_without_subcommand(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "laws" in result.output
        assert "validate" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
