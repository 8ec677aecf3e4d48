"""Tests for the lintgate CLI group."""

from __future__ import annotations

import logging
from pathlib import Path

from click.testing import CliRunner

from lintgate import __version__
from lintgate.main import cli


def test_version_option(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_lists_commands(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("run", "steps", "tools"):
        assert command in result.output


def test_missing_config_file(cli_runner: CliRunner, isolated_config_dir: Path) -> None:
    result = cli_runner.invoke(cli, ["--config", "nope.yaml", "steps"])

    assert result.exit_code == 1
    assert "Error: Config file not found: nope.yaml" in result.output


def test_invalid_config_shows_field(
    cli_runner: CliRunner, isolated_config_dir: Path
) -> None:
    (isolated_config_dir / "lintgate.yaml").write_text(
        "tools:\n  black:\n    minimum_version: latest\n"
    )

    result = cli_runner.invoke(cli, ["steps"])

    assert result.exit_code == 1
    assert "Field: tools.black.minimum_version" in result.output
    assert "Value: latest" in result.output


def test_verbose_sets_log_level(
    cli_runner: CliRunner, isolated_config_dir: Path
) -> None:
    result = cli_runner.invoke(cli, ["-vv", "steps"])

    assert result.exit_code == 0, result.output
    assert logging.getLogger().level == logging.DEBUG
