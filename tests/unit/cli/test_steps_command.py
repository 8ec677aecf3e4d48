"""Tests for the ``lintgate steps`` command."""

from __future__ import annotations

import importlib
from pathlib import Path

import pytest
from click.testing import CliRunner
from rich.console import Console

from lintgate.main import cli


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    module = importlib.import_module("lintgate.cli.commands.steps")
    monkeypatch.setattr(module, "console", Console(width=200))


class TestStepsCommand:
    def test_lists_steps_in_order(
        self, cli_runner: CliRunner, isolated_config_dir: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["steps"])

        assert result.exit_code == 0, result.output
        positions = [
            result.output.index(name)
            for name in ("compile", "format", "style", "types")
        ]
        assert positions == sorted(positions)
        assert "python3 -m py_compile <sources...>" in result.output
        assert "black --check --diff ." in result.output
        assert "22.3.0" in result.output
        assert "0.981" in result.output

    def test_shows_type_stub_data_check(
        self,
        cli_runner: CliRunner,
        isolated_config_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("LINTGATE_TYPESAFETY_DIR", "typesafety")

        result = cli_runner.invoke(cli, ["steps"])

        assert result.exit_code == 0, result.output
        assert "python3 -m pytest typesafety" in result.output
        assert "(needs pytest_mypy_plugins)" in result.output

    def test_reads_config_file(
        self, cli_runner: CliRunner, isolated_config_dir: Path
    ) -> None:
        config_file = isolated_config_dir / "custom.yaml"
        config_file.write_text(
            "targets: [src]\n"
            "flake8_config: setup.cfg\n"
            "tools:\n"
            "  flake8:\n"
            "    executable: flake8-strict\n"
        )

        result = cli_runner.invoke(cli, ["--config", str(config_file), "steps"])

        assert result.exit_code == 0, result.output
        assert "flake8-strict --config setup.cfg src" in result.output
