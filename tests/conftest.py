from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from lintgate.runners.models import ExecutionResult

if TYPE_CHECKING:
    from click.testing import CliRunner

    from lintgate.config import LintgateConfig

_ISOLATED_ENV_VARS = ("PYTHON", "MYPYPATH")


class FakeInvoker:
    """ToolInvoker stand-in that records commands instead of running them.

    ``results`` maps a command token (argv[0] or any later argument such as
    ``"py_compile"``) to the result returned for commands containing it.
    ``versions`` maps an executable to the output of its ``--version`` call;
    executables without an entry report ``99.0.0``.
    """

    def __init__(
        self,
        results: Mapping[str, ExecutionResult] | None = None,
        versions: Mapping[str, str] | None = None,
    ) -> None:
        self.results = dict(results or {})
        self.versions = dict(versions or {})
        self.calls: list[tuple[str, ...]] = []
        self.envs: list[dict[str, str]] = []

    def run(
        self, command: Sequence[str], *, env: Mapping[str, str] | None = None
    ) -> ExecutionResult:
        command = tuple(command)
        self.calls.append(command)
        self.envs.append(dict(env or {}))

        if command[1:] == ("--version",):
            output = self.versions.get(command[0], f"{command[0]} 99.0.0")
            return ExecutionResult(exit_status=0, output=output)

        for token, result in self.results.items():
            if token in command:
                return result
        return ExecutionResult(exit_status=0, output="")

    def tool_calls(self, token: str) -> list[tuple[str, ...]]:
        """Non-version calls whose command contains ``token``."""
        return [
            call
            for call in self.calls
            if token in call and call[1:] != ("--version",)
        ]


class FakeProbe:
    """AvailabilityProbe stand-in driven by explicit sets of names."""

    def __init__(
        self,
        executables: set[str] | None = None,
        modules: set[str] | None = None,
        missing: set[str] | None = None,
    ) -> None:
        # executables=None means "everything except ``missing`` is installed"
        self.executables = executables
        self.modules = modules if modules is not None else set()
        self.missing = missing or set()
        self.probed: list[str] = []
        self.module_probes: list[tuple[str, str | None]] = []

    def executable_available(self, name: str) -> bool:
        self.probed.append(name)
        if name in self.missing:
            return False
        return self.executables is None or name in self.executables

    def module_available(self, module: str, interpreter: str | None = None) -> bool:
        self.probed.append(module)
        self.module_probes.append((module, interpreter))
        return module in self.modules

    def is_available(self, tool: Any) -> bool:
        return self.executable_available(tool.executable)


@pytest.fixture(autouse=True)
def configure_test_logging() -> Generator[None, None, None]:
    """Configure structlog at WARNING on stderr for every test."""
    from lintgate.logging import configure_logging

    configure_logging(level=logging.WARNING)
    yield


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove LINTGATE_* and the conventional interpreter variables."""
    import os

    for key in list(os.environ):
        if key.startswith("LINTGATE_") or key in _ISOLATED_ENV_VARS:
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def isolated_config_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, clean_env: None
) -> Path:
    """Run in an empty working directory with an empty home directory."""
    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "project"
    workdir.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def make_config(isolated_config_dir: Path) -> Callable[..., LintgateConfig]:
    """Build a LintgateConfig from keyword overrides in an isolated env."""
    from lintgate.config import LintgateConfig

    def _make(**overrides: Any) -> LintgateConfig:
        return LintgateConfig(**overrides)

    return _make


@pytest.fixture
def fake_invoker() -> FakeInvoker:
    return FakeInvoker()


@pytest.fixture
def fake_probe() -> FakeProbe:
    return FakeProbe()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
