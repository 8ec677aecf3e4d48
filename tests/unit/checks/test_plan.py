"""Tests for the default step plan."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from lintgate.checks.models import ToolPolicy
from lintgate.checks.plan import build_steps, build_tool_specs
from lintgate.config import LintgateConfig
from lintgate.exceptions import InputAbsentError

MakeConfig = Callable[..., LintgateConfig]


class TestBuildSteps:
    def test_fixed_order(self, make_config: MakeConfig) -> None:
        steps = build_steps(make_config(), ["a.py"])
        assert [s.identifier for s in steps] == ["compile", "format", "style", "types"]

    def test_empty_sources_is_input_absent(self, make_config: MakeConfig) -> None:
        with pytest.raises(InputAbsentError) as exc_info:
            build_steps(make_config(), [])

        assert exc_info.value.message == "No source files found"

    def test_compile_step_uses_interpreter(self, make_config: MakeConfig) -> None:
        config = make_config(python="/usr/bin/python3.12")

        compile_step = build_steps(config, ["a.py", "pkg/b.py"])[0]

        assert compile_step.tool.executable == "/usr/bin/python3.12"
        assert compile_step.tool.policy is ToolPolicy.REQUIRED
        assert compile_step.invocations[0].command == (
            "/usr/bin/python3.12",
            "-m",
            "py_compile",
            "a.py",
            "pkg/b.py",
        )

    def test_default_policies(self, make_config: MakeConfig) -> None:
        steps = {s.identifier: s for s in build_steps(make_config(), ["a.py"])}

        assert steps["format"].tool.policy is ToolPolicy.OPTIONAL
        assert steps["format"].tool.minimum_version == "22.3.0"
        assert steps["style"].tool.policy is ToolPolicy.REQUIRED
        assert steps["style"].tool.minimum_version is None
        assert steps["types"].tool.policy is ToolPolicy.OPTIONAL
        assert steps["types"].tool.minimum_version == "0.981"

    def test_config_paths_forwarded_verbatim(self, make_config: MakeConfig) -> None:
        config = make_config(
            targets=("src", "tests"),
            black_config="pyproject.toml",
            flake8_config="setup.cfg",
            mypy_config="mypy.ini",
        )

        steps = {s.identifier: s for s in build_steps(config, ["a.py"])}

        assert steps["format"].invocations[0].command == (
            "black",
            "--check",
            "--diff",
            "--config",
            "pyproject.toml",
            "src",
            "tests",
        )
        assert steps["style"].invocations[0].command == (
            "flake8",
            "--config",
            "setup.cfg",
            "src",
            "tests",
        )
        assert steps["types"].invocations[0].command == (
            "mypy",
            "--config-file",
            "mypy.ini",
            "src",
            "tests",
        )

    def test_dot_slash_paths_not_normalised(self, make_config: MakeConfig) -> None:
        config = make_config(
            python="/opt/py/bin/python",
            flake8_config="./.flake8",
            mypy_config="./mypy.ini",
            typesafety_dir="typesafety/",
        )

        steps = {s.identifier: s for s in build_steps(config, ["a.py"])}
        mypy, data_check = steps["types"].invocations

        assert steps["style"].invocations[0].command == (
            "flake8",
            "--config",
            "./.flake8",
            ".",
        )
        assert mypy.command == ("mypy", "--config-file", "./mypy.ini", ".")
        assert data_check.command == (
            "/opt/py/bin/python",
            "-m",
            "pytest",
            "--mypy-ini-file=./mypy.ini",
            "typesafety/",
        )
        assert data_check.interpreter == "/opt/py/bin/python"

    def test_format_failure_hint_names_reformat_script(
        self, make_config: MakeConfig
    ) -> None:
        config = make_config(reformat_command="tools/reformat")

        format_step = build_steps(config, ["a.py"])[1]

        assert format_step.failure_hint is not None
        assert "reformat script" in format_step.failure_hint
        assert "tools/reformat" in format_step.failure_hint

    def test_types_without_typesafety_dir(self, make_config: MakeConfig) -> None:
        types_step = build_steps(make_config(), ["a.py"])[3]

        assert [i.label for i in types_step.invocations] == ["mypy"]
        assert dict(types_step.invocations[0].env) == {}

    def test_types_with_typesafety_dir(self, make_config: MakeConfig) -> None:
        config = make_config(
            typesafety_dir="tests/typesafety",
            mypy_config="mypy.ini",
            mypy_path="stubs",
        )

        types_step = build_steps(config, ["a.py"])[3]
        mypy, data_check = types_step.invocations

        assert mypy.env == {"MYPYPATH": "stubs"}
        assert data_check.label == "typesafety"
        assert data_check.requires_module == "pytest_mypy_plugins"
        assert data_check.interpreter == "python3"
        assert data_check.env == {"MYPYPATH": "stubs"}
        assert data_check.command == (
            "python3",
            "-m",
            "pytest",
            "--mypy-ini-file=mypy.ini",
            "tests/typesafety",
        )

    def test_tool_overrides(self, make_config: MakeConfig) -> None:
        config = make_config(
            tools={"mypy": {"required": True}, "flake8": {"executable": "flake9"}}
        )

        steps = {s.identifier: s for s in build_steps(config, ["a.py"])}

        assert steps["types"].tool.policy is ToolPolicy.REQUIRED
        assert steps["types"].tool.minimum_version == "0.981"
        assert steps["style"].tool.executable == "flake9"
        assert steps["style"].invocations[0].command[0] == "flake9"


class TestBuildToolSpecs:
    def test_tools_in_step_order(self, make_config: MakeConfig) -> None:
        specs = build_tool_specs(make_config())
        assert [s.name for s in specs] == ["python", "black", "flake8", "mypy"]

    def test_install_hints(self, make_config: MakeConfig) -> None:
        specs = {s.name: s for s in build_tool_specs(make_config())}
        assert specs["black"].install_hint == "Install: pip install black"

    def test_custom_install_hint(self, make_config: MakeConfig) -> None:
        config = make_config(tools={"black": {"install_hint": "Use pipx"}})
        specs = {s.name: s for s in build_tool_specs(config)}
        assert specs["black"].install_hint == "Use pipx"
