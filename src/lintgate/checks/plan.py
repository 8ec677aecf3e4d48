"""The fixed, ordered list of checks lintgate runs.

Order: compile, format, style, types. The order is part of the output
contract and never depends on configuration; configuration only decides
tool names, minimum versions, policies and forwarded config-file paths.
"""

from __future__ import annotations

from collections.abc import Sequence

from lintgate.checks.models import CheckStep, Invocation, ToolPolicy, ToolSpec
from lintgate.config import LintgateConfig, ToolConfig
from lintgate.constants import (
    BLACK,
    FLAKE8,
    MYPY,
    MYPY_PLUGINS_MODULE,
    MYPYPATH_ENV_VAR,
    TOOL_INSTALLATION_HINTS,
)
from lintgate.exceptions import InputAbsentError

__all__ = ["build_steps", "build_tool_specs"]


def _tool_spec(name: str, tool: ToolConfig) -> ToolSpec:
    return ToolSpec(
        name=name,
        executable=tool.executable,
        minimum_version=tool.minimum_version,
        policy=ToolPolicy.REQUIRED if tool.required else ToolPolicy.OPTIONAL,
        install_hint=tool.install_hint or TOOL_INSTALLATION_HINTS.get(name),
    )


def _interpreter_spec(config: LintgateConfig) -> ToolSpec:
    return ToolSpec(
        name="python",
        executable=config.python,
        policy=ToolPolicy.REQUIRED,
        install_hint=TOOL_INSTALLATION_HINTS["python"],
    )


def build_tool_specs(config: LintgateConfig) -> tuple[ToolSpec, ...]:
    """Tool specs in step order, for reporting without running any checks."""
    return (
        _interpreter_spec(config),
        _tool_spec(BLACK, config.tools.black),
        _tool_spec(FLAKE8, config.tools.flake8),
        _tool_spec(MYPY, config.tools.mypy),
    )


def _compile_step(config: LintgateConfig, sources: Sequence[str]) -> CheckStep:
    return CheckStep(
        identifier="compile",
        title="Compilation",
        tool=_interpreter_spec(config),
        invocations=(
            Invocation(
                label="py_compile",
                command=(config.python, "-m", "py_compile", *sources),
            ),
        ),
    )


def _format_step(config: LintgateConfig) -> CheckStep:
    tool = _tool_spec(BLACK, config.tools.black)
    command = [tool.executable, "--check", "--diff"]
    if config.black_config is not None:
        command += ["--config", config.black_config]
    return CheckStep(
        identifier="format",
        title="Formatting",
        tool=tool,
        invocations=(
            Invocation(label=BLACK, command=(*command, *config.targets)),
        ),
        failure_hint=(
            "Run the reformat script to fix formatting: "
            f"{config.reformat_command}"
        ),
    )


def _style_step(config: LintgateConfig) -> CheckStep:
    tool = _tool_spec(FLAKE8, config.tools.flake8)
    command = [tool.executable]
    if config.flake8_config is not None:
        command += ["--config", config.flake8_config]
    return CheckStep(
        identifier="style",
        title="Style",
        tool=tool,
        invocations=(
            Invocation(label=FLAKE8, command=(*command, *config.targets)),
        ),
    )


def _types_step(config: LintgateConfig) -> CheckStep:
    tool = _tool_spec(MYPY, config.tools.mypy)
    env = {MYPYPATH_ENV_VAR: config.mypy_path} if config.mypy_path else {}

    command = [tool.executable]
    if config.mypy_config is not None:
        command += ["--config-file", config.mypy_config]
    invocations = [
        Invocation(label=MYPY, command=(*command, *config.targets), env=env)
    ]

    if config.typesafety_dir is not None:
        data_check = [config.python, "-m", "pytest"]
        if config.mypy_config is not None:
            data_check.append(f"--mypy-ini-file={config.mypy_config}")
        data_check.append(config.typesafety_dir)
        invocations.append(
            Invocation(
                label="typesafety",
                command=tuple(data_check),
                env=env,
                requires_module=MYPY_PLUGINS_MODULE,
                interpreter=config.python,
            )
        )

    return CheckStep(
        identifier="types",
        title="Type annotations",
        tool=tool,
        invocations=tuple(invocations),
    )


def build_steps(
    config: LintgateConfig, sources: Sequence[str]
) -> tuple[CheckStep, ...]:
    """Build the ordered check steps for one run.

    Args:
        config: Immutable configuration.
        sources: Source files for the compilation check.

    Returns:
        Steps in execution order.

    Raises:
        InputAbsentError: If ``sources`` is empty.
    """
    if not sources:
        raise InputAbsentError()
    return (
        _compile_step(config, sources),
        _format_step(config),
        _style_step(config),
        _types_step(config),
    )
