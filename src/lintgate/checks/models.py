"""Data models for check steps and their outcomes.

This module defines immutable, frozen dataclasses for representing:
- Tool gating policy (ToolPolicy, ToolSpec)
- Check stages (Invocation, CheckStep)
- Per-step and aggregate results (RunOutcome, StepReport, RunReport)

All models use frozen dataclasses with slots for immutability.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

__all__ = [
    "ToolPolicy",
    "ToolSpec",
    "Invocation",
    "CheckStep",
    "RunOutcome",
    "StepReport",
    "RunReport",
]


class ToolPolicy(str, Enum):
    """What happens when a step's tool is not installed.

    Values:
        REQUIRED: Abort the whole run with a hard error.
        OPTIONAL: Skip the step with a warning and continue.
    """

    REQUIRED = "required"
    OPTIONAL = "optional"


@dataclass(frozen=True, slots=True)
class ToolSpec:
    """An external tool and its gating policy.

    Attributes:
        name: Display name (e.g., "black").
        executable: Name or path probed on PATH and used as argv[0].
        minimum_version: Lowest acceptable release, or None for presence-only.
        policy: Skip-vs-abort policy when the tool is absent.
        version_args: Arguments that make the tool print its version.
        install_hint: Optional remediation shown when the tool is missing.
    """

    name: str
    executable: str
    minimum_version: str | None = None
    policy: ToolPolicy = ToolPolicy.REQUIRED
    version_args: tuple[str, ...] = ("--version",)
    install_hint: str | None = None

    @property
    def required(self) -> bool:
        """True if a missing tool aborts the run."""
        return self.policy is ToolPolicy.REQUIRED

    @property
    def version_command(self) -> tuple[str, ...]:
        """Command that prints the tool's version."""
        return (self.executable, *self.version_args)


@dataclass(frozen=True, slots=True)
class Invocation:
    """One command run as part of a check step.

    Attributes:
        label: Short name used in output (e.g., "mypy", "typesafety").
        command: Command and arguments (argv[0] first).
        env: Environment overrides for this command only.
        requires_module: Companion plugin that must be importable; when it is
            missing only this invocation is skipped.
        interpreter: Interpreter that must import ``requires_module``, usually
            the one the command runs under. None means lintgate's own.

    Raises:
        ValueError: If command is empty.
    """

    label: str
    command: tuple[str, ...]
    env: Mapping[str, str] = field(default_factory=dict, hash=False)
    requires_module: str | None = None
    interpreter: str | None = None

    def __post_init__(self) -> None:
        """Validate and freeze the invocation."""
        if not self.command:
            raise ValueError("Command tuple cannot be empty")
        object.__setattr__(self, "env", MappingProxyType(dict(self.env)))


@dataclass(frozen=True, slots=True)
class CheckStep:
    """One logical lint stage bound to a tool and its invocations.

    Attributes:
        identifier: Stable machine name (e.g., "format").
        title: Human-readable name used in banners (e.g., "Formatting").
        tool: The tool whose availability and version gate the step.
        invocations: Commands run in order; the first non-zero one fails the step.
        failure_hint: Optional message printed after a failure dump.

    Example:
        >>> step = CheckStep(
        ...     identifier="style",
        ...     title="Style",
        ...     tool=ToolSpec(name="flake8", executable="flake8"),
        ...     invocations=(Invocation(label="flake8", command=("flake8", ".")),),
        ... )
        >>> step.tool.required
        True
    """

    identifier: str
    title: str
    tool: ToolSpec
    invocations: tuple[Invocation, ...]
    failure_hint: str | None = None

    def __post_init__(self) -> None:
        if not self.invocations:
            raise ValueError(f"Step '{self.identifier}' has no invocations")


class RunOutcome(str, Enum):
    """Per-step result classification."""

    PASSED = "passed"
    SKIPPED_MISSING_TOOL = "skipped_missing_tool"
    SKIPPED_VERSION_TOO_LOW = "skipped_version_too_low"
    FAILED = "failed"

    @property
    def is_skipped(self) -> bool:
        return self in (
            RunOutcome.SKIPPED_MISSING_TOOL,
            RunOutcome.SKIPPED_VERSION_TOO_LOW,
        )

    @property
    def is_terminal(self) -> bool:
        """True if this outcome halts the run."""
        return self is RunOutcome.FAILED


@dataclass(frozen=True, slots=True)
class StepReport:
    """Result of executing a single check step.

    Attributes:
        identifier: Identifier of the step.
        title: Title of the step.
        outcome: Classification of the result.
        message: Human-readable summary (skip reason, failure reason).
        exit_status: Exit status of the failing invocation, 1 for a missing
            required tool, 0 otherwise.
        output: Captured output of the failing invocation, if any.
        skipped_invocations: Labels of invocations skipped for a missing plugin.
        failed_invocation: Label of the invocation that exited non-zero, if any.
        duration_ms: Execution time in milliseconds.
    """

    identifier: str
    title: str
    outcome: RunOutcome
    message: str = ""
    exit_status: int = 0
    output: str = ""
    skipped_invocations: tuple[str, ...] = ()
    failed_invocation: str | None = None
    duration_ms: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "identifier": self.identifier,
            "title": self.title,
            "outcome": self.outcome.value,
            "message": self.message,
            "exit_status": self.exit_status,
            "output": self.output,
            "skipped_invocations": list(self.skipped_invocations),
            "failed_invocation": self.failed_invocation,
            "duration_ms": self.duration_ms,
        }


@dataclass(frozen=True, slots=True)
class RunReport:
    """Aggregated results across all steps that were processed.

    Steps after a failure are absent: they never ran.

    Attributes:
        steps: Reports in execution order.
        total_duration_ms: Total execution time across all steps.
    """

    steps: tuple[StepReport, ...]
    total_duration_ms: int = 0

    @property
    def failed_step(self) -> StepReport | None:
        """The step that halted the run, if any."""
        for step in self.steps:
            if step.outcome.is_terminal:
                return step
        return None

    @property
    def success(self) -> bool:
        """True if every processed step passed or was skipped."""
        return self.failed_step is None

    @property
    def exit_code(self) -> int:
        """Process exit code: 0 on success, else the failed step's status."""
        failed = self.failed_step
        if failed is None:
            return 0
        status = failed.exit_status
        if status < 0:
            # Killed by a signal: use the shell convention 128 + signum
            return 128 - status
        # A failing tool must never map to a success exit code
        return status or 1

    @property
    def outcomes(self) -> tuple[RunOutcome, ...]:
        return tuple(step.outcome for step in self.steps)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for JSON output."""
        return {
            "success": self.success,
            "exit_code": self.exit_code,
            "steps": [step.to_dict() for step in self.steps],
            "total_duration_ms": self.total_duration_ms,
        }
