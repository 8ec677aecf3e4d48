"""Fail-fast execution of the check sequence.

Each step moves through availability probing, optional version probing and
invocation. A missing optional tool or an outdated tool skips the step; a
missing required tool or a non-zero invocation fails it and nothing after
it runs.
"""

from __future__ import annotations

import time
from collections.abc import Sequence

from lintgate.checks.models import (
    CheckStep,
    RunOutcome,
    RunReport,
    StepReport,
    ToolSpec,
)
from lintgate.checks.protocols import NullReporter, StepReporter
from lintgate.exceptions import RequiredToolMissingError, VersionParseError
from lintgate.logging import bind_context, clear_context, get_logger
from lintgate.runners.invoker import ToolInvoker
from lintgate.runners.probe import AvailabilityProbe
from lintgate.runners.version import extract_version, satisfies

__all__ = ["Orchestrator"]

logger = get_logger(__name__)


def _elapsed_ms(start_time: float) -> int:
    return int((time.monotonic() - start_time) * 1000)


class Orchestrator:
    """Run check steps one at a time, stopping at the first failure.

    Example:
        ```python
        steps = build_steps(config, sources)
        report = Orchestrator(steps, reporter=ConsoleReporter()).run()
        sys.exit(report.exit_code)
        ```
    """

    def __init__(
        self,
        steps: Sequence[CheckStep],
        invoker: ToolInvoker | None = None,
        probe: AvailabilityProbe | None = None,
        reporter: StepReporter | None = None,
    ) -> None:
        self._steps = tuple(steps)
        self._invoker = invoker or ToolInvoker()
        self._probe = probe or AvailabilityProbe()
        self._reporter = reporter or NullReporter()

    @property
    def steps(self) -> tuple[CheckStep, ...]:
        return self._steps

    def run(self) -> RunReport:
        """Execute all steps in order and return the aggregate report.

        Raises:
            InvocationError: If a tool process could not be started.
        """
        start_time = time.monotonic()
        reports: list[StepReport] = []

        for step in self._steps:
            bind_context(step=step.identifier)
            try:
                report = self._run_step(step)
            finally:
                clear_context()
            reports.append(report)

            if report.outcome.is_terminal:
                logger.warning(
                    "step_failed",
                    step=step.identifier,
                    exit_status=report.exit_status,
                    remaining=len(self._steps) - len(reports),
                )
                break

        run_report = RunReport(
            steps=tuple(reports),
            total_duration_ms=_elapsed_ms(start_time),
        )
        logger.info(
            "run_finished",
            success=run_report.success,
            outcomes=[outcome.value for outcome in run_report.outcomes],
        )
        self._reporter.run_finished(run_report)
        return run_report

    def _run_step(self, step: CheckStep) -> StepReport:
        start_time = time.monotonic()
        tool = step.tool
        self._reporter.step_started(step)

        if not self._probe.is_available(tool):
            if tool.required:
                error = RequiredToolMissingError(tool.name, tool.install_hint)
                report = StepReport(
                    identifier=step.identifier,
                    title=step.title,
                    outcome=RunOutcome.FAILED,
                    message=error.message,
                    exit_status=1,
                    duration_ms=_elapsed_ms(start_time),
                )
                self._reporter.step_failed(step, report)
                return report

            report = StepReport(
                identifier=step.identifier,
                title=step.title,
                outcome=RunOutcome.SKIPPED_MISSING_TOOL,
                message=self._missing_tool_message(tool),
                duration_ms=_elapsed_ms(start_time),
            )
            self._reporter.step_skipped(step, report)
            return report

        if tool.minimum_version is not None:
            reason = self._version_shortfall(tool, tool.minimum_version)
            if reason is not None:
                report = StepReport(
                    identifier=step.identifier,
                    title=step.title,
                    outcome=RunOutcome.SKIPPED_VERSION_TOO_LOW,
                    message=reason,
                    duration_ms=_elapsed_ms(start_time),
                )
                self._reporter.step_skipped(step, report)
                return report

        skipped: list[str] = []
        for invocation in step.invocations:
            module = invocation.requires_module
            if module is not None and not self._probe.module_available(
                module, interpreter=invocation.interpreter
            ):
                skipped.append(invocation.label)
                self._reporter.invocation_skipped(
                    step, invocation, f"{module} is not installed"
                )
                continue

            logger.debug("invocation_started", invocation=invocation.label)
            result = self._invoker.run(invocation.command, env=invocation.env)
            if not result.success:
                report = StepReport(
                    identifier=step.identifier,
                    title=step.title,
                    outcome=RunOutcome.FAILED,
                    message=(
                        f"{invocation.label} exited with status {result.exit_status}"
                    ),
                    exit_status=result.exit_status,
                    output=result.output,
                    skipped_invocations=tuple(skipped),
                    failed_invocation=invocation.label,
                    duration_ms=_elapsed_ms(start_time),
                )
                self._reporter.step_failed(step, report)
                return report

        report = StepReport(
            identifier=step.identifier,
            title=step.title,
            outcome=RunOutcome.PASSED,
            skipped_invocations=tuple(skipped),
            duration_ms=_elapsed_ms(start_time),
        )
        self._reporter.step_passed(step, report)
        return report

    @staticmethod
    def _missing_tool_message(tool: ToolSpec) -> str:
        if tool.minimum_version is not None:
            message = (
                f"{tool.name} is not installed "
                f"(version {tool.minimum_version} or newer is required)"
            )
        else:
            message = f"{tool.name} is not installed"
        if tool.install_hint:
            message = f"{message}. {tool.install_hint}"
        return message

    def _version_shortfall(self, tool: ToolSpec, minimum: str) -> str | None:
        """Return why the installed tool fails the version gate, or None.

        An undeterminable version counts as not satisfied.
        """
        result = self._invoker.run(tool.version_command)
        if not result.success:
            return (
                f"could not determine the {tool.name} version "
                f"('{' '.join(tool.version_command)}' exited with status "
                f"{result.exit_status}); {minimum} or newer is required"
            )
        try:
            found = extract_version(result.output)
            if satisfies(found, minimum):
                logger.debug("version_satisfied", tool=tool.name, version=found)
                return None
        except VersionParseError as e:
            return (
                f"could not determine the {tool.name} version ({e.message}); "
                f"{minimum} or newer is required"
            )
        return f"{tool.name} {found} is older than the required {minimum}"
