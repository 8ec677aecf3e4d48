"""Console rendering of orchestration progress.

Per step the reporter prints a start banner and then exactly one of: a
success line, a skip line with the reason, or a failure dump (captured
tool output, numeric status and the step's fix hint).
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from lintgate.checks.models import CheckStep, Invocation, RunReport, StepReport
from lintgate.cli.console import console as default_console
from lintgate.cli.output import format_error, format_warning

__all__ = ["ConsoleReporter"]


class ConsoleReporter:
    """StepReporter that writes the console output contract.

    Args:
        console: Rich console to print to. Defaults to stdout.
        quiet: Only print failures and the final summary.
    """

    def __init__(self, console: Console | None = None, quiet: bool = False) -> None:
        self._console = console or default_console
        self._quiet = quiet

    def _plain(self, text: str, style: str | None = None) -> None:
        self._console.print(
            text,
            style=style,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def step_started(self, step: CheckStep) -> None:
        if self._quiet:
            return
        title = escape(step.title)
        tool = escape(step.tool.name)
        self._console.print(
            f"[bold]==> {title}[/bold] [dim]({tool})[/dim]",
            emoji=False,
            highlight=False,
        )

    def step_skipped(self, step: CheckStep, report: StepReport) -> None:
        if self._quiet:
            return
        self._plain(
            format_warning(f"Skipping {step.title}: {report.message}"), style="yellow"
        )

    def invocation_skipped(
        self, step: CheckStep, invocation: Invocation, reason: str
    ) -> None:
        if self._quiet:
            return
        self._plain(
            format_warning(f"Skipping {invocation.label} in {step.title}: {reason}"),
            style="yellow",
        )

    def step_passed(self, step: CheckStep, report: StepReport) -> None:
        if self._quiet:
            return
        self._plain(f"✓ {step.title} passed", style="green")

    def step_failed(self, step: CheckStep, report: StepReport) -> None:
        if report.output:
            self._plain(report.output.rstrip("\n"))
        self._plain(
            format_error(
                f"{step.title} failed with exit status {report.exit_status}",
                details=[report.message] if report.message else None,
                suggestion=(
                    step.failure_hint if report.failed_invocation is not None else None
                ),
            ),
            style="red",
        )

    def run_finished(self, report: RunReport) -> None:
        if not report.success:
            return
        skipped = sum(1 for step in report.steps if step.outcome.is_skipped)
        summary = "All checks passed"
        if skipped:
            summary = f"{summary} ({skipped} skipped)"
        self._plain(f"✓ {summary}", style="bold green")
