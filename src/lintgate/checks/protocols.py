"""Protocol for receiving orchestration progress."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lintgate.checks.models import CheckStep, Invocation, RunReport, StepReport

__all__ = ["StepReporter", "NullReporter"]


@runtime_checkable
class StepReporter(Protocol):
    """Receives step transitions in the order they happen.

    The console reporter in ``lintgate.cli.reporter`` implements the output
    contract on top of these callbacks.
    """

    def step_started(self, step: CheckStep) -> None: ...

    def step_skipped(self, step: CheckStep, report: StepReport) -> None: ...

    def invocation_skipped(
        self, step: CheckStep, invocation: Invocation, reason: str
    ) -> None: ...

    def step_passed(self, step: CheckStep, report: StepReport) -> None: ...

    def step_failed(self, step: CheckStep, report: StepReport) -> None: ...

    def run_finished(self, report: RunReport) -> None: ...


class NullReporter:
    """Reporter that discards every notification."""

    def step_started(self, step: CheckStep) -> None:
        pass

    def step_skipped(self, step: CheckStep, report: StepReport) -> None:
        pass

    def invocation_skipped(
        self, step: CheckStep, invocation: Invocation, reason: str
    ) -> None:
        pass

    def step_passed(self, step: CheckStep, report: StepReport) -> None:
        pass

    def step_failed(self, step: CheckStep, report: StepReport) -> None:
        pass

    def run_finished(self, report: RunReport) -> None:
        pass
