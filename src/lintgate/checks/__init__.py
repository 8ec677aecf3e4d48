"""Check steps, the default step plan and the fail-fast orchestrator."""

from __future__ import annotations

from lintgate.checks.models import (
    CheckStep,
    Invocation,
    RunOutcome,
    RunReport,
    StepReport,
    ToolPolicy,
    ToolSpec,
)
from lintgate.checks.orchestrator import Orchestrator
from lintgate.checks.plan import build_steps, build_tool_specs
from lintgate.checks.protocols import NullReporter, StepReporter
from lintgate.checks.sources import read_source_list

__all__ = [
    # Models
    "CheckStep",
    "Invocation",
    "RunOutcome",
    "RunReport",
    "StepReport",
    "ToolPolicy",
    "ToolSpec",
    # Plan
    "build_steps",
    "build_tool_specs",
    "read_source_list",
    # Execution
    "NullReporter",
    "Orchestrator",
    "StepReporter",
]
