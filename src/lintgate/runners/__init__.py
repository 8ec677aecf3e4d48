"""Subprocess execution, availability probing and version gating."""

from __future__ import annotations

from lintgate.runners.invoker import ToolInvoker
from lintgate.runners.models import ExecutionResult
from lintgate.runners.probe import AvailabilityProbe
from lintgate.runners.version import (
    compare_versions,
    extract_version,
    parse_version,
    satisfies,
)

__all__ = [
    # Models
    "ExecutionResult",
    # Runners
    "AvailabilityProbe",
    "ToolInvoker",
    # Version gating
    "compare_versions",
    "extract_version",
    "parse_version",
    "satisfies",
]
