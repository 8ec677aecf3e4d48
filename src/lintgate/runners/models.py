"""Data models for tool invocation.

All models use frozen dataclasses with slots for immutability.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ExecutionResult"]


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """Result of executing a single tool command.

    Attributes:
        exit_status: Exit code from the command (0 = success).
        output: Combined stdout and stderr, in the order the tool wrote them.
        duration_ms: Execution time in milliseconds.
    """

    exit_status: int
    output: str
    duration_ms: int = 0

    @property
    def success(self) -> bool:
        """True if the command exited with status 0."""
        return self.exit_status == 0
