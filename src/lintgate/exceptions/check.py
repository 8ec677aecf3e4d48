"""Orchestration exceptions.

Errors raised while assembling or running the check sequence. Tool failures
are not exceptions: they are reported through ``RunOutcome.FAILED``.
"""

from __future__ import annotations

from lintgate.exceptions.base import LintgateError

__all__ = ["CheckError", "InputAbsentError", "RequiredToolMissingError"]


class CheckError(LintgateError):
    """Base exception for check orchestration errors."""

    pass


class InputAbsentError(CheckError):
    """No source files were supplied to the compilation check."""

    def __init__(self, message: str = "No source files found") -> None:
        super().__init__(message)


class RequiredToolMissingError(CheckError):
    """A mandatory tool is not installed.

    Attributes:
        message: Human-readable error message.
        tool: Name of the missing tool.
        hint: Optional installation hint.
    """

    def __init__(self, tool: str, hint: str | None = None) -> None:
        self.tool = tool
        self.hint = hint
        message = f"Required tool '{tool}' is not installed or not on PATH"
        if hint:
            message = f"{message}. {hint}"
        super().__init__(message)
