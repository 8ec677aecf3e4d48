from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from lintgate.exceptions.base import LintgateError


class RunnerError(LintgateError):
    """Base exception for runner failures.

    Attributes:
        message: Human-readable error message.
    """

    pass


class WorkingDirectoryError(RunnerError):
    """Working directory does not exist or is not accessible.

    Attributes:
        message: Human-readable error message.
        path: The path that was not found.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Initialize the WorkingDirectoryError.

        Args:
            message: Human-readable error message.
            path: The path that was not found.
        """
        self.path = path
        super().__init__(message)


class InvocationError(RunnerError):
    """The subprocess mechanism could not start a tool.

    Distinct from a tool that ran and exited non-zero: that is a normal
    result, this is a failure to spawn the process at all (binary vanished,
    permission denied, other OS-level errors).

    Attributes:
        message: Human-readable error message.
        command: The command that could not be started.
    """

    def __init__(self, message: str, command: Sequence[str] | None = None) -> None:
        """Initialize the InvocationError.

        Args:
            message: Human-readable error message.
            command: The command that could not be started.
        """
        self.command = tuple(command) if command is not None else None
        super().__init__(message)
