"""Blocking tool invocation with combined output capture.

This module provides the ToolInvoker class, which runs one external command
at a time and waits for it to exit. There is no timeout: a hanging tool
blocks the run.
"""

from __future__ import annotations

import os
import subprocess
import time
from collections.abc import Mapping, Sequence
from pathlib import Path

from lintgate.exceptions import InvocationError, WorkingDirectoryError
from lintgate.logging import get_logger
from lintgate.runners.models import ExecutionResult

__all__ = ["ToolInvoker"]

logger = get_logger(__name__)


class ToolInvoker:
    """Execute commands synchronously with environment control.

    A non-zero exit status is a normal result. Only a failure to start the
    process raises.

    Attributes:
        cwd: Working directory for command execution.
        env: Additional environment variables merged over the parent env.

    Example:
        ```python
        invoker = ToolInvoker(cwd=Path("/project"))
        result = invoker.run(["flake8", "src"])
        if not result.success:
            print(result.output)
        ```
    """

    def __init__(
        self,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the ToolInvoker.

        Args:
            cwd: Working directory for commands. If None, uses current directory.
            env: Additional environment variables to merge with os.environ.
        """
        self._cwd = cwd
        self._extra_env = dict(env or {})

    @property
    def cwd(self) -> Path | None:
        """Working directory for command execution."""
        return self._cwd

    def _validate_cwd(self, cwd: Path | None) -> None:
        """Validate working directory exists.

        Raises:
            WorkingDirectoryError: If directory does not exist.
        """
        if cwd is not None and not cwd.is_dir():
            raise WorkingDirectoryError(
                f"Working directory does not exist: {cwd}",
                path=cwd,
            )

    def _build_env(self, extra_env: Mapping[str, str] | None = None) -> dict[str, str]:
        """Build environment by merging parent env with overrides."""
        env = os.environ.copy()
        env.update(self._extra_env)
        if extra_env:
            env.update(extra_env)
        return env

    def run(
        self,
        command: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
    ) -> ExecutionResult:
        """Execute a command and wait for it to exit.

        Args:
            command: Command and arguments as a sequence (no shell expansion).
            env: Additional environment variables for this command.

        Returns:
            ExecutionResult with exit status, combined output and duration.

        Raises:
            WorkingDirectoryError: If the working directory does not exist.
            InvocationError: If the process could not be started.
        """
        if not command:
            raise InvocationError("Cannot invoke an empty command", command=command)

        self._validate_cwd(self._cwd)
        effective_env = self._build_env(env)

        logger.debug("invoking", command=list(command))
        start_time = time.monotonic()
        try:
            completed = subprocess.run(
                list(command),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                cwd=self._cwd,
                env=effective_env,
                check=False,
            )
        except FileNotFoundError as e:
            raise InvocationError(
                f"Could not start {command[0]}: command not found", command=command
            ) from e
        except PermissionError as e:
            raise InvocationError(
                f"Could not start {command[0]}: permission denied", command=command
            ) from e
        except OSError as e:
            raise InvocationError(
                f"Could not start {command[0]}: {e}", command=command
            ) from e

        duration_ms = int((time.monotonic() - start_time) * 1000)
        output = completed.stdout.decode("utf-8", errors="replace")

        logger.debug(
            "invocation_finished",
            command=command[0],
            exit_status=completed.returncode,
            duration_ms=duration_ms,
        )
        return ExecutionResult(
            exit_status=completed.returncode,
            output=output,
            duration_ms=duration_ms,
        )
