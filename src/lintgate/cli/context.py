"""CLI context and exit codes for lintgate."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

from lintgate.config import LintgateConfig

__all__ = [
    "ExitCode",
    "CLIContext",
]


class ExitCode(IntEnum):
    """Exit codes lintgate itself chooses.

    A failed check exits with the tool's own status instead; these cover
    the cases where no tool status applies.
    """

    SUCCESS = 0
    FAILURE = 1
    INTERRUPTED = 130


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Type-safe CLI context containing global options and configuration.

    Attributes:
        config: Loaded lintgate configuration.
        config_path: Path to config file (if specified via --config).
        verbosity: Verbosity level (0=default, 1=INFO, 2+=DEBUG).
        quiet: Suppress non-essential output.
    """

    config: LintgateConfig
    config_path: Path | None = None
    verbosity: int = 0
    quiet: bool = False
