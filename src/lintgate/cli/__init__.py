"""CLI utilities for lintgate.

This module provides CLI-specific utilities including context management,
output formatting and the console reporter.
"""

from __future__ import annotations

from lintgate.cli.context import CLIContext, ExitCode
from lintgate.cli.output import OutputFormat
from lintgate.cli.reporter import ConsoleReporter

__all__ = [
    "CLIContext",
    "ConsoleReporter",
    "ExitCode",
    "OutputFormat",
]
