"""lintgate exception hierarchy.

All exceptions can be imported from this package:
    from lintgate.exceptions import ConfigError, InvocationError
"""

from __future__ import annotations

# Base exception
from lintgate.exceptions.base import LintgateError

# Orchestration exceptions
from lintgate.exceptions.check import (
    CheckError,
    InputAbsentError,
    RequiredToolMissingError,
)

# Configuration exceptions
from lintgate.exceptions.config import ConfigError

# Runner-related exceptions
from lintgate.exceptions.runner import (
    InvocationError,
    RunnerError,
    WorkingDirectoryError,
)

# Version exceptions
from lintgate.exceptions.version import VersionParseError

__all__ = [
    # Base
    "LintgateError",
    # Checks
    "CheckError",
    "InputAbsentError",
    "RequiredToolMissingError",
    # Config
    "ConfigError",
    # Runner
    "InvocationError",
    "RunnerError",
    "WorkingDirectoryError",
    # Version
    "VersionParseError",
]
