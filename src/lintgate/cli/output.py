"""Plain-text message shapes shared by the reporter and the commands.

Every message is a prefixed line (``Error:``, ``Warning:``) so CI logs can
be grepped. Indented detail lines and a trailing ``Suggestion:`` line
follow errors when there is something actionable to say.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from enum import Enum
from typing import Any

__all__ = [
    "OutputFormat",
    "format_error",
    "format_json",
    "format_warning",
]


class OutputFormat(str, Enum):
    """Supported output formats for ``lintgate run``.

    Values:
        TEXT: Step banners and failure dumps as they happen (default).
        JSON: Machine-readable run report printed once the run ends.
    """

    TEXT = "text"
    JSON = "json"


def format_error(
    message: str,
    details: Iterable[str] | None = None,
    suggestion: str | None = None,
) -> str:
    """Render an error block.

    Example:
        >>> print(format_error(
        ...     "Formatting failed with exit status 1",
        ...     details=["black exited with status 1"],
        ...     suggestion="Run the reformat script to fix formatting",
        ... ))
        Error: Formatting failed with exit status 1
          black exited with status 1
        Suggestion: Run the reformat script to fix formatting
    """
    block = [f"Error: {message}", *(f"  {line}" for line in details or ())]
    if suggestion:
        block.append(f"Suggestion: {suggestion}")
    return "\n".join(block)


def format_warning(message: str) -> str:
    """Render a single warning line, e.g. for a skipped step."""
    return f"Warning: {message}"


def format_json(data: Any) -> str:
    """Serialize a report for ``--format json``."""
    return json.dumps(data, indent=2)
