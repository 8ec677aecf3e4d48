from __future__ import annotations

from lintgate.exceptions.base import LintgateError


class VersionParseError(LintgateError):
    """A version string is not a dotted numeric release.

    Attributes:
        message: Human-readable error message.
        text: The text that could not be parsed.
    """

    def __init__(self, message: str, text: str | None = None) -> None:
        """Initialize the VersionParseError.

        Args:
            message: Human-readable error message.
            text: The text that could not be parsed.
        """
        self.text = text
        super().__init__(message)
