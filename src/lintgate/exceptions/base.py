from __future__ import annotations


class LintgateError(Exception):
    """Base exception class for all lintgate-specific errors.

    All custom exceptions in lintgate inherit from this class. This allows
    catching every lintgate error at the CLI boundary while letting system
    exceptions propagate naturally.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            report = orchestrator.run()
        except LintgateError as e:
            err_console.print(f"Error: {e.message}")
            sys.exit(1)
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the LintgateError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
