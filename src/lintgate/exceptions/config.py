from __future__ import annotations

from typing import Any

from lintgate.exceptions.base import LintgateError


class ConfigError(LintgateError):
    """lintgate.yaml, the user config or a LINTGATE_* variable is unusable.

    Covers a missing ``--config`` file, malformed YAML, a YAML document that
    is not a mapping and any field that fails validation (an unparseable
    minimum version, an empty target list). The CLI prints it and exits 1
    before any tool runs.

    Attributes:
        message: Human-readable error message.
        field: Dotted path of the offending field (e.g. "tools.black.minimum_version").
        value: The rejected value, shown to the user.

    Example:
        ```python
        raise ConfigError(
            "Invalid configuration: Malformed version string: 'latest'",
            field="tools.mypy.minimum_version",
            value="latest",
        )
        ```
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message)
