"""lintgate constants: default tool names, minimum versions and hints.

Single source of truth for the defaults baked into the configuration
model. Override any of them through ``lintgate.yaml`` or ``LINTGATE_*``
environment variables rather than editing this module.
"""

from __future__ import annotations

# =============================================================================
# Interpreter
# =============================================================================

#: Interpreter used for ``py_compile`` and the type-stub data check
DEFAULT_PYTHON: str = "python3"

#: Conventional environment variable naming the interpreter to use
PYTHON_ENV_VAR: str = "PYTHON"

#: Module search path override forwarded to the type checker
MYPYPATH_ENV_VAR: str = "MYPYPATH"

# =============================================================================
# Tools
# =============================================================================

BLACK: str = "black"
FLAKE8: str = "flake8"
MYPY: str = "mypy"

#: Minimum black release with a stable ``--check --diff`` output
BLACK_MINIMUM_VERSION: str = "22.3.0"

#: Minimum mypy release understood by the type-stub data check
MYPY_MINIMUM_VERSION: str = "0.981"

#: Companion plugin needed by the type-stub data check
MYPY_PLUGINS_MODULE: str = "pytest_mypy_plugins"

#: Script contributors run to fix formatting failures
DEFAULT_REFORMAT_COMMAND: str = "scripts/reformat.sh"

#: Remediation hints for the tools lintgate knows about
TOOL_INSTALLATION_HINTS: dict[str, str] = {
    "python": "Install Python from https://www.python.org/downloads/",
    "python3": "Install Python from https://www.python.org/downloads/",
    BLACK: "Install: pip install black",
    FLAKE8: "Install: pip install flake8",
    MYPY: "Install: pip install mypy",
    MYPY_PLUGINS_MODULE: "Install: pip install pytest-mypy-plugins",
}

# =============================================================================
# Configuration files
# =============================================================================

#: Project configuration file looked up in the working directory
PROJECT_CONFIG_FILENAME: str = "lintgate.yaml"
