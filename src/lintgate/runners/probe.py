"""Availability probes for tools and companion plugins."""

from __future__ import annotations

import importlib.util
import shutil
import subprocess
from typing import TYPE_CHECKING

from lintgate.logging import get_logger

if TYPE_CHECKING:
    from lintgate.checks.models import ToolSpec

__all__ = ["AvailabilityProbe"]

logger = get_logger(__name__)

# Exits 0 iff sys.argv[1] is importable by the interpreter running it
_FIND_SPEC_SCRIPT = """\
import importlib.util, sys
try:
    found = importlib.util.find_spec(sys.argv[1]) is not None
except (ImportError, ValueError):
    found = False
sys.exit(0 if found else 1)
"""


class AvailabilityProbe:
    """Determine whether tools are installed without running them.

    Both probes answer with a boolean and never raise. The only side
    effects are PATH lookups and import-spec queries, the latter run in a
    separate interpreter when one is named.
    """

    def executable_available(self, name: str) -> bool:
        """Check whether ``name`` resolves to an executable on PATH.

        Args:
            name: Executable name or path.
        """
        path = shutil.which(name)
        logger.debug("executable_probed", executable=name, path=path)
        return path is not None

    def module_available(self, module: str, interpreter: str | None = None) -> bool:
        """Check whether ``module`` can be imported.

        Args:
            module: Dotted module name, e.g. ``"pytest_mypy_plugins"``.
            interpreter: Interpreter that has to import it. None asks the
                interpreter running lintgate.
        """
        if interpreter is None:
            available = self._importable_here(module)
        else:
            available = self._importable_by(interpreter, module)
        logger.debug(
            "module_probed",
            module=module,
            interpreter=interpreter,
            available=available,
        )
        return available

    @staticmethod
    def _importable_here(module: str) -> bool:
        try:
            return importlib.util.find_spec(module) is not None
        except (ImportError, ValueError):
            # find_spec imports parent packages of dotted names
            return False

    @staticmethod
    def _importable_by(interpreter: str, module: str) -> bool:
        try:
            completed = subprocess.run(
                [interpreter, "-c", _FIND_SPEC_SCRIPT, module],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError as e:
            logger.debug("module_probe_failed", interpreter=interpreter, error=str(e))
            return False
        return completed.returncode == 0

    def is_available(self, tool: ToolSpec) -> bool:
        """Check whether the tool's executable is installed."""
        return self.executable_available(tool.executable)
