"""lintgate CLI commands."""

from __future__ import annotations

from lintgate.cli.commands.run import run
from lintgate.cli.commands.steps import steps
from lintgate.cli.commands.tools import tools

__all__ = ["run", "steps", "tools"]
