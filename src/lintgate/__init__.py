"""lintgate - run a fixed sequence of lint checks with one exit code."""

from __future__ import annotations

__version__ = "0.1.0"
