"""Reading the newline-delimited source list handed to the compile check."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["read_source_list"]


def read_source_list(lines: Iterable[str]) -> tuple[str, ...]:
    """Parse a newline-delimited list of source paths.

    Blank lines and surrounding whitespace are dropped. Order is kept and
    repeated paths are only listed once.

    Args:
        lines: Any iterable of lines, typically an open file or stdin.

    Returns:
        Source paths in first-seen order. May be empty; the step plan
        rejects an empty list.
    """
    paths = (line.strip() for line in lines)
    return tuple(dict.fromkeys(path for path in paths if path))
