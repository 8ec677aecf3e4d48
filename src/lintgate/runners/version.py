"""Minimum-version gating for external tools.

Versions are compared as dotted numeric releases, component by component,
so ``3.9.0`` sorts before ``3.10.0``. Anything after the numeric release
(pre-release tags, local labels such as ``+g1234``) is ignored.

Example:
    >>> satisfies("3.10.0", "3.9.0")
    True
    >>> satisfies("3.9.0", "3.10.0")
    False
    >>> extract_version("black, 23.1.0 (compiled: yes)")
    '23.1.0'
"""

from __future__ import annotations

import re
from itertools import zip_longest

from lintgate.exceptions import VersionParseError

__all__ = [
    "compare_versions",
    "extract_version",
    "parse_version",
    "satisfies",
]

_RELEASE_PATTERN = re.compile(r"^\s*[vV]?(\d+(?:\.\d+)*)")

# A release token inside free-form ``--version`` output. Requires at least
# one dot so bare numbers (build ids, years) are not mistaken for versions.
_EMBEDDED_PATTERN = re.compile(r"(?<![\w.])[vV]?(\d+(?:\.\d+)+)")


def parse_version(text: str) -> tuple[int, ...]:
    """Parse a dotted numeric release into a tuple of integers.

    Args:
        text: Version string such as ``"1.5.1"`` or ``"v22.3.0rc1"``.

    Returns:
        Release components, e.g. ``(1, 5, 1)``.

    Raises:
        VersionParseError: If the text does not start with a numeric release.
    """
    match = _RELEASE_PATTERN.match(text)
    if match is None:
        raise VersionParseError(f"Malformed version string: {text!r}", text=text)
    return tuple(int(part) for part in match.group(1).split("."))


def compare_versions(left: str, right: str) -> int:
    """Compare two versions numerically.

    Shorter releases are padded with zeros, so ``"3.9"`` equals ``"3.9.0"``.

    Returns:
        -1, 0 or 1 as ``left`` is lower than, equal to or higher than ``right``.

    Raises:
        VersionParseError: If either version is malformed.
    """
    for a, b in zip_longest(parse_version(left), parse_version(right), fillvalue=0):
        if a != b:
            return -1 if a < b else 1
    return 0


def satisfies(provided: str, minimum: str) -> bool:
    """Return whether ``provided`` is at least ``minimum``.

    Raises:
        VersionParseError: If either version is malformed. Callers treat this
            as "requirement not satisfied".
    """
    return compare_versions(provided, minimum) >= 0


def extract_version(output: str) -> str:
    """Find the first release token in a tool's ``--version`` output.

    Handles the usual shapes: ``"mypy 1.5.1 (compiled: yes)"``,
    ``"black, 23.1.0 (compiled: yes)"``, ``"6.0.0 (mccabe: 0.7.0) CPython"``.

    Raises:
        VersionParseError: If no version-like token is present.
    """
    match = _EMBEDDED_PATTERN.search(output)
    if match is None:
        raise VersionParseError(
            f"No version found in output: {output.strip()[:200]!r}", text=output
        )
    return match.group(1)
