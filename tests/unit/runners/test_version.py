"""Tests for the minimum-version gate."""

from __future__ import annotations

import pytest

from lintgate.exceptions import VersionParseError
from lintgate.runners.version import (
    compare_versions,
    extract_version,
    parse_version,
    satisfies,
)


class TestParseVersion:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1", (1,)),
            ("3.10.0", (3, 10, 0)),
            ("v22.3.0", (22, 3, 0)),
            ("1.5.0rc1", (1, 5, 0)),
            ("0.981+dev.abc123", (0, 981)),
            ("  2.0 ", (2, 0)),
        ],
    )
    def test_parses_numeric_release(self, text: str, expected: tuple[int, ...]) -> None:
        assert parse_version(text) == expected

    @pytest.mark.parametrize("text", ["", "latest", "rc1", ".1.2", "version 1.0"])
    def test_malformed_raises(self, text: str) -> None:
        with pytest.raises(VersionParseError) as exc_info:
            parse_version(text)

        assert exc_info.value.text == text


class TestSatisfies:
    def test_numeric_not_lexicographic(self) -> None:
        assert satisfies("3.10.0", "3.9.0") is True
        assert satisfies("3.9.0", "3.10.0") is False

    def test_equal_versions_satisfy(self) -> None:
        assert satisfies("22.3.0", "22.3.0") is True

    def test_missing_components_are_zero(self) -> None:
        assert satisfies("3.9", "3.9.0") is True
        assert satisfies("3.9.0", "3.9") is True
        assert satisfies("3.9", "3.9.1") is False

    def test_suffixes_ignored(self) -> None:
        assert satisfies("1.0.0rc1", "1.0.0") is True

    def test_malformed_propagates(self) -> None:
        with pytest.raises(VersionParseError):
            satisfies("unknown", "1.0")


class TestCompareVersions:
    @pytest.mark.parametrize(
        ("left", "right", "expected"),
        [
            ("1.0", "1.0.0", 0),
            ("0.981", "0.991", -1),
            ("1.10", "1.9", 1),
            ("10", "9.99.99", 1),
        ],
    )
    def test_ordering(self, left: str, right: str, expected: int) -> None:
        assert compare_versions(left, right) == expected

    def test_antisymmetric(self) -> None:
        assert compare_versions("2.1", "2.10") == -compare_versions("2.10", "2.1")


class TestExtractVersion:
    @pytest.mark.parametrize(
        ("output", "expected"),
        [
            ("black, 23.1.0 (compiled: yes)\nPython (CPython) 3.11.4", "23.1.0"),
            ("mypy 1.5.1 (compiled: yes)", "1.5.1"),
            ("6.0.0 (mccabe: 0.7.0, pycodestyle: 2.10.0) CPython 3.11.4", "6.0.0"),
            ("Python 3.12.1", "3.12.1"),
            ("tool v2.4", "2.4"),
        ],
    )
    def test_finds_first_release(self, output: str, expected: str) -> None:
        assert extract_version(output) == expected

    def test_no_version_raises(self) -> None:
        with pytest.raises(VersionParseError):
            extract_version("command not recognised")

    def test_bare_number_is_not_a_version(self) -> None:
        with pytest.raises(VersionParseError):
            extract_version("build 2024")
