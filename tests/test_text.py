"""Tests for the shared value rendering (core/text.py)."""

from __future__ import annotations

import math

import pytest

from primkit.core.guards import MISSING
from primkit.core.text import display_text


class TestDisplayText:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("abc", "abc"),
            (None, "null"),
            (MISSING, "undefined"),
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (10.0, "10"),
            (-0.0, "0"),
            (2.5, "2.5"),
            (1e21, "1e+21"),
            (math.nan, "NaN"),
            (math.inf, "Infinity"),
            (-math.inf, "-Infinity"),
        ],
    )
    def test_rendering(self, value: object, expected: str) -> None:
        assert display_text(value) == expected

    def test_huge_int_renders_as_infinity(self, int_digit_limit: int) -> None:
        assert display_text(10**5000) == "Infinity"
        assert display_text(-(10**5000)) == "-Infinity"

    def test_int_within_limit_is_exact(self, int_digit_limit: int) -> None:
        assert display_text(10**100) == "1" + "0" * 100
