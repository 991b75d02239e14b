"""Tests for ``string_has`` and the character-class predicates (core/string/contains.py)."""

from __future__ import annotations

import re

import pytest

from primkit.core.string.contains import (
    string_has,
    string_has_alpha,
    string_has_chinese,
    string_has_emoji,
    string_has_line_break,
    string_has_lowercase,
    string_has_number,
    string_has_space,
    string_has_symbol,
    string_has_uppercase,
)


class TestStringHas:
    def test_no_condition_means_non_empty(self) -> None:
        assert string_has("a")
        assert not string_has("")

    def test_substring(self) -> None:
        assert string_has("hello", "ell")
        assert string_has("hello", "")
        assert not string_has("hello", "xyz")

    def test_pattern(self) -> None:
        assert string_has("hello", re.compile("ell"))
        assert not string_has("hello", re.compile("^ell"))

    def test_function(self) -> None:
        assert string_has("hello", lambda s: s.startswith("h"))
        assert not string_has("hello", lambda s: s.endswith("x"))

    @pytest.mark.parametrize("value", [None, 42, ["hello"], b"hello"])
    def test_non_strings(self, value: object) -> None:
        assert not string_has(value)
        assert not string_has(value, "h")

    @pytest.mark.parametrize("condition", [None, 1, ["e"], str])
    def test_other_shapes_do_not_match(self, condition: object) -> None:
        assert not string_has("hello", condition)


@pytest.mark.parametrize(
    ("predicate", "present", "absent"),
    [
        (string_has_number, "abc1", "abc"),
        (string_has_alpha, "123a", "123!"),
        (string_has_chinese, "hello 世界", "hello world"),
        (string_has_space, "a b", "ab"),
        (string_has_uppercase, "aBc", "abc"),
        (string_has_lowercase, "ABc", "ABC"),
        (string_has_symbol, "a-b", "ab_c"),
        (string_has_emoji, "ok 😀", "ok :)"),
        (string_has_line_break, "a\r\nb", "a b"),
    ],
)
def test_character_class(predicate: object, present: str, absent: str) -> None:
    assert predicate(present)  # type: ignore[operator]
    assert not predicate(absent)  # type: ignore[operator]
    assert not predicate(None)  # type: ignore[operator]


def test_alpha_is_ascii_only() -> None:
    assert not string_has_alpha("ñ")


def test_emoji_ranges() -> None:
    assert string_has_emoji("🚀")
    assert string_has_emoji("🤖")
    assert not string_has_emoji("★")
