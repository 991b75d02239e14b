"""String content checks: :func:`string_has` and character-class predicates."""

from __future__ import annotations

import re
from typing import Final

from primkit.core.conditions import ConditionKind, resolve_condition, search
from primkit.core.guards import MISSING
from primkit.core.string.checks import string_is


def string_has(value: object, condition: object = MISSING) -> bool:
    """Return whether the string contains *condition*.

    * no condition: the string is non-empty;
    * ``str``: substring containment;
    * compiled pattern: the pattern matches somewhere;
    * one-argument callable: its result for the whole string, as ``bool``;
    * anything else: ``False``.

    Non-strings always answer ``False``.

    Examples::

        string_has("hello", "ell")                         # True
        string_has("hello", re.compile("ell"))             # True
        string_has("hello", lambda s: s.startswith("h"))   # True
        string_has("")                                     # False
    """
    if not string_is(value):
        return False
    text: str = value  # type: ignore[assignment]

    cond = resolve_condition(condition)
    if cond.kind is ConditionKind.ABSENT:
        return len(text) > 0
    if cond.kind is ConditionKind.TEXT:
        return cond.value in text
    if cond.kind is ConditionKind.PATTERN:
        return search(cond.value, text)
    if cond.kind is ConditionKind.PREDICATE:
        return cond.is_unary and bool(cond.value(text))
    return False


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------

DIGIT: Final = re.compile(r"[0-9]")
ALPHA: Final = re.compile(r"[a-zA-Z]")
CHINESE: Final = re.compile(r"[\u4e00-\u9fa5]")
SPACE: Final = re.compile(r"\s")
UPPERCASE: Final = re.compile(r"[A-Z]")
LOWERCASE: Final = re.compile(r"[a-z]")
SYMBOL: Final = re.compile(r"""[!@#$%^&*(),.?":{}|<>\-+=\\\[\]~]""")
EMOJI: Final = re.compile(r"[\U0001F600-\U0001F64F\U0001F300-\U0001F6FF\U0001F900-\U0001F9FF]")
LINE_BREAK: Final = re.compile(r"[\r\n]")


def string_has_number(value: object) -> bool:
    """Return ``True`` when the string contains an ASCII digit."""
    return string_has(value, DIGIT)


def string_has_alpha(value: object) -> bool:
    """Return ``True`` when the string contains an ASCII letter."""
    return string_has(value, ALPHA)


def string_has_chinese(value: object) -> bool:
    """Return ``True`` when the string contains a CJK unified ideograph."""
    return string_has(value, CHINESE)


def string_has_space(value: object) -> bool:
    return string_has(value, SPACE)


def string_has_uppercase(value: object) -> bool:
    return string_has(value, UPPERCASE)


def string_has_lowercase(value: object) -> bool:
    return string_has(value, LOWERCASE)


def string_has_symbol(value: object) -> bool:
    """Return ``True`` when the string contains ASCII punctuation such as ``!`` or ``-``."""
    return string_has(value, SYMBOL)


def string_has_emoji(value: object) -> bool:
    """Return ``True`` for emoticons, pictographs, transport and supplemental symbols."""
    return string_has(value, EMOJI)


def string_has_line_break(value: object) -> bool:
    return string_has(value, LINE_BREAK)
