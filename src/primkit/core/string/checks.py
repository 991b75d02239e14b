"""String checks: :func:`string_is` and the format predicates built on it.

Each format predicate is :func:`string_is` with a fixed, module-level
pattern; none of them adds logic of its own.  Patterns are anchored with
``\\A``/``\\Z`` so that a trailing newline never slips through, and use
explicit ``[0-9]`` classes so that non-ASCII digits are not accepted.
"""

from __future__ import annotations

import json
import re
from typing import Final

from primkit.core.conditions import ConditionKind, resolve_condition, search
from primkit.core.guards import MISSING, is_array, is_plain_object, is_string


def string_is(value: object, condition: object = MISSING) -> bool:
    """Return whether *value* is a string, optionally matching *condition*.

    * no condition: kind check only (every ``str`` qualifies, ``""`` too);
    * ``str``: exact equality;
    * compiled pattern: the pattern matches somewhere in the string;
    * unary callable: its result, as ``bool``;
    * anything else: ``False``.

    Examples::

        string_is("abc")                              # True
        string_is("abc", "abc")                       # True
        string_is("abc", re.compile("^a"))            # True
        string_is("abc", lambda s: len(s) == 3)       # True
    """
    if not is_string(value):
        return False

    cond = resolve_condition(condition)
    if cond.kind is ConditionKind.ABSENT:
        return True
    if cond.kind is ConditionKind.TEXT:
        return value == cond.value
    if cond.kind is ConditionKind.PATTERN:
        return search(cond.value, value)
    if cond.kind is ConditionKind.PREDICATE:
        return cond.is_unary and bool(cond.value(value))
    return False


# ---------------------------------------------------------------------------
# Format patterns
# ---------------------------------------------------------------------------

EMAIL_PATTERN: Final = re.compile(r"\A[^\s@]+@[^\s@]+\.[^\s@]+\Z")

URL_PATTERN: Final = re.compile(r"\Ahttps?://[\w-]+(\.[\w-]+)+[/#?]?.*\Z", re.ASCII)

# Mainland China mobile numbers.
PHONE_PATTERN: Final = re.compile(r"\A1[3-9][0-9]{9}\Z")

DIGITS_PATTERN: Final = re.compile(r"\A[0-9]+\Z")

UUID_PATTERN: Final = re.compile(
    r"\A[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}\Z",
    re.IGNORECASE,
)

HEX_COLOR_PATTERN: Final = re.compile(r"\A#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})\Z")

DATE_PATTERN: Final = re.compile(r"\A[0-9]{4}-[0-9]{2}-[0-9]{2}\Z")

TIME_PATTERN: Final = re.compile(r"\A([01][0-9]|2[0-3]):[0-5][0-9](:[0-5][0-9])?\Z")

_OCTET = r"(25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9]?[0-9])"

IPV4_PATTERN: Final = re.compile(rf"\A{_OCTET}(\.{_OCTET}){{3}}\Z")

IPV6_PATTERN: Final = re.compile(
    r"""
    \A(?:
        (?:[0-9a-f]{1,4}:){7}[0-9a-f]{1,4}
      | (?:[0-9a-f]{1,4}:){1,7}:
      | (?:[0-9a-f]{1,4}:){1,6}:[0-9a-f]{1,4}
      | (?:[0-9a-f]{1,4}:){1,5}(?::[0-9a-f]{1,4}){1,2}
      | (?:[0-9a-f]{1,4}:){1,4}(?::[0-9a-f]{1,4}){1,3}
      | (?:[0-9a-f]{1,4}:){1,3}(?::[0-9a-f]{1,4}){1,4}
      | (?:[0-9a-f]{1,4}:){1,2}(?::[0-9a-f]{1,4}){1,5}
      | [0-9a-f]{1,4}:(?::[0-9a-f]{1,4}){1,6}
      | :(?:(?::[0-9a-f]{1,4}){1,7}|:)
    )\Z
    """,
    re.IGNORECASE | re.VERBOSE,
)

HTML_TAG_PATTERN: Final = re.compile(r"<[^>]+>")

SLUG_PATTERN: Final = re.compile(r"\A[a-z0-9]+(?:-[a-z0-9]+)*\Z")


# ---------------------------------------------------------------------------
# Format predicates
# ---------------------------------------------------------------------------

def string_is_email(value: object) -> bool:
    return string_is(value, EMAIL_PATTERN)


def string_is_url(value: object) -> bool:
    """Return ``True`` for ``http://`` or ``https://`` URLs with a dotted host."""
    return string_is(value, URL_PATTERN)


def string_is_phone(value: object) -> bool:
    """Return ``True`` for 11-digit mainland China mobile numbers."""
    return string_is(value, PHONE_PATTERN)


def string_is_number(value: object) -> bool:
    """Return ``True`` for non-empty strings of ASCII digits only."""
    return string_is(value, DIGITS_PATTERN)


def string_is_json(value: object) -> bool:
    """Return ``True`` when the string parses to a JSON object or array.

    Scalars such as ``"1"`` or ``"null"`` are valid JSON but do not
    count.
    """
    if not string_is(value):
        return False
    try:
        parsed = json.loads(value)  # type: ignore[arg-type]
    except (ValueError, RecursionError):
        return False
    return is_plain_object(parsed) or is_array(parsed)


def string_is_uuid(value: object) -> bool:
    """Return ``True`` for RFC 4122 UUIDs (versions 1-5), any letter case."""
    return string_is(value, UUID_PATTERN)


def string_is_hex(value: object) -> bool:
    """Return ``True`` for hex colours: ``#fff``, ``fff``, ``#a1b2c3``."""
    return string_is(value, HEX_COLOR_PATTERN)


def string_is_date(value: object) -> bool:
    """Return ``True`` for ``YYYY-MM-DD`` shaped text (not calendar-checked)."""
    return string_is(value, DATE_PATTERN)


def string_is_time(value: object) -> bool:
    """Return ``True`` for 24-hour ``HH:mm`` or ``HH:mm:ss``."""
    return string_is(value, TIME_PATTERN)


def string_is_ipv4(value: object) -> bool:
    """Return ``True`` for dotted-quad IPv4 addresses without leading zeros.

    Example::

        string_is_ipv4("192.168.1.1")   # True
    """
    return string_is(value, IPV4_PATTERN)


def string_is_ipv6(value: object) -> bool:
    """Return ``True`` for full or ``::``-compressed IPv6 addresses.

    Example::

        string_is_ipv6("2001:0db8:85a3::8a2e:0370:7334")   # True
    """
    return string_is(value, IPV6_PATTERN)


def string_is_ip(value: object) -> bool:
    return string_is_ipv4(value) or string_is_ipv6(value)


def string_is_html(value: object) -> bool:
    """Return ``True`` when the string contains at least one tag."""
    return string_is(value, HTML_TAG_PATTERN)


def string_is_slug(value: object) -> bool:
    """Return ``True`` for URL slugs: lowercase letters and digits joined by ``-``.

    Examples::

        string_is_slug("my-article-title")   # True
        string_is_slug("Hello-World")        # False, uppercase
        string_is_slug("hello_world")        # False, underscore
        string_is_slug("")                   # False
    """
    return string_is(value, SLUG_PATTERN)
