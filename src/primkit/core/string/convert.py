"""String conversions.

Two groups live here:

* **Rewrites** (upper, camel, slug, constant, title case, split) cannot
  fail on a string; a non-string yields ``None``.
* **Parsers** (number, boolean, date, JSON) accept a fixed input
  language.  Anything outside it is reported once through the
  diagnostic logger and answered with ``None``; nothing is raised.

The parsers log to this module's logger unless the caller passes its
own through the keyword-only ``logger`` argument.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any, Final, TypeVar

from primkit.core.protocols import DiagnosticLogger
from primkit.core.string.checks import string_is

logger = logging.getLogger(__name__)

T = TypeVar("T")


def string_to(value: object, convert: Callable[[str], T]) -> T | None:
    """Return ``convert(value)`` for strings, ``None`` for anything else."""
    if not string_is(value):
        return None
    return convert(value)  # type: ignore[arg-type]


def _channel(custom: DiagnosticLogger | None) -> DiagnosticLogger:
    return custom if custom is not None else logger


# ---------------------------------------------------------------------------
# Rewrites
# ---------------------------------------------------------------------------

_CAMEL_BREAK = re.compile(r"[-_\s]+(.)?")
_SLUG_DROP = re.compile(r"[^\w\s-]", re.ASCII)
_SLUG_SPACE = re.compile(r"\s+")
_CONSTANT_BREAK = re.compile(r"[-\s]+")
_LOWER_ASCII = re.compile(r"[a-z]")
_WORD_START = re.compile(r"(?:^|\s|[-_])\w", re.ASCII)


def string_to_upper(value: object) -> str | None:
    return string_to(value, str.upper)


def _camel_case(text: str) -> str:
    joined = _CAMEL_BREAK.sub(lambda m: m.group(1).upper() if m.group(1) else "", text)
    return joined[:1].lower() + joined[1:]


def string_to_camel_case(value: object) -> str | None:
    """Drop ``-``, ``_`` and whitespace runs, upper-casing the next letter.

    Example::

        string_to_camel_case("hello-world_foo bar")   # "helloWorldFooBar"
    """
    return string_to(value, _camel_case)


def _slug(text: str) -> str:
    cleaned = _SLUG_DROP.sub("", text.strip().lower())
    return _SLUG_SPACE.sub("-", cleaned)


def string_to_slug(value: object) -> str | None:
    """Lower-case, drop punctuation, and join whitespace runs with ``-``.

    Example::

        string_to_slug("  Hello, World! ")   # "hello-world"
    """
    return string_to(value, _slug)


def _constant(text: str) -> str:
    underscored = _CONSTANT_BREAK.sub("_", text.strip())
    return _LOWER_ASCII.sub(lambda m: m.group(0).upper(), underscored)


def string_to_constant(value: object) -> str | None:
    """Rewrite as ``CONSTANT_CASE``: ``"max-retry count"`` → ``"MAX_RETRY_COUNT"``."""
    return string_to(value, _constant)


def _title_case(text: str) -> str:
    return _WORD_START.sub(lambda m: m.group(0).upper(), text.lower())


def string_to_title_case(value: object) -> str | None:
    """Upper-case the first letter after the start, whitespace, ``-`` or ``_``."""
    return string_to(value, _title_case)


def string_to_array(value: object, delimiter: str = ",") -> list[str] | None:
    """Split on *delimiter*; an empty delimiter splits into characters.

    Example::

        string_to_array("a,b,c")   # ["a", "b", "c"]
    """
    if delimiter == "":
        return string_to(value, list)
    return string_to(value, lambda text: text.split(delimiter))


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------

TRUTHY: Final[frozenset[str]] = frozenset({"true", "1", "yes", "on", "ok", "success"})
FALSY: Final[frozenset[str]] = frozenset({"false", "0", "no", "off", "fail", "error"})

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RADIX = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")
_INFINITY = re.compile(r"[+-]?Infinity")

_DATE_PARSERS: Final[tuple[Callable[[str], datetime], ...]] = (
    datetime.fromisoformat,
    parsedate_to_datetime,
)


def _coerce_number(text: str) -> int | float | None:
    """Numeric coercion of *text*; ``None`` when it is not a number literal."""
    stripped = text.strip()
    if not stripped:
        return 0
    if _INTEGER.fullmatch(stripped):
        try:
            return int(stripped, 10)
        except ValueError:
            # past sys.get_int_max_str_digits()
            return float(stripped)
    if _RADIX.fullmatch(stripped):
        return int(stripped, 0)
    if _DECIMAL.fullmatch(stripped) or _INFINITY.fullmatch(stripped):
        return float(stripped)
    return None


def string_to_number(
    value: object,
    *,
    logger: DiagnosticLogger | None = None,
) -> int | float | None:
    """Coerce numeric text to ``int`` or ``float``.

    Accepts decimal integers and fractions with optional sign and
    exponent, ``Infinity``, and ``0x``/``0o``/``0b`` literals.  Blank
    text is ``0``.  Integral lexemes (``"42"``) give ``int``; everything
    else gives ``float``.

    Examples::

        string_to_number("42")      # 42
        string_to_number("1e3")     # 1000.0
        string_to_number("0x1F")    # 31
        string_to_number("abc")     # None, diagnostic logged
    """
    if not string_is(value):
        return None
    text: str = value  # type: ignore[assignment]
    number = _coerce_number(text)
    if number is None:
        _channel(logger).error("Invalid number string: %r", text)
    return number


def string_to_boolean(
    value: object,
    *,
    logger: DiagnosticLogger | None = None,
) -> bool | None:
    """Map a keyword to ``True``/``False``, case-insensitively.

    Truthy keywords are :data:`TRUTHY`, falsy ones :data:`FALSY`.  Any
    other text is logged and answered with ``None``.

    Examples::

        string_to_boolean("Yes")     # True
        string_to_boolean("off")     # False
        string_to_boolean("maybe")   # None, diagnostic logged
    """
    if not string_is(value):
        return None
    text: str = value  # type: ignore[assignment]
    lowered = text.lower()
    if lowered in TRUTHY:
        return True
    if lowered in FALSY:
        return False
    _channel(logger).error("Invalid boolean string: %r", text)
    return None


def string_to_date(
    value: object,
    *,
    logger: DiagnosticLogger | None = None,
) -> datetime | None:
    """Parse ISO 8601 text, falling back to RFC 2822 (e-mail style) dates.

    Examples::

        string_to_date("2024-01-15")                        # datetime(2024, 1, 15, 0, 0)
        string_to_date("Mon, 15 Jan 2024 10:30:00 +0000")   # aware datetime
        string_to_date("yesterday")                         # None, diagnostic logged
    """
    if not string_is(value):
        return None
    text: str = value  # type: ignore[assignment]
    for parse in _DATE_PARSERS:
        try:
            return parse(text)
        except (TypeError, ValueError, IndexError):
            continue
    _channel(logger).error("Invalid date: %r", text)
    return None


def string_to_json(
    value: object,
    *,
    logger: DiagnosticLogger | None = None,
) -> Any:
    """Decode JSON text; ``None`` (with a diagnostic) when it is malformed.

    The text ``"null"`` also decodes to ``None``, without a diagnostic.
    """
    if not string_is(value):
        return None
    text: str = value  # type: ignore[assignment]
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as exc:
        _channel(logger).error("Invalid JSON string: %r", text, exc_info=exc)
        return None
