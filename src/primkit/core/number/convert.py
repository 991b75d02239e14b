"""Number conversions.

:func:`number_to_int` and :func:`number_to_float` read a numeric prefix
from any value rendered as text, so ``"42px"`` gives ``42`` and
``"abc"`` gives the fallback.  The formatting helpers build on
:func:`number_to_float` and always return a string.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, TypeVar

from primkit.core.guards import is_number
from primkit.core.number.checks import number_is
from primkit.core.text import display_text

T = TypeVar("T")

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)

MAX_DIGITS = 100
"""Upper bound for the ``digits`` argument of the formatting helpers."""

# Wide enough for every float at MAX_DIGITS places.
_FIXED_CONTEXT = Context(prec=500, rounding=ROUND_HALF_UP)


def number_to(value: object, transform: Callable[[Any], T] | None = None) -> T | None:
    """Return ``transform(value)`` for numbers, ``None`` for anything else.

    Without *transform* the number itself is returned.

    Examples::

        number_to(10, lambda n: n * 2)   # 20
        number_to(10, str)               # "10"
        number_to("10", str)             # None
    """
    if not number_is(value):
        return None
    if transform is None:
        return value  # type: ignore[return-value]
    return transform(value)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def number_to_int(value: object, fallback: int | float = 0) -> int | float:
    """Parse the leading integer of *value*; *fallback* when there is none.

    Examples::

        number_to_int("42")         # 42
        number_to_int("  -7.9kg")   # -7
        number_to_int(3.99)         # 3
        number_to_int("abc", 5)     # 5

    Digit runs longer than ``int`` accepts from text parse as a float,
    which overflows to an infinity.
    """
    match = _INT_PREFIX.match(display_text(value))
    if match is None:
        return fallback
    digits = match.group(1)
    try:
        return int(digits, 10)
    except ValueError:
        # past sys.get_int_max_str_digits()
        return float(digits)


def number_to_float(value: object, fallback: int | float = 0) -> int | float:
    """Parse the leading decimal number of *value*; *fallback* when there is none.

    Examples::

        number_to_float("3.14")             # 3.14
        number_to_float("1e3 items")        # 1000.0
        number_to_float(None, 1.1)          # 1.1
    """
    match = _FLOAT_PREFIX.match(display_text(value))
    if match is None:
        return fallback
    return float(match.group(1))


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def _fixed(number: int | float, digits: int) -> str:
    """Render *number* with *digits* decimals, halves rounded away from zero."""
    if not is_number(number):
        number = 0
    if isinstance(number, float):
        if math.isnan(number):
            return "NaN"
        if math.isinf(number):
            return "Infinity" if number > 0 else "-Infinity"
        if number == 0:
            number = 0.0
    places = min(max(int(digits), 0), MAX_DIGITS)
    quantum = Decimal(1).scaleb(-places)
    return format(Decimal(number).quantize(quantum, context=_FIXED_CONTEXT), "f")


def number_to_fixed(value: object, digits: int = 2) -> str:
    """Format *value* with a fixed number of decimals.

    *digits* is clamped to ``0..100``.  Unparsable input formats as zero.

    Examples::

        number_to_fixed(3.14159)   # "3.14"
        number_to_fixed("abc")     # "0.00"
    """
    return _fixed(number_to_float(value), digits)


def number_to_percent(value: object, digits: int = 0) -> str:
    """Format a ratio as a percentage string.

    Examples::

        number_to_percent(0.12)         # "12%"
        number_to_percent(0.1234, 2)    # "12.34%"
    """
    return f"{_fixed(number_to_float(value) * 100, digits)}%"
