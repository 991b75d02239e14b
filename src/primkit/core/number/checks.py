"""Number checks: :func:`number_is` and the property predicates built on it.

A number is an ``int`` or ``float`` (never a ``bool``).  NaN and the
infinities are numbers; the property predicates decide what they are
not.
"""

from __future__ import annotations

import math

from primkit.core.conditions import ConditionKind, resolve_condition
from primkit.core.guards import MISSING, is_number


def number_is(value: object, condition: object = MISSING) -> bool:
    """Return whether *value* is a number, optionally matching *condition*.

    * no condition: kind check only;
    * number: equality (``number_is(2.0, 2)`` is ``True``);
    * unary callable: its result, as ``bool``;
    * anything else: ``False``.

    Examples::

        number_is(123)                    # True
        number_is("123")                  # False
        number_is(5, lambda n: n > 0)     # True
    """
    if not is_number(value):
        return False

    cond = resolve_condition(condition)
    if cond.kind is ConditionKind.ABSENT:
        return True
    if cond.kind is ConditionKind.NUMBER:
        return value == cond.value
    if cond.kind is ConditionKind.PREDICATE:
        return cond.is_unary and bool(cond.value(value))
    return False


# ---------------------------------------------------------------------------
# Property conditions
# ---------------------------------------------------------------------------

def _finite(n: int | float) -> bool:
    # ints never overflow; math.isfinite would for huge ones
    return isinstance(n, int) or math.isfinite(n)


def _integer(n: int | float) -> bool:
    return isinstance(n, int) or (math.isfinite(n) and n.is_integer())


def number_is_finite(value: object) -> bool:
    """Return ``True`` for numbers other than NaN and the infinities."""
    return number_is(value, _finite)


def number_is_integer(value: object) -> bool:
    """Return ``True`` for ints and for finite floats with no fraction (``3.0``)."""
    return number_is(value, _integer)


def number_is_positive(value: object) -> bool:
    return number_is(value, lambda n: n > 0)


def number_is_negative(value: object) -> bool:
    return number_is(value, lambda n: n < 0)


def number_is_zero(value: object) -> bool:
    """Return ``True`` for ``0``, ``0.0`` and ``-0.0``."""
    return number_is(value, lambda n: n == 0)


def number_is_even(value: object) -> bool:
    return number_is(value, lambda n: n % 2 == 0)


def number_is_odd(value: object) -> bool:
    """Return ``True`` for odd integral numbers, negative ones included.

    Example::

        number_is_odd(-3)   # True
    """
    return number_is(value, lambda n: abs(n % 2) == 1)
