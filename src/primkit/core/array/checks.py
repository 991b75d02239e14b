"""Array shape checks: :func:`array_is` and its derived predicates.

An "array" is a ``list`` or ``tuple``.  Everything else answers
``False`` before any condition is looked at.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from primkit.core.conditions import ConditionKind, resolve_condition
from primkit.core.guards import MISSING, is_array, matches_type_name


def array_is(value: object, condition: object = MISSING) -> bool:
    """Return whether *value* is an array, optionally matching *condition*.

    * no condition: kind check only;
    * list/tuple literal: element-wise equality (``[1, 2]`` matches ``(1, 2)``);
    * unary callable: called with the whole array;
    * anything else: ``False``.

    Examples::

        array_is([])                                  # True
        array_is("123")                               # False
        array_is([1, 2, 3], lambda arr: len(arr) == 3)  # True
    """
    if not is_array(value):
        return False

    cond = resolve_condition(condition)
    if cond.kind is ConditionKind.ABSENT:
        return True
    if cond.kind is ConditionKind.PREDICATE:
        return cond.is_unary and bool(cond.value(value))
    if is_array(cond.value):
        return list(value) == list(cond.value)
    return False


def array_is_empty(value: object) -> bool:
    """Return ``True`` only for an array with no elements."""
    return array_is(value) and len(value) == 0  # type: ignore[arg-type]


def array_is_every(
    value: object,
    predicate: str | type | Callable[[Any], object],
) -> bool:
    """Return whether every element of the array satisfies *predicate*.

    *predicate* may be a type name (see
    :func:`~primkit.core.guards.matches_type_name`), a class, or a unary
    element function.  Any other shape, including callables that cannot
    be called with one argument, answers ``False``.  An empty array satisfies
    every predicate.

    Examples::

        array_is_every(["a", "b"], "string")                   # True
        array_is_every([1, 2, 3], int)                          # True
        array_is_every([{"id": 1}], lambda item: isinstance(item, dict))  # True
    """
    if not is_array(value):
        return False

    cond = resolve_condition(predicate)
    if cond.kind is ConditionKind.TEXT:
        return all(matches_type_name(item, cond.value) for item in value)
    if cond.kind is ConditionKind.TYPE:
        return all(isinstance(item, cond.value) for item in value)
    if cond.kind is ConditionKind.PREDICATE and cond.is_unary:
        return all(cond.value(item) for item in value)
    return False
