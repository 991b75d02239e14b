"""Array content checks: :func:`array_has` and :func:`array_has_length`."""

from __future__ import annotations

from primkit.core.array.checks import array_is
from primkit.core.conditions import ConditionKind, resolve_condition
from primkit.core.guards import MISSING, is_number, matches_type_name


def array_has(value: object, condition: object = MISSING) -> bool:
    """Return whether the array has content matching *condition*.

    Resolution order:

    1. no condition: the array is non-empty;
    2. callable of exactly one argument: called with the whole array;
    3. ``str``: at least one element has that type name;
    4. class: at least one element is an instance of it;
    5. anything else: membership test (``condition in value``).

    Non-arrays always answer ``False``.

    Examples::

        array_has(["a", "b"], "string")                          # True
        array_has([1, 2, 3], 2)                                  # True
        array_has(["abc", "xyz"], lambda arr: "x" in "".join(arr))  # True
        array_has([])                                            # False
    """
    if not array_is(value):
        return False
    items: list[object] = list(value)  # type: ignore[call-overload]

    cond = resolve_condition(condition)
    if cond.kind is ConditionKind.ABSENT:
        return len(items) > 0
    if cond.kind is ConditionKind.PREDICATE and cond.arity == 1 and cond.is_unary:
        return bool(cond.value(items))
    if cond.kind is ConditionKind.TEXT:
        return any(matches_type_name(item, cond.value) for item in items)
    if cond.kind is ConditionKind.TYPE:
        return any(isinstance(item, cond.value) for item in items)
    return cond.value in items


def array_has_length(value: object, length: object = MISSING) -> bool:
    """Return whether the array has *length* elements.

    Without *length*, answers whether it has at least one element.  A
    *length* that is not a number never matches.

    Examples::

        array_has_length(["a", "b"])     # True
        array_has_length([1, 2, 3], 2)   # False
        array_has_length([1, 2, 3], 3)   # True
    """
    if not array_is(value):
        return False
    size = len(value)  # type: ignore[arg-type]
    if length is MISSING:
        return size >= 1
    return is_number(length) and size == length
