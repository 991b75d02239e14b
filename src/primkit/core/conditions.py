"""Condition resolution shared by every ``*_is`` and ``*_has`` helper.

A single ``condition`` parameter selects the matching strategy by its
runtime type.  :func:`resolve_condition` classifies the raw argument
once, in a fixed order, and each domain decides what every kind means
for its own values:

1. **Absent** — the caller passed nothing (:data:`~primkit.core.guards.MISSING`).
2. **Text** — a ``str`` (a literal for strings, a type name for arrays).
3. **Number** — an ``int``/``float`` literal.
4. **Pattern** — a compiled regular expression.
5. **Type** — a class, checked with ``isinstance``.
6. **Predicate** — any other callable, together with its arity.
7. **Other** — everything else.  Domains treat it as "no match".

The shapes are disjoint in Python (a ``str`` is never callable, a class
is caught before the generic callable tier), so the order only matters
for readability and for future kinds.
"""

from __future__ import annotations

import enum
import inspect
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from primkit.core.guards import is_number, is_reg_exp, is_string, is_undefined


class ConditionKind(enum.Enum):
    """Matching strategy selected by a condition's runtime type."""

    ABSENT = "absent"
    TEXT = "text"
    NUMBER = "number"
    PATTERN = "pattern"
    TYPE = "type"
    PREDICATE = "predicate"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class Condition:
    """A classified condition argument."""

    kind: ConditionKind
    """Which tier the raw value resolved to."""

    value: Any
    """The raw condition exactly as the caller passed it."""

    arity: int | None = None
    """Required positional parameters, for :attr:`ConditionKind.PREDICATE` only."""

    is_unary: bool = False
    """``True`` for predicates that can be called with exactly one argument."""


# ---------------------------------------------------------------------------
# Arity
# ---------------------------------------------------------------------------

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def arity(fn: Callable[..., Any]) -> int:
    """Count the positional parameters *fn* requires.

    Parameters with defaults and ``*args`` are not counted, so
    ``lambda a, b=1: ...`` has arity 1.  Callables whose signature cannot
    be introspected (some C builtins) are assumed to be unary.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return 1
    return sum(
        1
        for param in signature.parameters.values()
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty
    )


def accepts_one(fn: Callable[..., Any]) -> bool:
    """Return whether *fn* can be called with a single positional argument.

    ``lambda: True`` and ``lambda a, b: True`` cannot; ``lambda *args: True``
    and ``lambda a, b=1: True`` can.  A required keyword-only parameter
    also rules the call out.  Uninspectable callables are assumed to
    accept it, as in :func:`arity`.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind(None)
    except TypeError:
        return False
    return True


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

def resolve_condition(condition: object) -> Condition:
    """Classify *condition* into exactly one :class:`ConditionKind`.

    Never raises; unrecognised shapes resolve to
    :attr:`ConditionKind.OTHER`.
    """
    if is_undefined(condition):
        return Condition(ConditionKind.ABSENT, condition)
    if is_string(condition):
        return Condition(ConditionKind.TEXT, condition)
    if is_number(condition):
        return Condition(ConditionKind.NUMBER, condition)
    if is_reg_exp(condition):
        return Condition(ConditionKind.PATTERN, condition)
    if isinstance(condition, type):
        return Condition(ConditionKind.TYPE, condition)
    if callable(condition):
        return Condition(
            ConditionKind.PREDICATE,
            condition,
            arity(condition),
            accepts_one(condition),
        )
    return Condition(ConditionKind.OTHER, condition)


def search(pattern: re.Pattern[Any], text: str) -> bool:
    """Return ``True`` when *pattern* matches anywhere in *text*.

    A bytes pattern never matches text.
    """
    if not isinstance(pattern.pattern, str):
        return False
    return pattern.search(text) is not None
