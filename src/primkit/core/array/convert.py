"""Array conversions.

Every function here accepts any value and never raises because of it:
a non-array input yields the function's empty result (``None``, ``""``,
an empty set or an empty dict).
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeVar

from primkit.core.array.checks import array_is
from primkit.core.guards import (
    MISSING,
    is_array,
    is_map,
    is_null,
    is_undefined,
    type_of,
)
from primkit.core.text import display_text

R = TypeVar("R")


def array_to(value: object, fn: Callable[[Any], R]) -> R | None:
    """Return ``fn(value)`` for arrays, ``None`` for anything else.

    Examples::

        array_to([1, 2, 3], sum)                 # 6
        array_to(["a", "b"], "&".join)           # "a&b"
        array_to("not array", len)               # None
    """
    if not array_is(value):
        return None
    return fn(value)


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def _element_text(item: object) -> str:
    """Render one element the way a joined array displays it."""
    if is_null(item) or is_undefined(item):
        return ""
    if is_array(item):
        return ",".join(_element_text(inner) for inner in item)
    return display_text(item)


def array_to_string(value: object, separator: str = ",") -> str:
    """Join the elements with *separator*; ``""`` for non-arrays.

    ``None`` elements render as empty text, booleans as ``true``/``false``
    and non-finite floats as ``NaN``/``Infinity``.

    Examples::

        array_to_string([1, 2, 3])        # "1,2,3"
        array_to_string([1, 2, 3], "-")   # "1-2-3"
    """
    if not array_is(value):
        return ""
    return separator.join(_element_text(item) for item in value)  # type: ignore[union-attr]


def array_to_json(value: object) -> str:
    """Serialise the array as compact JSON; ``""`` on any failure.

    Circular references, NaN or infinite floats, and values ``json``
    cannot encode produce ``""`` instead of an exception.

    Examples::

        array_to_json(["x", 123])   # '["x",123]'
    """
    if not array_is(value):
        return ""
    try:
        return json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError):
        return ""


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

def array_to_set(value: object) -> set[Any]:
    """Return the distinct elements; an empty set for non-arrays.

    Unhashable elements (lists, dicts) cannot live in a set and are
    left out.
    """
    result: set[Any] = set()
    if not array_is(value):
        return result
    for item in value:  # type: ignore[union-attr]
        try:
            result.add(item)
        except TypeError:
            continue
    return result


def _key_of(item: object, key_field: str) -> tuple[bool, object]:
    """Return ``(found, key)`` for a mapping entry or an attribute."""
    if is_map(item):
        if key_field in item:
            return True, item[key_field]
        return False, None
    if type_of(item) != "object" or is_array(item):
        return False, None
    key = getattr(item, key_field, MISSING)
    return key is not MISSING, key


def array_to_map(value: object, key_field: str) -> dict[str, Any]:
    """Index dict or object elements by their *key_field*.

    Keys are rendered as text (``1`` becomes ``"1"``, ``True`` becomes
    ``"true"``).  Elements that are not objects, or that lack
    *key_field*, are skipped.  A later element with the same key
    replaces an earlier one.

    Examples::

        users = [{"id": "u1", "name": "Alice"}, {"id": "u2", "name": "Bob"}]
        array_to_map(users, "id")["u1"]["name"]   # "Alice"
    """
    result: dict[str, Any] = {}
    if not array_is(value):
        return result
    for item in value:  # type: ignore[union-attr]
        found, key = _key_of(item, key_field)
        if found:
            result[display_text(key)] = item
    return result


def array_to_object(value: object) -> dict[str, Any]:
    """Key every element by its index rendered as text.

    Examples::

        array_to_object(["a", "b"])   # {"0": "a", "1": "b"}
    """
    if not array_is(value):
        return {}
    return {str(index): item for index, item in enumerate(value)}  # type: ignore[arg-type]
