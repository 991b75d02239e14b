"""Runtime type guards for built-in Python kinds.

Every guard takes a single value of any type and answers with a plain
``bool``; none of them raise or touch state.  The array, string and
number helpers use these as their precondition checks.

Kinds without a Python counterpart are environment-gated: the guard
exists so callers can rely on the full surface, and it answers
``False``.
"""

from __future__ import annotations

import array
import inspect
import io
import re
import weakref
from collections.abc import Mapping
from datetime import date
from typing import Any, Final, TypeGuard


# ---------------------------------------------------------------------------
# "Not supplied" sentinel
# ---------------------------------------------------------------------------

class _Missing:
    """Marker for an argument the caller did not pass.

    ``None`` is an ordinary value for the helpers in this package (an
    array may contain it, a membership test may look for it), so an
    omitted condition needs its own identity.
    """

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final[Any] = _Missing()
"""Default for every optional condition or length parameter."""

MAX_SAFE_INTEGER: Final[int] = 2**53 - 1
"""Largest integer a 64-bit float represents exactly."""


# ---------------------------------------------------------------------------
# Primitive kinds
# ---------------------------------------------------------------------------

def is_null(value: object) -> TypeGuard[None]:
    """Return ``True`` when *value* is ``None``."""
    return value is None


def is_undefined(value: object) -> bool:
    """Return ``True`` when *value* is the :data:`MISSING` sentinel."""
    return value is MISSING


def is_string(value: object) -> TypeGuard[str]:
    """Return ``True`` when *value* is a ``str``."""
    return isinstance(value, str)


def is_number(value: object) -> TypeGuard[int | float]:
    """Return ``True`` for ``int`` and ``float`` values, NaN included.

    ``bool`` is a subclass of ``int`` but is reported by
    :func:`is_boolean` only.
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_boolean(value: object) -> TypeGuard[bool]:
    return isinstance(value, bool)


def is_symbol(value: object) -> bool:
    """Environment-gated: Python has no symbol primitive, always ``False``."""
    return False


def is_big_int(value: object) -> TypeGuard[int]:
    """Return ``True`` for integers a float cannot hold exactly.

    Every Python ``int`` is arbitrary precision; this guard singles out
    the ones beyond :data:`MAX_SAFE_INTEGER` in magnitude.
    """
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and abs(value) > MAX_SAFE_INTEGER
    )


def is_function(value: object) -> bool:
    """Return ``True`` for any callable, classes included."""
    return callable(value)


# ---------------------------------------------------------------------------
# Containers and structured kinds
# ---------------------------------------------------------------------------

def is_plain_object(value: object) -> TypeGuard[dict[Any, Any]]:
    """Return ``True`` for ``dict`` instances (never for lists or tuples)."""
    return isinstance(value, dict)


def is_array(value: object) -> TypeGuard[list[Any] | tuple[Any, ...]]:
    """Return ``True`` for ``list`` and ``tuple`` instances.

    Strings, bytes and other sequences are not arrays.
    """
    return isinstance(value, (list, tuple))


def is_date(value: object) -> TypeGuard[date]:
    """Return ``True`` for ``datetime.date`` and ``datetime.datetime``."""
    return isinstance(value, date)


def is_reg_exp(value: object) -> TypeGuard[re.Pattern[Any]]:
    """Return ``True`` for compiled regular expressions."""
    return isinstance(value, re.Pattern)


def is_map(value: object) -> TypeGuard[Mapping[Any, Any]]:
    """Return ``True`` for any :class:`~collections.abc.Mapping`."""
    return isinstance(value, Mapping)


def is_set(value: object) -> TypeGuard[set[Any] | frozenset[Any]]:
    return isinstance(value, (set, frozenset))


def is_weak_map(value: object) -> bool:
    """Return ``True`` for weak-keyed or weak-valued dictionaries."""
    return isinstance(value, (weakref.WeakKeyDictionary, weakref.WeakValueDictionary))


def is_weak_set(value: object) -> bool:
    return isinstance(value, weakref.WeakSet)


def is_error(value: object) -> TypeGuard[Exception]:
    """Return ``True`` for exception instances (not exception classes)."""
    return isinstance(value, Exception)


def is_promise(value: object) -> bool:
    """Return ``True`` for awaitables: coroutines, futures and tasks."""
    return inspect.isawaitable(value)


# ---------------------------------------------------------------------------
# Byte buffers and files
# ---------------------------------------------------------------------------

def is_array_buffer(value: object) -> TypeGuard[bytearray]:
    """Return ``True`` for ``bytearray``, Python's mutable raw buffer."""
    return isinstance(value, bytearray)


def is_data_view(value: object) -> TypeGuard[memoryview]:
    """Return ``True`` for ``memoryview`` instances."""
    return isinstance(value, memoryview)


def is_uint8_array(value: object) -> bool:
    """Return ``True`` for ``array.array`` instances of unsigned bytes."""
    return isinstance(value, array.array) and value.typecode == "B"


def is_buffer(value: object) -> TypeGuard[bytes | bytearray | memoryview]:
    """Return ``True`` for any built-in bytes-like object."""
    return isinstance(value, (bytes, bytearray, memoryview))


def is_blob(value: object) -> TypeGuard[bytes]:
    """Return ``True`` for immutable ``bytes``."""
    return isinstance(value, bytes)


def is_file(value: object) -> TypeGuard[io.IOBase]:
    """Return ``True`` for file objects (anything derived from ``io.IOBase``)."""
    return isinstance(value, io.IOBase)


# ---------------------------------------------------------------------------
# Type names
# ---------------------------------------------------------------------------

TYPE_NAMES: Final[frozenset[str]] = frozenset(
    {"string", "number", "boolean", "null", "undefined", "function", "object"}
)
"""Kind names returned by :func:`type_of`."""


def type_of(value: object) -> str:
    """Return the kind name of *value*, one of :data:`TYPE_NAMES`."""
    if is_undefined(value):
        return "undefined"
    if is_null(value):
        return "null"
    if is_boolean(value):
        return "boolean"
    if is_number(value):
        return "number"
    if is_string(value):
        return "string"
    if is_function(value):
        return "function"
    return "object"


def matches_type_name(value: object, name: str) -> bool:
    """Return ``True`` when *name* describes *value*.

    *name* may be a kind name from :data:`TYPE_NAMES` (``"string"``,
    ``"number"``) or the exact class name (``"str"``, ``"int"``,
    ``"dict"``).  Class names do not follow inheritance, so ``"int"``
    does not match ``True``.
    """
    return name == type_of(value) or name == type(value).__name__
