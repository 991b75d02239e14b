"""Array helpers — ``array_is*``, ``array_has*`` and ``array_to*``."""

from primkit.core.array.checks import array_is, array_is_empty, array_is_every
from primkit.core.array.contains import array_has, array_has_length
from primkit.core.array.convert import (
    array_to,
    array_to_json,
    array_to_map,
    array_to_object,
    array_to_set,
    array_to_string,
)

__all__: list[str] = [
    "array_has",
    "array_has_length",
    "array_is",
    "array_is_empty",
    "array_is_every",
    "array_to",
    "array_to_json",
    "array_to_map",
    "array_to_object",
    "array_to_set",
    "array_to_string",
]
