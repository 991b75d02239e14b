"""Number helpers — ``number_is*`` and ``number_to*``."""

from primkit.core.number.checks import (
    number_is,
    number_is_even,
    number_is_finite,
    number_is_integer,
    number_is_negative,
    number_is_odd,
    number_is_positive,
    number_is_zero,
)
from primkit.core.number.convert import (
    number_to,
    number_to_fixed,
    number_to_float,
    number_to_int,
    number_to_percent,
)

__all__: list[str] = [
    "number_is",
    "number_is_even",
    "number_is_finite",
    "number_is_integer",
    "number_is_negative",
    "number_is_odd",
    "number_is_positive",
    "number_is_zero",
    "number_to",
    "number_to_fixed",
    "number_to_float",
    "number_to_int",
    "number_to_percent",
]
