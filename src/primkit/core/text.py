"""Text rendering of scalar values, shared by the array and number conversions."""

from __future__ import annotations

import math

from primkit.core.guards import is_boolean, is_null, is_string, is_undefined


def display_text(value: object) -> str:
    """Render *value* the way the conversions show it.

    * ``None`` is ``"null"`` and :data:`~primkit.core.guards.MISSING` is
      ``"undefined"``;
    * booleans are ``"true"``/``"false"``;
    * NaN and the infinities are ``"NaN"``, ``"Infinity"`` and ``"-Infinity"``;
    * integral floats drop their ``.0``;
    * ints too long for ``str()`` render as an infinity of their sign.

    Examples::

        display_text(10.0)          # "10"
        display_text(float("nan"))  # "NaN"
        display_text(False)         # "false"
    """
    if is_string(value):
        return value
    if is_undefined(value):
        return "undefined"
    if is_null(value):
        return "null"
    if is_boolean(value):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError:
            # past sys.get_int_max_str_digits()
            return "Infinity" if value > 0 else "-Infinity"
    return str(value)
