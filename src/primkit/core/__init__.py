"""Core layer — pure helpers for arrays, strings and numbers.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Never raise because of the *value* being inspected; answer ``False``
  or the documented sentinel instead.
* The only side effect is a diagnostic logged by the string parsers.
"""

from primkit.core.array import (
    array_has,
    array_has_length,
    array_is,
    array_is_empty,
    array_is_every,
    array_to,
    array_to_json,
    array_to_map,
    array_to_object,
    array_to_set,
    array_to_string,
)
from primkit.core.conditions import Condition, ConditionKind, resolve_condition
from primkit.core.guards import (
    MAX_SAFE_INTEGER,
    MISSING,
    TYPE_NAMES,
    is_array,
    is_array_buffer,
    is_big_int,
    is_blob,
    is_boolean,
    is_buffer,
    is_data_view,
    is_date,
    is_error,
    is_file,
    is_function,
    is_map,
    is_null,
    is_number,
    is_plain_object,
    is_promise,
    is_reg_exp,
    is_set,
    is_string,
    is_symbol,
    is_uint8_array,
    is_undefined,
    is_weak_map,
    is_weak_set,
    matches_type_name,
    type_of,
)
from primkit.core.math import add, subtract
from primkit.core.number import (
    number_is,
    number_is_even,
    number_is_finite,
    number_is_integer,
    number_is_negative,
    number_is_odd,
    number_is_positive,
    number_is_zero,
    number_to,
    number_to_fixed,
    number_to_float,
    number_to_int,
    number_to_percent,
)
from primkit.core.protocols import DiagnosticLogger
from primkit.core.string import (
    string_has,
    string_has_alpha,
    string_has_chinese,
    string_has_emoji,
    string_has_line_break,
    string_has_lowercase,
    string_has_number,
    string_has_space,
    string_has_symbol,
    string_has_uppercase,
    string_is,
    string_is_date,
    string_is_email,
    string_is_hex,
    string_is_html,
    string_is_ip,
    string_is_ipv4,
    string_is_ipv6,
    string_is_json,
    string_is_number,
    string_is_phone,
    string_is_slug,
    string_is_time,
    string_is_url,
    string_is_uuid,
    string_to,
    string_to_array,
    string_to_boolean,
    string_to_camel_case,
    string_to_constant,
    string_to_date,
    string_to_json,
    string_to_number,
    string_to_slug,
    string_to_title_case,
    string_to_upper,
)

__all__: list[str] = [
    "Condition",
    "ConditionKind",
    "DiagnosticLogger",
    "MAX_SAFE_INTEGER",
    "MISSING",
    "TYPE_NAMES",
    "add",
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
    "is_array",
    "is_array_buffer",
    "is_big_int",
    "is_blob",
    "is_boolean",
    "is_buffer",
    "is_data_view",
    "is_date",
    "is_error",
    "is_file",
    "is_function",
    "is_map",
    "is_null",
    "is_number",
    "is_plain_object",
    "is_promise",
    "is_reg_exp",
    "is_set",
    "is_string",
    "is_symbol",
    "is_uint8_array",
    "is_undefined",
    "is_weak_map",
    "is_weak_set",
    "matches_type_name",
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
    "resolve_condition",
    "string_has",
    "string_has_alpha",
    "string_has_chinese",
    "string_has_emoji",
    "string_has_line_break",
    "string_has_lowercase",
    "string_has_number",
    "string_has_space",
    "string_has_symbol",
    "string_has_uppercase",
    "string_is",
    "string_is_date",
    "string_is_email",
    "string_is_hex",
    "string_is_html",
    "string_is_ip",
    "string_is_ipv4",
    "string_is_ipv6",
    "string_is_json",
    "string_is_number",
    "string_is_phone",
    "string_is_slug",
    "string_is_time",
    "string_is_url",
    "string_is_uuid",
    "string_to",
    "string_to_array",
    "string_to_boolean",
    "string_to_camel_case",
    "string_to_constant",
    "string_to_date",
    "string_to_json",
    "string_to_number",
    "string_to_slug",
    "string_to_title_case",
    "string_to_upper",
    "subtract",
    "type_of",
]
