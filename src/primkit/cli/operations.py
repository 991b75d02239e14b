"""Registry of the operations the CLI can run.

Operations are collected from the ``__all__`` lists of the core domain
packages and exposed under dashed names (``string_is_email`` becomes
``string-is-email``).  Helpers whose main argument is a Python callable
(``array_to`` and friends) cannot be driven from a shell and are left
out.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from types import ModuleType
from typing import Any

from primkit.core import array, number, string
from primkit.core import math as arithmetic
from primkit.exceptions import UnknownOperationError, append_list_suggestion

_DOMAINS: tuple[tuple[str, ModuleType], ...] = (
    ("array", array),
    ("string", string),
    ("number", number),
    ("math", arithmetic),
)

_HIGHER_ORDER: frozenset[str] = frozenset({"array_to", "string_to", "number_to"})


@dataclass(frozen=True, slots=True)
class Operation:
    """One CLI-callable helper."""

    name: str
    """Dashed command name, e.g. ``string-is-email``."""

    domain: str
    """``array``, ``string``, ``number`` or ``math``."""

    func: Callable[..., Any]
    """The core helper itself."""

    @property
    def family(self) -> str:
        """``is``, ``has`` or ``to`` for domain helpers, ``math`` otherwise."""
        parts = self.name.split("-")
        return parts[1] if len(parts) > 1 else self.domain

    @property
    def summary(self) -> str:
        """First line of the helper's docstring, or ``""``."""
        doc = inspect.getdoc(self.func) or ""
        return doc.splitlines()[0] if doc else ""

    @property
    def signature(self) -> inspect.Signature:
        return inspect.signature(self.func)


def normalize_name(name: str) -> str:
    """Map ``string_is_email`` / ``String-Is-Email`` to ``string-is-email``."""
    return name.strip().lower().replace("_", "-")


def all_operations() -> tuple[Operation, ...]:
    """Return every CLI-callable operation, grouped by domain, sorted by name."""
    operations: list[Operation] = []
    for domain, module in _DOMAINS:
        for attr in sorted(module.__all__):
            if attr in _HIGHER_ORDER:
                continue
            operations.append(
                Operation(
                    name=normalize_name(attr),
                    domain=domain,
                    func=getattr(module, attr),
                )
            )
    return tuple(operations)


def find_operation(name: str) -> Operation:
    """Look up an operation by name.

    Raises
    ------
    UnknownOperationError
        If no operation has that name.
    """
    wanted = normalize_name(name)
    for operation in all_operations():
        if operation.name == wanted:
            return operation

    close = [op.name for op in all_operations() if op.name.startswith(wanted.split("-")[0])]
    hint = f"Operations in that domain: {', '.join(close)}" if close else "No such domain."
    raise UnknownOperationError(
        f"Unknown operation: {name}",
        hint=append_list_suggestion(hint),
    )
