"""Protocols (interfaces) consumed by the core layer.

The parsing transforms in :mod:`primkit.core.string.convert` report
unparsable input through a logger handed in by the caller.  Core code
depends only on this protocol, so tests and applications can pass any
object with a compatible ``error`` method.
"""

from __future__ import annotations

from typing import Any, Protocol


class DiagnosticLogger(Protocol):
    """Contract for the diagnostic channel of the parsing transforms.

    :class:`logging.Logger` and :class:`logging.LoggerAdapter` satisfy
    this protocol structurally (no explicit inheritance required).
    """

    def error(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Record one conversion failure.

        Called at most once per failed conversion, with a ``%``-style
        message and its arguments.  Implementations must not raise.
        """
        ...  # pragma: no cover
