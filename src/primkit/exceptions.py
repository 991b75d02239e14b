"""Custom exception hierarchy for primkit.

The helper functions in :mod:`primkit.core` never raise for bad input;
they answer ``False`` or return a sentinel instead.  These exceptions
exist for the command-line boundary, where a mistyped operation name or
an unparsable argument must surface as a clean message rather than a
stack trace.

Hierarchy
---------
PrimkitError
├── UnknownOperationError
├── InvalidArgumentError
└── EnvironmentError
"""

from __future__ import annotations


class PrimkitError(Exception):
    """Base exception for all primkit errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render it together with
    an optional hint.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Operation lookup -------------------------------------------------------

class UnknownOperationError(PrimkitError):
    """Raised when a CLI operation name does not exist."""


# --- Arguments --------------------------------------------------------------

class InvalidArgumentError(PrimkitError):
    """Raised when CLI arguments cannot be handed to an operation."""


# --- Environment ------------------------------------------------------------

class EnvironmentError(PrimkitError):
    """Raised when an optional runtime dependency is not available."""


def append_list_suggestion(hint: str) -> str:
    """Append ``primkit list`` guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "Run `primkit list` to see every operation."
    if marker in hint:
        return hint
    return "\n".join((hint, marker))
