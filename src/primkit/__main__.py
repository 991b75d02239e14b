"""Allow ``python -m primkit`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m primkit`` behaves identically to the ``primkit``
console script.
"""

from __future__ import annotations

from primkit.cli.app import cli

if __name__ == "__main__":
    cli()
