"""``primkit list`` — print every operation the CLI can run.

Renders a Rich table when Rich is importable and a fixed-width plain
table otherwise.  Like the rest of the console output, the listing goes
to stderr.
"""

from __future__ import annotations

import sys

from primkit.cli import exit_codes
from primkit.cli.console import console
from primkit.cli.operations import Operation, all_operations
from primkit.version import __version__


def _rows(operations: tuple[Operation, ...]) -> list[tuple[str, str, str]]:
    """Return (name, family, summary) rows for the table."""
    return [(op.name, op.family, op.summary) for op in operations]


def _print_plain_catalog(rows: list[tuple[str, str, str]]) -> None:
    """Render the listing without Rich."""
    print(f"\nprimkit {__version__} operations", file=sys.stderr)
    print("=" * 72, file=sys.stderr)
    print(f"{'Operation':<26} {'Kind':<6} {'Summary'}", file=sys.stderr)
    print("-" * 72, file=sys.stderr)
    for name, family, summary in rows:
        print(f"{name:<26} {family:<6} {summary}", file=sys.stderr)
    print(file=sys.stderr)


def run_list() -> int:
    """Render the operation catalogue.

    Returns
    -------
    int
        Always :data:`exit_codes.SUCCESS`.
    """
    rows = _rows(all_operations())

    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError:
        _print_plain_catalog(rows)
        return exit_codes.SUCCESS

    table = Table(
        title=f"primkit {__version__} operations",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Operation", style="bold", min_width=20)
    table.add_column("Kind", justify="center", min_width=4)
    table.add_column("Summary")

    for name, family, summary in rows:
        table.add_row(name, family, Text(summary))

    console.print()
    console.print(table)
    console.print()
    return exit_codes.SUCCESS
