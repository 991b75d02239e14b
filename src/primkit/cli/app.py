"""CLI application entry point and command routing for primkit.

This module is the **sole error boundary** for the command line.  It
catches :class:`~primkit.exceptions.PrimkitError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Usage::

    primkit list
    primkit string-is-email someone@example.com
    primkit --json array-has '[1, 2, 3]' 2
    primkit --regex string-has hello 'l+'
    primkit --quiet --json number-is-odd -- -3

Architecture notes
------------------
* No helper logic lives here — every operation is a core function
  looked up in :mod:`primkit.cli.operations`.
* Results go to stdout; messages, listings and diagnostics to stderr.
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from collections.abc import Sequence
from datetime import date
from typing import Any

from primkit.cli import exit_codes
from primkit.cli.console import configure_logging, console
from primkit.exceptions import InvalidArgumentError, PrimkitError
from primkit.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands are not used; the CLI supports:
    * ``primkit list``                        — show every operation
    * ``primkit <operation> VALUE [ARG ...]`` — run one operation
    * ``primkit --version``
    """
    parser = argparse.ArgumentParser(
        prog="primkit",
        description="Run primkit array, string and number helpers from the shell.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging on stderr.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Print nothing; exit 3 when the result is false or null.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Parse VALUE as JSON instead of passing it as text.",
    )
    parser.add_argument(
        "-r",
        "--regex",
        action="store_true",
        help="Compile the first ARG as a regular expression condition.",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Operation name (e.g. string-is-email), or 'list'.",
    )
    parser.add_argument(
        "value",
        nargs="?",
        default=None,
        help="The value to inspect or convert.",
    )
    parser.add_argument(
        "args",
        nargs="*",
        default=[],
        help="Extra arguments (condition, separator, digits ...). JSON when it parses.",
    )
    return parser


# ---------------------------------------------------------------------------
# Argument coercion
# ---------------------------------------------------------------------------

def _parse_json_value(raw: str) -> Any:
    """Parse *raw* as JSON or raise :class:`InvalidArgumentError`."""
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"VALUE is not valid JSON: {raw}",
            hint="Quote arrays for the shell, e.g. '[1, 2, 3]'.",
        ) from exc


def _coerce_arg(raw: str) -> Any:
    """Return *raw* decoded as JSON when possible, else the raw text."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _compile_pattern(raw: str) -> re.Pattern[str]:
    try:
        return re.compile(raw)
    except re.error as exc:
        raise InvalidArgumentError(f"Invalid regular expression: {raw} ({exc})") from exc


def _build_call_args(
    value: str,
    extra: Sequence[str],
    *,
    as_json: bool,
    as_regex: bool,
) -> list[Any]:
    """Turn the raw VALUE and ARGs into positional call arguments."""
    args: list[Any] = [_parse_json_value(value) if as_json else value]
    for index, raw in enumerate(extra):
        if index == 0 and as_regex:
            args.append(_compile_pattern(raw))
        else:
            args.append(_coerce_arg(raw))
    return args


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def _jsonable(obj: object) -> Any:
    """``json.dumps`` default hook for sets and dates."""
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    if isinstance(obj, date):
        return obj.isoformat()
    return repr(obj)


def render_result(result: object) -> str:
    """Render an operation result for stdout.

    Booleans and ``None`` use JSON spelling, strings are printed
    verbatim, everything else is JSON-encoded.
    """
    if isinstance(result, str):
        return result
    return json.dumps(result, default=_jsonable, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_list() -> int:
    """Dispatch the ``list`` command."""
    from primkit.cli.catalog import run_list

    return run_list()


def _handle_operation(
    name: str,
    value: str | None,
    extra: Sequence[str],
    *,
    as_json: bool = False,
    as_regex: bool = False,
    quiet: bool = False,
) -> int:
    """Run one operation and print its result.

    Flow:
    1. Look the operation up by name.
    2. Coerce VALUE and ARGs into call arguments.
    3. Check them against the helper's signature.
    4. Call the helper and render the result.
    """
    from primkit.cli.operations import find_operation

    operation = find_operation(name)
    if value is None:
        raise InvalidArgumentError(
            f"{operation.name} needs a VALUE.",
            hint=f"Usage: primkit {operation.name} VALUE [ARG ...]",
        )

    call_args = _build_call_args(value, extra, as_json=as_json, as_regex=as_regex)
    try:
        operation.signature.bind(*call_args)
    except TypeError as exc:
        raise InvalidArgumentError(
            f"Wrong arguments for {operation.name}: {exc}",
            hint=f"Signature: {operation.name}{operation.signature}",
        ) from exc

    logger.debug("Running %s with %d argument(s)", operation.name, len(call_args))
    result = operation.func(*call_args)

    if quiet:
        return exit_codes.FALSE_RESULT if result is None or result is False else exit_codes.SUCCESS

    print(render_result(result))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the primkit CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.target is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(verbose=args.verbose)
    target: str = args.target

    if target.lower() == "list":
        return _handle_list()

    return _handle_operation(
        target,
        args.value,
        args.args,
        as_json=args.json,
        as_regex=args.regex,
        quiet=args.quiet,
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except PrimkitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
