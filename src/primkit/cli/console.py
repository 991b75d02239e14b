"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
``--help`` and ``--version`` keep working when it is not installed.
Messages and diagnostics go to stderr; command results are printed to
stdout by :mod:`primkit.cli.app`.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from primkit.exceptions import EnvironmentError

LOGGER_NAME = "primkit"
"""Parent of every logger in the package."""

PLAIN_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def _build_log_handler() -> logging.Handler:
    """Return a Rich log handler, or a plain stderr handler without Rich."""
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(PLAIN_LOG_FORMAT))
        return handler
    return RichHandler(
        console=get_rich_console(),
        show_time=False,
        show_path=False,
        markup=False,
    )


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Route the ``primkit`` loggers to stderr.

    Diagnostics from the string parsers are ``ERROR`` records and always
    shown; ``--verbose`` adds the CLI's ``DEBUG`` records.  Calling this
    again replaces the previous handler instead of stacking another.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers[:] = [_build_log_handler()]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return package_logger
