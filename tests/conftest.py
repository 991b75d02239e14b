"""Shared pytest fixtures and configuration for the primkit test suite.

Guidelines
----------
* Core tests are pure function calls — no I/O, no global state.
* Diagnostics are asserted through an injected mock logger or
  ``caplog``, never by reading stderr.
* CLI tests call ``main(argv)`` directly and capture stdout/stderr.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def diagnostics() -> MagicMock:
    """A stand-in for the parsers' diagnostic logger."""
    return MagicMock(spec=logging.Logger)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handlers the CLI installs on the ``primkit`` logger."""
    package_logger = logging.getLogger("primkit")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


@pytest.fixture
def int_digit_limit() -> Iterator[int]:
    """Enforce the interpreter's default cap on int/str conversions."""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("interpreter has no int/str digit limit")
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(previous)
