"""Arithmetic helpers."""

from __future__ import annotations

__all__: list[str] = ["add", "subtract"]


def add(a: int | float, b: int | float) -> int | float:
    """Return ``a + b``."""
    return a + b


def subtract(a: int | float, b: int | float) -> int | float:
    """Return ``a - b``."""
    return a - b
