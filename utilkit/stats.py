"""Picking the larger or smaller of two values."""

from __future__ import annotations

from typing import Any


def larger(a: Any, b: Any) -> Any:
    """Return ``a`` if it is strictly greater than ``b``, otherwise ``b``."""
    return a if a > b else b


def smaller(a: Any, b: Any) -> Any:
    """Return ``a`` if it is strictly less than ``b``, otherwise ``b``."""
    return a if a < b else b