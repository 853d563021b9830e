"""Three-way comparison functions.

Each function returns a negative number when the first argument orders
before the second, zero when they are equal and a positive number when it
orders after.
"""

from __future__ import annotations

from typing import Any


def _three_way(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_int(a: int, b: int) -> int:
    """Compare two integers by subtraction: ``a - b``."""
    return a - b


def compare_str(a: str, b: str) -> int:
    """Compare two strings by the code points of their characters."""
    return _three_way(a, b)


def compare_str_ignore_case(a: str, b: str) -> int:
    """Compare two strings by their characters, ignoring case differences."""
    return _three_way(a.lower(), b.lower())


def compare_identity(a: Any, b: Any) -> int:
    """Compare two objects by identity; zero only for the very same object."""
    return id(a) - id(b)