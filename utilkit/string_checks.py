"""Checks on the characters that make up a string."""

from __future__ import annotations

import string

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)


def _require_str(value: object, name: str = "text") -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, not {type(value).__name__}")
    return value


def is_alpha(text: str) -> bool:
    """True if ``text`` is non-empty and made only of ASCII letters."""
    _require_str(text)
    return bool(text) and all(c in _LETTERS for c in text)


def is_digit(text: str) -> bool:
    """True if ``text`` is non-empty and made only of the digits 0-9."""
    _require_str(text)
    return bool(text) and all(c in _DIGITS for c in text)


def is_int(text: str) -> bool:
    """True if ``text`` is an optional minus sign followed by digits."""
    _require_str(text)
    return is_digit(text[1:] if text.startswith("-") else text)


def is_double(text: str) -> bool:
    """True if ``text`` is an optional minus sign, then digits with at most one point.

    At least one digit is required; the point may come first or last.
    """
    _require_str(text)
    body = text[1:] if text.startswith("-") else text
    if body.count(".") > 1:
        return False
    digits = body.replace(".", "")
    return is_digit(digits)


def has_suffix(text: str, suffix: str) -> bool:
    """True if ``text`` ends with ``suffix``."""
    _require_str(text)
    _require_str(suffix, "suffix")
    return text.endswith(suffix)