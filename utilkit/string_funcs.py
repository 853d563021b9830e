"""String splitting, padding, alignment, trimming and case helpers."""

from __future__ import annotations

import string
from enum import Enum
from itertools import groupby

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class Alignment(Enum):
    """Where text sits inside the available width."""

    LEFT = "l"
    RIGHT = "r"
    CENTER = "c"


def _require_char(value: str, name: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")
    return value


def split(text: str, count: int, delimiters: str) -> list[str]:
    """Return at most ``count`` non-empty pieces of ``text``.

    Any character in ``delimiters`` separates pieces; runs of delimiters
    count as one separator.
    """
    if count < 1:
        raise ValueError("count must be at least 1")
    separators = set(delimiters)
    pieces = (
        "".join(group)
        for is_separator, group in groupby(text, key=lambda c: c in separators)
        if not is_separator
    )
    return [piece for piece, _ in zip(pieces, range(count))]


def add_padding(
    text: str, width: int | None, front: int, back: int, fill: str = " "
) -> str:
    """Surround ``text`` with ``front`` and ``back`` copies of ``fill``.

    The result is cut to at most ``width`` characters; ``None`` means no limit.
    """
    _require_char(fill, "fill")
    if front < 0 or back < 0:
        raise ValueError("padding lengths must not be negative")
    if width is not None and width < 0:
        raise ValueError("width must not be negative")
    padded = f"{fill * front}{text}{fill * back}"
    return padded if width is None else padded[:width]


def align(
    text: str, width: int, mode: Alignment | str = Alignment.LEFT, fill: str = " "
) -> str:
    """Place ``text`` left, right or centred in ``width`` characters of ``fill``.

    When centring an odd amount of padding, the extra character goes last.
    """
    alignment = Alignment(mode)
    padding = max(width - len(text), 0)
    if alignment is Alignment.LEFT:
        front, back = 0, padding
    elif alignment is Alignment.RIGHT:
        front, back = padding, 0
    else:
        front = padding // 2
        back = padding - front
    return add_padding(text, width, front, back, fill)


def trim(text: str, char: str = " ") -> str:
    """Remove ``char`` from both ends of ``text``."""
    return text.strip(_require_char(char, "char"))


def trim_front(text: str, char: str = " ") -> str:
    """Remove ``char`` from the start of ``text``."""
    return text.lstrip(_require_char(char, "char"))


def trim_end(text: str, char: str = " ") -> str:
    """Remove ``char`` from the end of ``text``."""
    return text.rstrip(_require_char(char, "char"))


def to_upper(text: str) -> str:
    """Change ASCII letters to upper case."""
    return text.translate(_TO_UPPER)


def to_lower(text: str) -> str:
    """Change ASCII letters to lower case."""
    return text.translate(_TO_LOWER)


def remove_newline(text: str) -> str:
    """Remove one trailing newline, if there is one."""
    return text[:-1] if text.endswith("\n") else text


def case_format(text: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    return to_upper(text[:1]) + to_lower(text[1:])