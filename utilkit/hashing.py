"""The djb2 string hash."""

from __future__ import annotations

_MASK = (1 << 64) - 1
_SEED = 5381


def djb2_hash(text: str | bytes) -> int:
    """Return the 64-bit djb2 hash of ``text``.

    Strings are hashed as UTF-8. Bytes are taken as signed characters and
    hashing stops at the first zero byte.
    """
    if isinstance(text, str):
        data = text.encode("utf-8")
    elif isinstance(text, (bytes, bytearray)):
        data = bytes(text)
    else:
        raise TypeError(f"cannot hash {type(text).__name__}")
    result = _SEED
    for byte in data.split(b"\0", 1)[0]:
        signed = byte - 256 if byte >= 128 else byte
        result = (result * 33 + signed) & _MASK
    return result