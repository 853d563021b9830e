"""Reading and writing typed arrays as binary records or delimited text."""

from __future__ import annotations

import struct
import sys
from typing import BinaryIO, TextIO

from utilkit.typed_array import TypedArray

# Typecode (zero-padded, in the slot the item pointer occupies), item size, length.
_HEADER = struct.Struct("=8sQI4x")

_BY_SIZE = {1: "b", 2: "h", 4: "i", 8: "q"}


def write_binary(array: TypedArray, stream: BinaryIO) -> None:
    """Write ``array`` as a 24-byte header followed by its items' bytes."""
    if stream is None:
        raise TypeError("stream must be a binary file, not None")
    tag = array.typecode.encode("ascii").ljust(8, b"\0")
    stream.write(_HEADER.pack(tag, array.itemsize, len(array)))
    stream.write(array.to_bytes())


def read_binary(stream: BinaryIO) -> TypedArray:
    """Read one array written by :func:`write_binary`.

    A header whose typecode slot is all zeros is read as signed integers of
    the recorded item size. Raises EOFError at a clean end of input and
    ValueError for a truncated or malformed record.
    """
    if stream is None:
        raise TypeError("stream must be a binary file, not None")
    header = stream.read(_HEADER.size)
    if not header:
        raise EOFError("no array to read")
    if len(header) < _HEADER.size:
        raise ValueError("truncated array header")
    tag, item_size, length = _HEADER.unpack(header)
    typecode = tag.rstrip(b"\0").decode("ascii")
    if not typecode:
        if item_size not in _BY_SIZE:
            raise ValueError(f"no integer type has item size {item_size}")
        typecode = _BY_SIZE[item_size]
    if TypedArray(typecode).itemsize != item_size:
        raise ValueError(
            f"typecode {typecode!r} does not have item size {item_size}"
        )
    needed = item_size * length
    payload = stream.read(needed)
    if len(payload) < needed:
        raise ValueError("truncated array items")
    return TypedArray.from_bytes(typecode, payload)


def write_text(
    array: TypedArray,
    fmt: str = "%s",
    delimiter: str = " ",
    stream: TextIO | None = None,
) -> None:
    """Write each item formatted with ``fmt``, separated by ``delimiter``."""
    stream = sys.stdout if stream is None else stream
    stream.write(delimiter.join(fmt % item for item in array))