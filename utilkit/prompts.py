"""Reading values, lines and file names from a terminal prompt."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import IO, Any, TextIO


class FilePromptError(Exception):
    """A file could not be obtained from the prompt."""


class NoFileNameError(FilePromptError):
    """No file name was entered."""


class WrongSuffixError(FilePromptError):
    """The entered file name does not end with the required suffix."""


class FileOpenError(FilePromptError):
    """The named file could not be opened."""


def _read(prompt: str, max_len: int, stream: TextIO | None, out: TextIO | None) -> str:
    if max_len < 2:
        raise ValueError("max_len must be at least 2")
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    out.write(prompt)
    out.flush()
    line = stream.readline(max_len - 1)
    if not line:
        raise EOFError("no input")
    return line


def read_value(
    prompt: str = "",
    parse: Callable[[str], Any] = str,
    max_len: int = 256,
    stream: TextIO | None = None,
    out: TextIO | None = None,
) -> Any:
    """Read a line and return ``parse`` applied to its first word.

    At most ``max_len - 1`` characters are read. A blank line raises
    ValueError, as does a word ``parse`` rejects; end of input raises EOFError.
    """
    words = _read(prompt, max_len, stream, out).split()
    if not words:
        raise ValueError("no input")
    return parse(words[0])


def read_full_line(
    prompt: str = "",
    max_len: int = 256,
    stream: TextIO | None = None,
    out: TextIO | None = None,
) -> str:
    """Read up to ``max_len - 1`` characters of a line, newline included."""
    return _read(prompt, max_len, stream, out)


def read_line(
    prompt: str = "",
    max_len: int = 256,
    stream: TextIO | None = None,
    out: TextIO | None = None,
) -> str:
    """Read up to ``max_len - 1`` characters of a line, without its newline."""
    line = _read(prompt, max_len, stream, out)
    return line[:-1] if line.endswith("\n") else line


def open_from_prompt(
    mode: str = "r",
    suffix: str = "",
    prompt: str = "",
    max_len: int = 256,
    cwd: str | os.PathLike[str] | None = None,
    stream: TextIO | None = None,
    out: TextIO | None = None,
) -> IO[Any]:
    """Ask for a file name and open that file in ``mode``.

    The name must end with ``suffix``; a relative name is taken relative to
    ``cwd`` when given.
    """
    try:
        name = read_line(prompt, max_len, stream, out)
    except EOFError as exc:
        raise NoFileNameError("no file name entered") from exc
    if not name:
        raise NoFileNameError("no file name entered")
    if not name.endswith(suffix):
        raise WrongSuffixError(f"{name!r} does not end with {suffix!r}")
    path = Path(cwd, name) if cwd is not None else Path(name)
    try:
        return open(path, mode)
    except OSError as exc:
        raise FileOpenError(f"cannot open {str(path)!r}: {exc}") from exc