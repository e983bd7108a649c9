"""Small helpers that write characters, text and numbers to a stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: TextIO | None = None) -> None:
    """Write a single character to *stream* (standard output by default)."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write *text* to *stream*; ``None`` writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write *text* followed by a newline; ``None`` writes nothing at all."""
    if text is None:
        return
    out = _target(stream)
    out.write(text)
    out.write("\n")


def put_nbr(number: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of *number*."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, not {type(number).__name__}")
    _target(stream).write(str(number))