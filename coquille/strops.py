"""String searching, slicing, comparison and splitting helpers.

Positions are returned as indices into the text rather than as views into
it. ``None`` means "not found".
"""

from __future__ import annotations

from typing import Callable

_NUL = "\0"


def _single_char(char: str) -> str:
    if not isinstance(char, str):
        raise TypeError(f"expected a single character, not {type(char).__name__}")
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty fields.

    Runs of the separator, and separators at either end, produce no empty
    words: ``split("  a  b ", " ")`` gives ``["a", "b"]``.
    """
    sep = _single_char(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in *charset* from both ends of *text*."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A *start* at or past the end of *text* gives the empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find *needle* lying wholly within the first *length* characters.

    Returns the index of the first match, or ``None``. An empty needle
    matches at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns zero when they agree, otherwise the difference between the codes
    of the first pair of characters that differ. A string that ends early
    compares as if followed by a NUL character.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for position in range(n):
        a = first[position] if position < len(first) else _NUL
        b = second[position] if position < len(second) else _NUL
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def strchr(text: str, char: str) -> int | None:
    """Index of the first occurrence of *char* in *text*, or ``None``.

    Searching for the NUL character finds the end of the string.
    """
    char = _single_char(char)
    index = text.find(char)
    if index >= 0:
        return index
    if char == _NUL:
        return len(text)
    return None


def strrchr(text: str, char: str) -> int | None:
    """Index of the last occurrence of *char* in *text*, or ``None``.

    Searching for the NUL character finds the end of the string.
    """
    char = _single_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index