"""Character classification and integer/text conversion helpers.

Every classifier and case function accepts either a one-character string
or an integer character code, and works on plain ASCII only.
"""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _code(char: str | int) -> int:
    """Return the integer code of *char*, which may be a code or a 1-char str."""
    if isinstance(char, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(char, int):
        return char
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    raise TypeError(f"expected a character or an integer code, not {type(char).__name__}")


def _same_kind(original: str | int, code: int) -> str | int:
    return chr(code) if isinstance(original, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library's atoi does.

    Leading whitespace is skipped, one optional sign is honoured and digits
    are read until the first non-digit. Text without digits yields 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        result = result * 10 + _DIGITS.index(ch)
    return sign * result


def itoa(number: int) -> str:
    """Return the decimal representation of *number*."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, not {type(number).__name__}")
    return str(number)


def is_alpha(char: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(char)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(char: str | int) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(char) <= ord("9")


def is_alnum(char: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str | int) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(char) <= 127


def is_print(char: str | int) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(char) <= 126


def to_upper(char: str | int) -> str | int:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(char, code)


def to_lower(char: str | int) -> str | int:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(char, code)