"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: int | str) -> int:
    """Return the character code of ``c``, which is a code or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the classic ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text with no digits gives 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < length and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return value * sign


def is_alpha(c: int | str) -> bool:
    """Return whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """Return whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """Return whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Return whether ``c`` is in the 7-bit ASCII range."""
    return 0 <= _code(c) < 128


def is_print(c: int | str) -> bool:
    """Return whether ``c`` is a printable ASCII character."""
    return 32 <= _code(c) < 127


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def _convert_case(c: int | str, low: str, high: str, offset: int) -> int | str:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += offset
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; other values are returned unchanged."""
    return _convert_case(c, "A", "Z", ord("a") - ord("A"))


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; other values are returned unchanged."""
    return _convert_case(c, "a", "z", ord("A") - ord("a"))