"""Validation and conversion of the command-line numbers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")
_NUMBER_CHARS = frozenset("0123456789+-")


class InputError(ValueError):
    """Raised when the numbers given to the program are not acceptable."""


def parse_int(text: str) -> int:
    """Convert ``text`` to an integer that fits in 32 signed bits.

    Leading whitespace and one sign are allowed; everything after them must be
    decimal digits.
    """
    match = _NUMBER.fullmatch(text)
    if match is None:
        raise InputError(f"not a number: {text!r}")
    sign, digits = match.groups()
    value = int(digits)
    if sign == "-":
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"number out of range: {text!r}")
    return value


def has_only_number_chars(args: Iterable[str]) -> bool:
    """Return whether every argument consists only of digits and sign characters."""
    return all(char in _NUMBER_CHARS for arg in args for char in arg)


def has_duplicates(values: Sequence[int]) -> bool:
    """Return whether any value occurs more than once."""
    return len(set(values)) != len(values)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the program arguments into the list of numbers for stack A.

    Raises :class:`InputError` for a malformed or out-of-range number, a
    character other than a digit or sign, or a repeated value.
    """
    values = [parse_int(arg) for arg in args]
    if has_duplicates(values) or not has_only_number_chars(args):
        raise InputError("invalid arguments")
    return values