"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from typing import Any

from .output import STDOUT, put_str

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF
_DIRECTIVE = re.compile(r"%(.|$)", re.DOTALL)


def _signed32(value: int) -> int:
    value = int(value) & _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(int(arg) & 0xFF)


def _string(arg: Any) -> str:
    return "(null)" if arg is None else str(arg)


def _pointer(arg: Any) -> str:
    address = 0 if arg is None else int(arg) & _UINT64
    return "(nil)" if address == 0 else f"0x{address:x}"


def _decimal(arg: Any) -> str:
    return str(_signed32(arg))


def _unsigned(arg: Any) -> str:
    return str(int(arg) & _UINT32)


def _hex_lower(arg: Any) -> str:
    return f"{int(arg) & _UINT32:x}"


def _hex_upper(arg: Any) -> str:
    return f"{int(arg) & _UINT32:X}"


_HANDLERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _decimal,
    "i": _decimal,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def format_text(fmt: str, *args: Any) -> str:
    """Expand the directives in ``fmt`` with ``args`` and return the result.

    An unknown conversion character is written out as-is, preceded by ``%``;
    a lone ``%`` at the very end produces nothing.
    """
    remaining: Iterator[Any] = iter(args)

    def take() -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def expand(match: re.Match[str]) -> str:
        spec = match.group(1)
        if not spec:
            return ""
        if spec == "%":
            return "%"
        handler = _HANDLERS.get(spec)
        if handler is None:
            return "%" + spec
        return handler(take())

    return _DIRECTIVE.sub(expand, fmt)


def print_formatted(fmt: str, *args: Any) -> int:
    """Format like :func:`format_text` and write the result to standard output.

    Returns the number of bytes written.
    """
    return put_str(format_text(fmt, *args), STDOUT)