"""Writing characters, strings, lines and numbers to file descriptors."""

from __future__ import annotations

import os

STDOUT = 1


def _write_all(fd: int, data: bytes) -> int:
    view = memoryview(data)
    written = 0
    while written < len(view):
        written += os.write(fd, view[written:])
    return written


def put_char(c: int | str, fd: int = STDOUT) -> int:
    """Write a single character (a one-character string or a byte value) to ``fd``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([c & 0xFF])
    return _write_all(fd, data)


def put_str(text: str, fd: int = STDOUT) -> int:
    """Write ``text`` to ``fd``; nothing is written to descriptor 0."""
    if not fd:
        return 0
    return _write_all(fd, text.encode("utf-8"))


def put_line(text: str, fd: int = STDOUT) -> int:
    """Write ``text`` and a newline to ``fd``; nothing is written to descriptor 0."""
    if not fd:
        return 0
    return _write_all(fd, (text + "\n").encode("utf-8"))


def put_number(n: int, fd: int = STDOUT) -> int:
    """Write the decimal form of ``n`` to ``fd``."""
    return _write_all(fd, str(n).encode("ascii"))