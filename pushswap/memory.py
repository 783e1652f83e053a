"""Byte-buffer helpers: filling, copying, comparing and searching."""

from __future__ import annotations

from collections.abc import Sequence


def _check_span(buffer: Sequence[int], offset: int, n: int, what: str) -> None:
    if n < 0 or offset < 0:
        raise ValueError(f"negative size or offset for {what}")
    if offset + n > len(buffer):
        raise IndexError(f"{what} is too short for {n} bytes at offset {offset}")


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buffer`` in place and return it."""
    return memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Sequence[int], c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within the first ``n`` bytes, or None."""
    _check_span(data, 0, n, "data")
    target = c & 0xFF
    return next((index for index, byte in enumerate(data[:n]) if byte == target), None)


def memcmp(first: Sequence[int], second: Sequence[int], n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch or 0."""
    _check_span(first, 0, n, "first")
    _check_span(second, 0, n, "second")
    return next((a - b for a, b in zip(first[:n], second[:n]) if a != b), 0)


def memcpy(dest: bytearray, src: Sequence[int], n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` into the start of ``dest`` and return ``dest``."""
    _check_span(dest, 0, n, "dest")
    _check_span(src, 0, n, "src")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(
    dest: bytearray,
    src: Sequence[int],
    n: int,
    dest_offset: int = 0,
    src_offset: int = 0,
) -> bytearray:
    """Copy ``n`` bytes between possibly overlapping regions and return ``dest``."""
    _check_span(dest, dest_offset, n, "dest")
    _check_span(src, src_offset, n, "src")
    chunk = bytes(src[src_offset:src_offset + n])
    dest[dest_offset:dest_offset + n] = chunk
    return dest


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``c`` and return ``buffer``."""
    _check_span(buffer, 0, n, "buffer")
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer