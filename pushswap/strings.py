"""String helpers: splitting, searching, joining, bounded copies and trimming."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; an int is taken as a character code."""
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    sep = _char(sep)
    return [word for word in text.split(sep) if word]


def word_count(text: str, sep: str) -> int:
    """Return the number of non-empty words in ``text`` separated by ``sep``."""
    return len(split(text, sep))


def strchr(text: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    target = _char(c)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    target = _char(c)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str | None]) -> None:
    """Call ``func(index, char)`` for every character, storing any returned replacement in place."""
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def strlcpy(text: str, size: int) -> tuple[str, int]:
    """Copy ``text`` into a buffer of ``size`` slots (one kept for the terminator).

    Returns the copied text and the full length of ``text``.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(text)
    return text[:size - 1], len(text)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had, or ``size + len(src)`` when ``size`` does not exceed ``dest``.
    """
    _non_negative(size, "size")
    dest_len = len(dest)
    total = dest_len + len(src) if size > dest_len else size + len(src)
    room = max(0, size - dest_len - 1)
    return dest + src[:room], total


def strlen(text: str) -> int:
    """Return the length of ``text``."""
    return len(text)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch, or 0."""
    _non_negative(n, "n")
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of ``needle`` lying wholly within the first ``length`` characters, or None."""
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]