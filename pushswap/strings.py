"""String helpers: searching, comparing, slicing, joining and splitting text."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Any, Optional

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strdup",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
    "strlcpy",
    "strlcat",
]

_TERMINATOR = "\0"


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the terminator character ``"\\0"`` finds the end of the string.
    """
    _check_char(c)
    if c == _TERMINATOR:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the terminator character ``"\\0"`` finds the end of the string.
    """
    _check_char(c)
    if c == _TERMINATOR:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns 0 when they match, otherwise the difference between the code
    points of the first pair that differs; the end of a string counts as 0.
    """
    _check_size(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_TERMINATOR):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Return where ``needle`` starts in the first ``n`` characters of ``haystack``.

    An empty needle is found at index 0. Returns None if there is no match.
    """
    _check_size(n, "n")
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of the string gives an empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    if s1 is None or s2 is None:
        raise TypeError("strjoin needs two strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        raise TypeError("strtrim needs a string and a character set")
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _check_char(sep)
    return [piece for piece in s.split(sep) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character of ``s``."""
    if s is None or func is None:
        raise TypeError("strmapi needs a string and a function")
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(s: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` on every item of ``s``, in place.

    Whenever ``func`` returns something other than None, that value replaces
    the item at that index.
    """
    for index, item in enumerate(s):
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits (at most ``size - 1`` characters) and the full
    length of ``src``, which tells the caller whether truncation happened.
    """
    _check_size(size, "size")
    copied = src[:size - 1] if size else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the caller tried to create.
    When ``size`` does not exceed the length of ``dest``, nothing is appended
    and the length reported is ``len(src) + size``.
    """
    _check_size(size, "size")
    if size <= len(dest):
        return dest, len(src) + size
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)