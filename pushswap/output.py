"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write the single character ``c`` to ``stream`` (standard output by default)."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream``."""
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of ``n`` to ``stream``."""
    _target(stream).write(f"{n:d}")