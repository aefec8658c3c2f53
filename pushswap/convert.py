"""Conversions between decimal text and integers."""

from __future__ import annotations

import re

__all__ = ["atoi", "itoa"]

_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Read a decimal integer from the start of ``text``.

    Leading whitespace is skipped, one optional sign is read, then digits
    up to the first non-digit. Text with no digits gives 0.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    return f"{n:d}"