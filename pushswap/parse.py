"""Reading and validating the integers given on the command line."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.convert import atoi
from pushswap.strings import split

__all__ = ["InputError", "is_number", "tokens", "check_arguments", "parse_values"]

INT_MIN = -2147483648
INT_MAX = 2147483647


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct 32-bit integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def is_number(text: str) -> bool:
    """Return True if ``text`` is an optional sign followed by digits only.

    A lone sign is rejected; an empty string is accepted.
    """
    body = text
    if body[:1] in ("-", "+"):
        body = body[1:]
        if not body[:1].isdigit() or not body[:1].isascii():
            return False
    return all("0" <= char <= "9" for char in body)


def tokens(argv: Sequence[str]) -> list[str]:
    """Return the number tokens from the arguments, program name excluded.

    A single argument is split on spaces; several arguments are taken as they are.
    """
    if len(argv) == 1:
        return split(argv[0], " ")
    return list(argv)


def check_arguments(argv: Sequence[str]) -> list[str]:
    """Validate the arguments and return their tokens.

    Raises InputError for a token that is not a number, a value outside
    the 32-bit signed range, or a value that appears twice.
    """
    items = tokens(argv)
    for position, item in enumerate(items):
        if not is_number(item):
            raise InputError()
        number = atoi(item)
        if not INT_MIN <= number <= INT_MAX:
            raise InputError()
        if any(atoi(later) == number for later in items[position + 1:]):
            raise InputError()
    return items


def parse_values(argv: Sequence[str]) -> list[int]:
    """Validate the arguments and return the integers they hold, in order."""
    return [atoi(item) for item in check_arguments(argv)]