"""Command line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from pushswap.parse import InputError, parse_values
from pushswap.sort import sort_stack
from pushswap.stack import Stacks

__all__ = ["solve", "main"]


def solve(argv: Sequence[str]) -> list[str]:
    """Return the operations that sort the numbers in ``argv``.

    ``argv`` holds the arguments without the program name. Raises InputError
    when they are not distinct 32-bit integers.
    """
    stacks = Stacks(parse_values(argv))
    if not stacks.is_sorted():
        sort_stack(stacks)
    return list(stacks.operations)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line, or ``Error`` for invalid input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        operations = solve(args)
    except InputError:
        sys.stdout.write("Error")
        return 0
    sys.stdout.write("".join(f"{name}\n" for name in operations))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())