"""Strategies that sort stack ``a`` using the push_swap operations."""

from __future__ import annotations

from collections.abc import Callable

from pushswap.stack import Node, Stacks

__all__ = ["sort_three", "sort_four", "sort_five", "radix_sort", "sort_stack"]

_Move = Callable[[Stacks], None]

# Moves that bring the smallest value to the top, keyed by its position.
_FOUR_MOVES: dict[int, tuple[_Move, ...]] = {
    0: (),
    1: (Stacks.sa,),
    2: (Stacks.rra, Stacks.rra),
    3: (Stacks.rra,),
}

_FIVE_MOVES: dict[int, tuple[_Move, ...]] = {
    0: (),
    1: (Stacks.sa,),
    2: (Stacks.ra, Stacks.ra),
    3: (Stacks.rra, Stacks.rra),
    4: (Stacks.rra,),
}


def _position(stacks: Stacks, target: Node) -> int:
    return next(pos for pos, node in enumerate(stacks.a) if node is target)


def _bring_min_to_top(stacks: Stacks, moves: dict[int, tuple[_Move, ...]]) -> None:
    position = _position(stacks, stacks.min_node())
    for move in moves.get(position, ()):
        move(stacks)


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of three elements with at most two operations."""
    a = stacks.a
    largest = stacks.max_node()
    if largest is a[0]:
        stacks.ra()
    elif largest is a[1]:
        stacks.rra()
    if a[0].data > a[1].data:
        stacks.sa()


def sort_four(stacks: Stacks) -> None:
    """Sort a stack ``a`` of four elements."""
    _bring_min_to_top(stacks, _FOUR_MOVES)
    if not stacks.is_sorted():
        stacks.pb()
        sort_three(stacks)
        stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Sort a stack ``a`` of five elements."""
    _bring_min_to_top(stacks, _FIVE_MOVES)
    if not stacks.is_sorted():
        stacks.pb()
        sort_four(stacks)
        stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Sort ``a`` by the bits of each node's rank, lowest bit first.

    Each pass rotates nodes with the current bit set and pushes the others
    onto ``b``, then pushes everything back; passes repeat until ``a`` is sorted.
    """
    size = len(stacks.a)
    bit = 0
    while not stacks.is_sorted():
        for _ in range(size):
            if (stacks.a[0].index >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()
        bit += 1


def sort_stack(stacks: Stacks) -> None:
    """Sort ``a`` with the strategy suited to its size."""
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        radix_sort(stacks)