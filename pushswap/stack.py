"""The two push_swap stacks and the operations that rearrange them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import pairwise

__all__ = ["Node", "Stacks", "index_stack"]


@dataclass(eq=False)
class Node:
    """One element of a stack: its value and its rank among all values."""

    data: int
    index: int = -1


def index_stack(nodes: Iterable[Node]) -> None:
    """Give every node its rank by value, 0 for the smallest.

    Equal values are ranked in the order the nodes appear.
    """
    nodes = list(nodes)
    for node in nodes:
        node.index = -1
    for rank, node in enumerate(sorted(nodes, key=lambda n: n.data)):
        node.index = rank


class Stacks:
    """Stacks ``a`` and ``b``, tops at the left, with a log of operations.

    Every operation is recorded in ``operations`` by name, even when it
    cannot change anything (for example pushing from an empty stack).
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: deque[Node] = deque(Node(value) for value in values)
        self.b: deque[Node] = deque()
        self.operations: list[str] = []
        index_stack(self.a)

    def values(self) -> list[int]:
        """Return the values of stack ``a`` from top to bottom."""
        return [node.data for node in self.a]

    def _record(self, name: str) -> None:
        self.operations.append(name)

    @staticmethod
    def _push(target: deque[Node], source: deque[Node]) -> None:
        if source:
            target.appendleft(source.popleft())

    def sa(self) -> None:
        """Exchange the values of the two top elements of ``a``.

        Only the values move; each node keeps the index it had.
        """
        if len(self.a) >= 2:
            first, second = self.a[0], self.a[1]
            first.data, second.data = second.data, first.data
        self._record("sa")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._push(self.a, self.b)
        self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._push(self.b, self.a)
        self._record("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        if len(self.a) >= 2:
            self.a.rotate(-1)
        self._record("ra")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        if len(self.a) >= 2:
            self.a.rotate(1)
        self._record("rra")

    def is_sorted(self) -> bool:
        """Return True if ``a`` is in non-decreasing order from the top."""
        return all(upper.data <= lower.data for upper, lower in pairwise(self.a))

    def min_node(self) -> Node:
        """Return the first node of ``a`` holding the smallest value."""
        if not self.a:
            raise ValueError("stack a is empty")
        return min(self.a, key=lambda node: node.data)

    def max_node(self) -> Node:
        """Return the first node of ``a`` holding the largest value."""
        if not self.a:
            raise ValueError("stack a is empty")
        return max(self.a, key=lambda node: node.data)