"""The two stacks and the eleven operations that rearrange them.

A pile is a list whose first element is the top of the stack.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable


def push(source: list[int], target: list[int]) -> None:
    """Move the top of ``source`` onto ``target``; nothing if ``source`` is empty."""
    if not source:
        return
    target.insert(0, source.pop(0))


def swap(pile: list[int]) -> None:
    """Exchange the two top elements; nothing if there are fewer than two."""
    if len(pile) < 2:
        return
    pile[0], pile[1] = pile[1], pile[0]


def rotate(pile: list[int]) -> None:
    """Move the top element to the bottom."""
    if len(pile) < 2:
        return
    pile.append(pile.pop(0))


def reverse_rotate(pile: list[int]) -> None:
    """Move the bottom element to the top."""
    if len(pile) < 2:
        return
    pile.insert(0, pile.pop())


def _write_operation(name: str) -> None:
    sys.stdout.write(name + "\n")


class Stacks:
    """Stacks ``a`` and ``b``; every operation reports its name to ``emit``.

    By default each operation name is written to standard output on its
    own line.
    """

    def __init__(
        self,
        values: Iterable[int] = (),
        emit: Callable[[str], object] | None = None,
    ) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []
        self._emit = emit if emit is not None else _write_operation

    @property
    def size_a(self) -> int:
        return len(self.a)

    @property
    def size_b(self) -> int:
        return len(self.b)

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def pa(self) -> None:
        """Push the top of ``b`` onto ``a``."""
        push(self.b, self.a)
        self._emit("pa")

    def pb(self) -> None:
        """Push the top of ``a`` onto ``b``."""
        push(self.a, self.b)
        self._emit("pb")

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        swap(self.b)
        self._emit("sb")

    def ra(self) -> None:
        """Rotate ``a`` upwards."""
        rotate(self.a)
        self._emit("ra")

    def rb(self) -> None:
        """Rotate ``b`` upwards."""
        rotate(self.b)
        self._emit("rb")

    def rra(self) -> None:
        """Rotate ``a`` downwards."""
        reverse_rotate(self.a)
        self._emit("rra")

    def rrb(self) -> None:
        """Rotate ``b`` downwards."""
        reverse_rotate(self.b)
        self._emit("rrb")

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        rotate(self.a)
        rotate(self.b)
        self._emit("rr")

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        reverse_rotate(self.a)
        reverse_rotate(self.b)
        self._emit("rrr")