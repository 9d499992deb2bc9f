"""Stacks of integers and the machine that runs push-swap operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from enum import Enum
from itertools import pairwise
from typing import TextIO


class Stack:
    """A stack of integers; iteration runs from the top to the bottom."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def top(self) -> int:
        """Return the value on top of the stack."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[0]

    def swap(self) -> None:
        """Exchange the two topmost values; does nothing with fewer than two."""
        if len(self._items) < 2:
            return
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def rotate(self) -> None:
        """Move the top value to the bottom; does nothing with fewer than two."""
        if len(self._items) >= 2:
            self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top; does nothing with fewer than two."""
        if len(self._items) >= 2:
            self._items.rotate(1)

    def push_onto(self, other: Stack) -> None:
        """Move the top value of this stack onto ``other``; does nothing if empty."""
        if self._items:
            other._items.appendleft(self._items.popleft())

    def position(self, value: int) -> int:
        """Return the depth of ``value`` from the top, or the stack size if absent."""
        for index, item in enumerate(self._items):
            if item == value:
                return index
        return len(self._items)

    def is_sorted(self) -> bool:
        """Tell whether the values ascend from top to bottom."""
        return all(upper <= lower for upper, lower in pairwise(self._items))


class Operation(Enum):
    """The instructions of the push-swap machine."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


def _both(action: Callable[[Stack], None]) -> Callable[[Stack, Stack], None]:
    def run(a: Stack, b: Stack) -> None:
        action(a)
        action(b)

    return run


_ACTIONS: dict[Operation, Callable[[Stack, Stack], None]] = {
    Operation.SA: lambda a, b: a.swap(),
    Operation.SB: lambda a, b: b.swap(),
    Operation.SS: _both(Stack.swap),
    Operation.PA: lambda a, b: b.push_onto(a),
    Operation.PB: lambda a, b: a.push_onto(b),
    Operation.RA: lambda a, b: a.rotate(),
    Operation.RB: lambda a, b: b.rotate(),
    Operation.RR: _both(Stack.rotate),
    Operation.RRA: lambda a, b: a.reverse_rotate(),
    Operation.RRB: lambda a, b: b.reverse_rotate(),
    Operation.RRR: _both(Stack.reverse_rotate),
}


class Machine:
    """Two stacks, ``a`` and ``b``, and a record of the operations run on them.

    Every operation is written to ``output`` as its name on a line of its own.
    """

    def __init__(self, values: Iterable[int] = (), output: TextIO | None = None) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.output = output
        self.history: list[Operation] = []

    def apply(self, operation: Operation | str) -> None:
        """Run one operation, given as an ``Operation`` or its name."""
        operation = Operation(operation)
        _ACTIONS[operation](self.a, self.b)
        self.history.append(operation)
        if self.output is not None:
            self.output.write(f"{operation.value}\n")

    def sa(self) -> None:
        self.apply(Operation.SA)

    def sb(self) -> None:
        self.apply(Operation.SB)

    def ss(self) -> None:
        self.apply(Operation.SS)

    def pa(self) -> None:
        self.apply(Operation.PA)

    def pb(self) -> None:
        self.apply(Operation.PB)

    def ra(self) -> None:
        self.apply(Operation.RA)

    def rb(self) -> None:
        self.apply(Operation.RB)

    def rr(self) -> None:
        self.apply(Operation.RR)

    def rra(self) -> None:
        self.apply(Operation.RRA)

    def rrb(self) -> None:
        self.apply(Operation.RRB)

    def rrr(self) -> None:
        self.apply(Operation.RRR)