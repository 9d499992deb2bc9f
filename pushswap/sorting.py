"""Sorting stack ``a`` of a push-swap machine with the fewest moves it can find."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice

from .commands import Moves
from .stacks import Machine, Stack


def nearest_below(values: Iterable[int], value: int) -> int:
    """Return the largest of ``values`` below ``value``, or ``value`` if none is."""
    return max((item for item in values if item < value), default=value)


def nearest_above(values: Iterable[int], value: int) -> int:
    """Return the smallest of ``values`` above ``value``, or ``value`` if none is."""
    return min((item for item in values if item > value), default=value)


def _own_rotation(index: int, size: int) -> tuple[int, int]:
    """Return (forward, backward) rotations that bring ``index`` to the top."""
    if index < size // 2:
        return index, 0
    return 0, size - index


def _target_rotation(stack: Stack, target: int) -> tuple[int, int]:
    """Return (forward, backward) rotations that bring ``target`` to the top."""
    size = len(stack)
    position = stack.position(target)
    if position < size // 2:
        return position, 0
    return 0, size - position


def costs_a_to_b(machine: Machine) -> list[Moves]:
    """Plan, for each value of ``a`` from the top, the rotations before ``pb``.

    Stack ``b`` is kept in descending order, so each value goes above the
    nearest smaller one, or above the maximum when it is a new extreme.
    """
    a, b = machine.a, machine.b
    largest, smallest = max(b), min(b)
    size = len(a)
    plans = []
    for index, value in enumerate(a):
        ra, rra = _own_rotation(index, size)
        if value > largest or value < smallest:
            target = largest
        else:
            target = nearest_below(b, value)
        rb, rrb = _target_rotation(b, target)
        plans.append(Moves(ra=ra, rra=rra, rb=rb, rrb=rrb))
    return plans


def costs_b_to_a(machine: Machine) -> list[Moves]:
    """Plan, for each value of ``b`` from the top, the rotations before ``pa``.

    Stack ``a`` is kept in ascending order, so each value goes above the
    nearest larger one, or above the minimum when it is a new extreme.
    """
    a, b = machine.a, machine.b
    largest, smallest = max(a), min(a)
    size = len(b)
    plans = []
    for index, value in enumerate(b):
        rb, rrb = _own_rotation(index, size)
        if value > largest or value < smallest:
            target = smallest
        else:
            target = nearest_above(a, value)
        ra, rra = _target_rotation(a, target)
        plans.append(Moves(ra=ra, rra=rra, rb=rb, rrb=rrb))
    return plans


def _cheapest(plans: list[Moves]) -> Moves:
    """Return the first plan with the fewest rotations."""
    return min(plans, key=Moves.total)


def sort_three(machine: Machine) -> None:
    """Sort a stack ``a`` of three values."""
    a = machine.a
    largest = max(a)
    first, second = islice(a, 2)
    if largest == first:
        machine.ra()
    elif largest == second:
        machine.rra()
    first, second = islice(a, 2)
    if first > second:
        machine.sa()


def sort_four(machine: Machine) -> None:
    """Sort a stack ``a`` of four values using ``b`` for the smallest."""
    a = machine.a
    smallest = min(a)
    while a.top() != smallest:
        machine.ra()
    machine.pb()
    sort_three(machine)
    machine.pa()


def sort_large(machine: Machine) -> None:
    """Sort a stack ``a`` of five or more values."""
    a, b = machine.a, machine.b
    machine.pb()
    machine.pb()
    while len(a) > 3:
        _cheapest(costs_a_to_b(machine)).apply(machine)
        machine.pb()
    sort_three(machine)
    while len(b) > 0:
        _cheapest(costs_b_to_a(machine)).apply(machine)
        machine.pa()
    smallest = min(a)
    if a.position(smallest) <= len(a) // 2:
        while a.top() != smallest:
            machine.ra()
    else:
        while a.top() != smallest:
            machine.rra()


def sort(machine: Machine) -> None:
    """Sort stack ``a`` in ascending order from the top, leaving ``b`` empty."""
    size = len(machine.a)
    if size < 2 or machine.a.is_sorted():
        return
    if size == 2:
        machine.sa()
    elif size == 3:
        sort_three(machine)
    elif size == 4:
        sort_four(machine)
    else:
        sort_large(machine)