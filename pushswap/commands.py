"""Planned rotations that bring a value into place before a push."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .stacks import Machine


@dataclass
class Moves:
    """Counts of rotations planned on each stack."""

    ra: int = 0
    rra: int = 0
    rb: int = 0
    rrb: int = 0

    def total(self) -> int:
        """Return the number of rotations planned, before any are combined."""
        return self.ra + self.rra + self.rb + self.rrb

    def apply(self, machine: Machine) -> None:
        """Run the planned rotations, combining matching ones into rr and rrr."""
        ra, rb, rra, rrb = self.ra, self.rb, self.rra, self.rrb
        together = max(0, min(ra, rb))
        for _ in range(together):
            machine.rr()
        ra -= together
        rb -= together
        together = max(0, min(rra, rrb))
        for _ in range(together):
            machine.rrr()
        rra -= together
        rrb -= together
        for _ in range(ra):
            machine.ra()
        for _ in range(rb):
            machine.rb()
        for _ in range(rra):
            machine.rra()
        for _ in range(rrb):
            machine.rrb()