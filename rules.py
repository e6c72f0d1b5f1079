from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Tuple


class Rule(Protocol):
    num_states: int

    def check(self, left: bool, center: bool, right: bool) -> bool:
        ...

@dataclass(frozen=True)
class ElementaryRule:
    """
    Wolfram-numbered rule for a 2-state, radius-1 automaton, stored as a lookup table:
    table[i] is the next state of the centre cell for neighborhood code i,
    where i = left*4 + center*2 + right.
    """
    table: Tuple[bool, ...]
    num_states: int = 2

    def __post_init__(self):
        if len(self.table) != 8:
            raise ValueError(f"rule table must have 8 entries, got {len(self.table)}")

    @staticmethod
    def code(left: bool, center: bool, right: bool) -> int:
        return (int(left) << 2) | (int(center) << 1) | int(right)

    def check(self, left: bool, center: bool, right: bool) -> bool:
        return self.table[self.code(left, center, right)]

    def __call__(self, neighborhood: Tuple[bool, bool, bool]) -> bool:
        return self.check(*neighborhood)

    @property
    def number(self) -> int:
        """The rule number this table was decoded from."""
        return sum(1 << i for i, alive in enumerate(self.table) if alive)

    @classmethod
    def from_int(cls, code: int) -> ElementaryRule:
        """Construct from a rule number 0..255; bit i gives the outcome for neighborhood code i."""
        if not 0 <= code <= 255:
            raise ValueError(f"rule number must be in 0..255, got {code}")
        return cls(tuple((code >> i) & 1 == 1 for i in range(8)))
