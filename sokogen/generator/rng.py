"""
Seeded linear-congruential sequence generator.

Every generation attempt owns its own instance so that an attempt can be
reproduced in isolation from ``(base_seed, attempt_index)``.
"""

import math
from typing import Sequence, TypeVar

T = TypeVar("T")

MULTIPLIER = 9301
INCREMENT = 49297
MODULUS = 233280


class SequenceGenerator:
    """Low-state LCG producing reproducible reals and integers."""

    def __init__(self, seed: int):
        self.seed = seed
        self.state = seed % MODULUS

    def next(self) -> float:
        """Return a real in [0, 1)."""
        self.state = (self.state * MULTIPLIER + INCREMENT) % MODULUS
        return self.state / MODULUS

    def next_int(self, min_value: int, max_value: int) -> int:
        """Return an integer in [min_value, max_value], both inclusive."""
        if max_value < min_value:
            raise ValueError(f"empty range [{min_value}, {max_value}]")
        return math.floor(self.next() * (max_value - min_value + 1)) + min_value

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("cannot choose from an empty sequence")
        return items[self.next_int(0, len(items) - 1)]

    def __repr__(self) -> str:
        return f"SequenceGenerator(seed={self.seed}, state={self.state})"
