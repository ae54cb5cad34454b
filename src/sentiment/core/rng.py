"""Seedable RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random


class RNG:
    """Wrapper around random.Random used for every die the rules roll."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def roll_die(self, faces: int) -> int:
        """Roll a single die with the given number of faces."""
        if faces < 1:
            raise ValueError(f"A die needs at least one face, got {faces}.")
        return self.randint(1, faces)
