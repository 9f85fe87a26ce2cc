"""
Injected random source for layout generation.

All draws for one run go through a single RandomSource so that a seed fully
determines the layout. Not safe to share between concurrent runs.
"""

import random
from typing import Optional


class RandomSource:
    """Seedable source of uniform draws."""

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = random.randint(0, 2**31 - 1)
        self.seed = seed
        self._rng = random.Random(seed)

    @classmethod
    def from_seed(cls, seed: Optional[int] = None) -> 'RandomSource':
        """Create a source; picks and records a fresh seed when seed is None."""
        return cls(seed)

    def next_index(self, n: int) -> int:
        """Uniform integer in [0, n).

        Raises:
            ValueError: If n <= 0
        """
        if n <= 0:
            raise ValueError(f"next_index needs a positive range, got {n}")
        return self._rng.randrange(n)

    def next_uniform(self) -> float:
        """Uniform float in [0, 1)."""
        return self._rng.random()

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed})"
