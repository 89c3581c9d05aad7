"""
Injectable random source shared by the generator and the rasterizer.

Every draw goes through one object so that a seed fully determines a layout.
The order of draws matters: reordering calls changes the output even with the
same seed.
"""

import random
from typing import Optional, Protocol


class Sampler(Protocol):
    """Anything that can draw uniform integers the way RandomSource does."""

    def range(self, low: int, high: int) -> int:
        ...

    def range_inclusive(self, low: int, high: int) -> int:
        ...


class RandomSource:
    """
    Uniform integer sampler backed by its own random.Random instance.

    Args:
        seed: Seed for the generator. When None a fresh seed is drawn and
            kept in `seed`, so the result can still be reproduced later.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = random.randrange(1 << 32)
        self.seed: int = seed
        self._random = random.Random(seed)

    def range(self, low: int, high: int) -> int:
        """Returns an integer in [low, high)."""
        return self._random.randrange(low, high)

    def range_inclusive(self, low: int, high: int) -> int:
        """Returns an integer in [low, high]."""
        return self._random.randint(low, high)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed})"
