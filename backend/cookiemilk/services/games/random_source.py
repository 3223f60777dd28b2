"""Seedable randomness source for board snapshots.

Usage:
    rng = RandomSource(2024)
    rng.next_bool()
    rng.seed(2024)  # back to the start of the same sequence
"""

import random

DEFAULT_SEED = 2024

_SEED_MASK = (1 << 64) - 1


class RandomSource:
    def __init__(self, seed: int = DEFAULT_SEED):
        self._rng = random.Random()
        self._seed = None
        self.seed(seed)

    @property
    def seed_value(self) -> int:
        return self._seed

    def seed(self, value: int) -> None:
        """Replace the generator state with one derived from a 64-bit seed."""
        self._seed = int(value) & _SEED_MASK
        self._rng.seed(self._seed)

    def next_bool(self) -> bool:
        return bool(self._rng.getrandbits(1))
