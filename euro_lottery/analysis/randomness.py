"""Reproducible pseudo-random sources for combination diversification."""

import math
from collections.abc import Callable

from euro_lottery.pools import Pool

# index -> value in [0, 1)
RandomSource = Callable[[int], float]
RandomFactory = Callable[[int, Pool], RandomSource]

SINE_CONSTANTS = {
    Pool.NUMBERS: (12345, 67890),
    Pool.STARS: (54321, 98760),
}


class SeededSine:
    """frac(sin(seed * multiplier + index * step) * 10000).

    Same seed and index always give the same value.
    """

    def __init__(self, seed: int, multiplier: int, step: int):
        self.seed = seed
        self.multiplier = multiplier
        self.step = step

    def __call__(self, index: int) -> float:
        x = math.sin(self.seed * self.multiplier + index * self.step) * 10000
        return x - math.floor(x)


def sine_source(seed: int, pool: Pool) -> RandomSource:
    multiplier, step = SINE_CONSTANTS[pool]
    return SeededSine(seed, multiplier, step)
