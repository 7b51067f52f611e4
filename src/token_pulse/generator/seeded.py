"""Deterministic pseudo-random source for mock data generation."""

import math
from typing import Callable

SeededRandom = Callable[[float], float]


def seeded_random(seed: float) -> float:
    """Map ``seed`` to a value in [0, 1).

    The same seed always yields the same value, in any process.
    """
    x = math.sin(seed) * 10000
    return x - math.floor(x)
