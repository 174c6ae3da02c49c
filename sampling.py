import math
import numpy as np


def sample_standard_normal(uniform) -> float:
    """
    One N(0, 1) draw via the Box-Muller transform.
    `uniform` returns floats in [0, 1); zeros are redrawn so log(u) stays finite.
    """
    u = 0.0
    v = 0.0
    while u == 0.0:
        u = uniform()
    while v == 0.0:
        v = uniform()
    return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)


class RandomSource:
    """
    Randomness for one simulation run. Seeded like the rest of the app:
    seed=None gives a fresh stream each time, an int makes runs repeatable.
    """

    def __init__(self, seed=None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def random(self) -> float:
        return float(self._rng.random())

    def normal(self) -> float:
        return sample_standard_normal(self.random)

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self.random()
