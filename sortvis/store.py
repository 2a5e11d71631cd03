import logging

import numpy as np

logger = logging.getLogger(__name__)


def generate_array(size, low, high, rng=None) -> list:
    """`size` ints drawn uniformly from the inclusive range [low, high]."""
    rng = rng if rng is not None else np.random.default_rng()
    return rng.integers(low, high, size=size, endpoint=True).tolist()


class ArrayStore:
    """
    Owns the bar sequence. The list object itself never changes identity or
    length; regenerating refills it in place so running sorters that still
    hold a reference can never see a resized list.
    """

    def __init__(self, size, low, high, seed=None):
        self.size, self.low, self.high = size, low, high
        self._rng    = np.random.default_rng(seed)
        self._values = []

    @property
    def values(self):
        return self._values

    @property
    def generated(self):
        return len(self._values) == self.size

    def regenerate(self):
        fresh = generate_array(self.size, self.low, self.high, self._rng)
        self._values[:] = fresh
        logger.info("Generated %d values in [%d, %d]", self.size, self.low, self.high)

    def snapshot(self):
        return tuple(self._values)

    def is_sorted(self):
        v = self._values
        return all(v[i] <= v[i + 1] for i in range(len(v) - 1))
