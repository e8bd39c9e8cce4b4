"""Deterministic randbelow() sources for key generation tests."""

import random


class FixedRandom:
    """randbelow() stub returning queued values in order."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def randbelow(self, n):
        self.calls.append(n)
        return self.values.pop(0)


class SeededRandom:
    def __init__(self, seed):
        self._rng = random.Random(seed)

    def randbelow(self, n):
        return self._rng.randrange(n)
