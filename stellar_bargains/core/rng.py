"""Seeded random number generator for reproducible games."""
from __future__ import annotations

import random


class SeededRNG:
    """Wrapper around random.Random; injected wherever the game draws."""

    def __init__(self, seed: int):
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def uniform(self, a: float, b: float) -> float:
        return self._rng.uniform(a, b)

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

    def choice(self, seq: list):
        return self._rng.choice(seq)

    def random(self) -> float:
        return self._rng.random()
