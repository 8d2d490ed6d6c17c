"""Shared test doubles."""
from stellar_bargains.core.rng import SeededRNG


class ScriptedRNG(SeededRNG):
    """Replays a fixed sequence of ``random()`` draws.

    Lets tests pin the exact noise and direction draws of the pricing
    model. ``choice`` and ``uniform`` are derived from the same stream.
    """

    def __init__(self, draws):
        super().__init__(0)
        self._draws = list(draws)
        self._idx = 0

    def random(self):
        if self._idx >= len(self._draws):
            raise IndexError("ScriptedRNG ran out of draws")
        val = self._draws[self._idx]
        self._idx += 1
        return val

    def uniform(self, a, b):
        return a + (b - a) * self.random()

    def choice(self, seq):
        return seq[min(int(self.random() * len(seq)), len(seq) - 1)]
