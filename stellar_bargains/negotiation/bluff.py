"""Detection of extreme or oscillating offer patterns."""
from __future__ import annotations

from stellar_bargains.core.types import BluffMetrics, NegotiationMode

EXTREME_BUY_RATIO = 0.4
EXTREME_SELL_RATIO = 1.6
OSCILLATION_THRESHOLD = 0.3


class BluffDetector:
    """Keeps the player's offers for one session and scores them.

    Metrics are recomputed from the whole history on every call; round
    counts are small enough that this stays trivial.
    """

    def __init__(self):
        self._offers: list[float] = []

    @property
    def history(self) -> list[float]:
        return list(self._offers)

    def analyze_offer(
        self, offer: float, fair_price: float, mode: NegotiationMode,
    ) -> BluffMetrics:
        """Record *offer*, then score the full history."""
        self._offers.append(offer)
        return self.metrics(fair_price, mode)

    def metrics(self, fair_price: float, mode: NegotiationMode) -> BluffMetrics:
        """Score the current history without recording anything."""
        last = self._offers[-1] if self._offers else 0.0
        return BluffMetrics(
            extreme_offers=self._count_extreme(fair_price, mode),
            oscillations=self._count_oscillations(),
            last_offer_ratio=last / fair_price,
        )

    @staticmethod
    def is_bluffing(metrics: BluffMetrics) -> bool:
        """Two or more extreme offers, or three or more wild swings."""
        return metrics.extreme_offers > 1 or metrics.oscillations > 2

    def reset(self) -> None:
        self._offers = []

    def truncate(self, length: int) -> None:
        """Drop offers recorded after the first *length* entries."""
        del self._offers[length:]

    # ── scoring ──────────────────────────────────────────────────────────

    def _count_extreme(self, fair_price: float, mode: NegotiationMode) -> int:
        count = 0
        for offer in self._offers:
            ratio = offer / fair_price
            if mode == NegotiationMode.BUY and ratio < EXTREME_BUY_RATIO:
                count += 1
            elif mode == NegotiationMode.SELL and ratio > EXTREME_SELL_RATIO:
                count += 1
        return count

    def _count_oscillations(self) -> int:
        count = 0
        for prev, curr in zip(self._offers, self._offers[1:]):
            if abs(curr - prev) / prev > OSCILLATION_THRESHOLD:
                count += 1
        return count
