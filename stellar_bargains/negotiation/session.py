"""Stateful negotiation session wrapping the decision engine.

One session covers one item: it feeds each player offer through the
bluff detector and the engine, applies the merchant state changes, and
tracks rounds until the negotiation completes.

Usage:
    session = create_session(merchant, item, NegotiationMode.BUY)
    result = session.submit_offer(420)
    if session.is_complete():
        ...
"""
from __future__ import annotations

import logging
import math
from typing import Optional

from stellar_bargains.core.types import (
    ActionType,
    Item,
    NegotiationMode,
    NegotiationResult,
    RoundRecord,
    SessionState,
)
from stellar_bargains.negotiation.bluff import BluffDetector
from stellar_bargains.negotiation.engine import NegotiationEngine
from stellar_bargains.negotiation.merchant import Merchant

logger = logging.getLogger(__name__)


class NegotiationClosedError(RuntimeError):
    """Raised when an offer is submitted to a completed session."""


class DecisionStepError(RuntimeError):
    """The decision step failed; the round was rolled back."""


class NegotiationSession:
    """Orchestrates one multi-round exchange.

    Rounds are strictly sequential: round N's mood, trust and anchor
    updates are applied before round N+1 is evaluated. A round either
    completes fully or leaves no trace.

    Attributes:
        engine: the decision engine (owns round counter and anchor).
        bluff_detector: offer history for this session only.
        history: ordered RoundRecord entries.
    """

    def __init__(
        self,
        engine: NegotiationEngine,
        bluff_detector: Optional[BluffDetector] = None,
    ):
        self.engine = engine
        self.bluff_detector = bluff_detector or BluffDetector()
        self.bluff_detector.reset()
        self.history: list[RoundRecord] = []

    # ── convenience views ────────────────────────────────────────────────

    @property
    def merchant(self) -> Merchant:
        return self.engine.merchant

    @property
    def item(self) -> Item:
        return self.engine.item

    @property
    def mode(self) -> NegotiationMode:
        return self.engine.mode

    @property
    def round(self) -> int:
        return self.engine.round

    @property
    def max_rounds(self) -> int:
        return self.engine.max_rounds

    @property
    def last_result(self) -> Optional[NegotiationResult]:
        return self.history[-1].result if self.history else None

    @property
    def counter_offers(self) -> list[int]:
        return [
            r.result.counter_offer for r in self.history
            if r.result.counter_offer is not None
        ]

    @property
    def state(self) -> SessionState:
        return SessionState.COMPLETE if self.is_complete() else SessionState.ACTIVE

    # ── pipeline ─────────────────────────────────────────────────────────

    def submit_offer(self, offer: float) -> NegotiationResult:
        """Public entry point: guard, then run the round pipeline."""
        if self.is_complete():
            raise NegotiationClosedError("Negotiation has ended")
        if not math.isfinite(offer) or offer <= 0:
            raise ValueError(f"Offer must be a positive finite amount, got {offer}")
        return self.process_player_offer(offer)

    def process_player_offer(self, offer: float) -> NegotiationResult:
        merchant = self.merchant
        traits = merchant.personality.traits

        checkpoint = (
            merchant.snapshot(),
            len(self.bluff_detector.history),
            self.engine.last_merchant_offer,
        )

        try:
            # 1-2. bluff check; the trust penalty lands before evaluation
            metrics = self.bluff_detector.analyze_offer(
                offer, self.item.fair_price, self.mode,
            )
            if self.bluff_detector.is_bluffing(metrics):
                logger.info(
                    "Bluff detected (extreme=%d, oscillations=%d)",
                    metrics.extreme_offers, metrics.oscillations,
                )
                merchant.adjust_trust(-10 * traits.bluff_sensitivity)

            # 3. decide
            result = self.engine.evaluate_offer(offer)
        except Exception as exc:
            self._rollback(checkpoint)
            raise DecisionStepError(
                f"Round {self.engine.round} could not be evaluated: {exc}"
            ) from exc

        # 4. apply merchant deltas
        merchant.adjust_mood(result.mood_change)
        merchant.adjust_trust(result.trust_change)

        # 5. record
        self.history.append(RoundRecord(self.engine.round, offer, result))

        # 6. advance
        self.engine.round += 1

        return result

    def _rollback(self, checkpoint: tuple) -> None:
        snapshot, offers_len, anchor = checkpoint
        self.merchant.restore(snapshot)
        self.bluff_detector.truncate(offers_len)
        self.engine.last_merchant_offer = anchor

    # ── status ───────────────────────────────────────────────────────────

    def is_complete(self) -> bool:
        if not self.history:
            return False
        last = self.history[-1].result
        return (
            self.engine.round > self.engine.max_rounds
            or last.action != ActionType.COUNTER
        )

    def is_bluffing(self) -> bool:
        """Re-derive the bluff flag from the recorded offers."""
        if not self.history:
            return False
        metrics = self.bluff_detector.metrics(self.item.fair_price, self.mode)
        return self.bluff_detector.is_bluffing(metrics)


def create_session(
    merchant: Merchant,
    item: Item,
    mode: NegotiationMode,
    hard_mode: bool = False,
    max_rounds: Optional[int] = None,
) -> NegotiationSession:
    engine = NegotiationEngine(merchant, item, mode, hard_mode, max_rounds)
    return NegotiationSession(engine)
