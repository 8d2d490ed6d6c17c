"""Rule-based merchant decision model.

Turns a numeric player offer into ACCEPT / COUNTER / REJECT plus the
mood and trust deltas the session should apply. The engine never
mutates the merchant itself; it only tracks the round counter and the
merchant's last counteroffer (the anchor for the next concession).
"""
from __future__ import annotations

import logging
from typing import Optional

from stellar_bargains.core.pricing import round_price
from stellar_bargains.core.types import (
    ActionType,
    Item,
    NegotiationMode,
    NegotiationResult,
)
from stellar_bargains.negotiation.merchant import Merchant

logger = logging.getLogger(__name__)

NORMAL_MAX_ROUNDS = 6
HARD_MAX_ROUNDS = 4

WALK_AWAY_MOOD = -60
OPENING_SELL_ANCHOR = 1.4   # merchant selling opens high
OPENING_BUY_ANCHOR = 0.6    # merchant buying opens low


class NegotiationEngine:
    """Evaluates offers for one merchant / item / mode combination.

    Attributes:
        round: current round, starting at 1. Advanced by the session.
        max_rounds: 4 in hard mode, else 6.
        last_merchant_offer: previous counteroffer, or None before the
            first counter.
    """

    def __init__(
        self,
        merchant: Merchant,
        item: Item,
        mode: NegotiationMode,
        hard_mode: bool = False,
        max_rounds: Optional[int] = None,
    ):
        self.merchant = merchant
        self.item = item
        self.mode = mode
        self.hard_mode = hard_mode
        if max_rounds is None:
            max_rounds = HARD_MAX_ROUNDS if hard_mode else NORMAL_MAX_ROUNDS
        self.max_rounds = max_rounds
        self.round: int = 1
        self.last_merchant_offer: Optional[int] = None

    # ── acceptance band ──────────────────────────────────────────────────

    def round_pressure(self) -> float:
        return 1 + (self.round / self.max_rounds) * 0.3

    def calculate_acceptable_range(self) -> tuple[float, float]:
        """Return the (min, max) price band the merchant will accept."""
        fair = self.item.fair_price
        margin = self.merchant.personality.traits.target_margin / 100
        flex = (
            self.merchant.mood_modifier()
            * self.merchant.trust_modifier()
            * self.round_pressure()
        )

        if self.mode == NegotiationMode.BUY:
            return fair * (1 + margin) / flex, fair * 2.0
        return 0.0, fair * (1 - margin) * flex

    # ── decision ─────────────────────────────────────────────────────────

    def should_walk_away(self) -> bool:
        return (
            self.merchant.mood < WALK_AWAY_MOOD
            or self.round > self.merchant.personality.traits.patience
        )

    def offer_ratio(self, player_offer: float) -> float:
        """Offer quality from the merchant's side: above 1 is good for them."""
        if self.mode == NegotiationMode.BUY:
            return player_offer / self.item.fair_price
        return self.item.fair_price / player_offer

    def evaluate_offer(self, player_offer: float) -> NegotiationResult:
        if self.should_walk_away():
            logger.info(
                "%s walks away in round %d (mood=%.1f)",
                self.merchant.name, self.round, self.merchant.mood,
            )
            return NegotiationResult(
                action=ActionType.REJECT,
                counter_offer=None,
                mood_change=-10,
                trust_change=-5,
                reasoning="Walked away due to frustration or exceeded patience",
            )

        ratio = self.offer_ratio(player_offer)
        low, high = self.calculate_acceptable_range()
        logger.debug(
            "round %d offer=%s ratio=%.2f band=[%.1f, %.1f]",
            self.round, player_offer, ratio, low, high,
        )

        if low <= player_offer <= high:
            return self._accept(player_offer, ratio)

        counter = self.generate_counteroffer(player_offer)
        return NegotiationResult(
            action=ActionType.COUNTER,
            counter_offer=counter,
            mood_change=self._counter_mood_change(ratio),
            trust_change=0,
            reasoning=f"Offer {ratio:.2f}x fair, counter at {counter}",
        )

    def generate_counteroffer(self, player_offer: float) -> int:
        """Concede a fraction of the gap between the anchor and the offer.

        Each counter becomes the next anchor, so successive counters walk
        monotonically toward the player's side.
        """
        fair = self.item.fair_price
        if self.last_merchant_offer is not None:
            anchor = float(self.last_merchant_offer)
        elif self.mode == NegotiationMode.BUY:
            anchor = fair * OPENING_SELL_ANCHOR
        else:
            anchor = fair * OPENING_BUY_ANCHOR

        direction = 1 if player_offer > anchor else -1
        concession = (
            abs(player_offer - anchor)
            * self.merchant.personality.traits.concession_rate
            * self.merchant.trust_modifier()
        )
        counter = round_price(anchor + direction * concession)
        self.last_merchant_offer = counter
        return counter

    # ── helpers ──────────────────────────────────────────────────────────

    def _accept(self, player_offer: float, ratio: float) -> NegotiationResult:
        trust_change = 5 if 0.9 <= ratio <= 1.1 else 0
        return NegotiationResult(
            action=ActionType.ACCEPT,
            counter_offer=None,
            mood_change=20,
            trust_change=trust_change,
            reasoning=f"Accepted offer of {player_offer:g}",
        )

    def _counter_mood_change(self, ratio: float) -> float:
        volatility = self.merchant.personality.traits.mood_volatility / 10
        if ratio < 0.5:
            return -15 * volatility
        if ratio < 0.7:
            return -8 * volatility
        if ratio < 0.9:
            return -3
        if ratio > 1.2:
            return 10
        return 0
