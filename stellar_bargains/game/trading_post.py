"""Game loop around the negotiation core: player wallet, item draws, settlement."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from stellar_bargains.core.config import GameConfig
from stellar_bargains.core.rng import SeededRNG
from stellar_bargains.core.types import (
    ActionType,
    DealOutcome,
    Item,
    MessageContext,
    NegotiationMode,
    NegotiationResult,
)
from stellar_bargains.game.observer import MerchantView, NegotiationObserver, NullObserver
from stellar_bargains.market.catalog import Catalog
from stellar_bargains.market.items import ItemGenerator
from stellar_bargains.negotiation.constraints import validate_offer
from stellar_bargains.negotiation.merchant import Merchant
from stellar_bargains.negotiation.messages import MessageGenerator
from stellar_bargains.negotiation.personality import PersonalityProfile
from stellar_bargains.negotiation.session import NegotiationSession, create_session

logger = logging.getLogger(__name__)

FAILED_DEAL_MOOD_PENALTY = -5
DEAL_MOOD_BONUS = 20
CLEAN_DEAL_TRUST_BONUS = 5


@dataclass
class Player:
    balance: float = 1000.0
    profit: float = 0.0


@dataclass
class OfferReceipt:
    """What the caller gets back from :meth:`TradingPost.submit_offer`.

    A declined submission (``accepted=False``) never reached the engine.
    """
    accepted: bool
    reason: str = ""
    violation_type: Optional[str] = None
    result: Optional[NegotiationResult] = None
    message: str = ""
    outcome: Optional[DealOutcome] = None


def merchant_from_config(config: GameConfig, rng: SeededRNG) -> Merchant:
    mc = config.merchant
    profile = (
        PersonalityProfile.preset(mc.personality)
        if mc.personality else None
    )
    merchant = Merchant.random(rng, profile)
    merchant.restore((mc.mood, mc.trust))
    return merchant


class TradingPost:
    """One player haggling with one persistent merchant, item after item.

    The merchant's mood and trust carry over between negotiations; a
    fresh session is created per item.
    """

    def __init__(
        self,
        config: GameConfig,
        rng: SeededRNG,
        merchant: Optional[Merchant] = None,
        item_generator: Optional[ItemGenerator] = None,
        message_generator: Optional[MessageGenerator] = None,
        observer: Optional[NegotiationObserver] = None,
    ):
        self.config = config
        self.rng = rng
        self.player = Player(balance=config.player.starting_balance)
        self.merchant = merchant or merchant_from_config(config, rng)
        p = config.pricing
        self.item_generator = item_generator or ItemGenerator(
            rng,
            catalog=Catalog(include_wearables=p.include_wearables),
            rarity_weights=p.rarity_weights,
            condition_weights=p.condition_weights,
            noise_min=p.hint_noise_min,
            noise_max=p.hint_noise_max,
        )
        self.messages = message_generator or MessageGenerator(rng)
        self.observer: NegotiationObserver = observer or NullObserver()
        self.hard_mode = config.negotiation.hard_mode

        self.mode: NegotiationMode = NegotiationMode.BUY
        self.current_item: Optional[Item] = None
        self.session: Optional[NegotiationSession] = None
        self.outcomes: list[DealOutcome] = []

    # ── negotiation lifecycle ────────────────────────────────────────────

    def start_negotiation(
        self, mode: NegotiationMode, item: Optional[Item] = None,
    ) -> Optional[NegotiationSession]:
        """Draw an item and open a session, or return None if unaffordable."""
        item = item or self.item_generator.generate_random()

        if mode == NegotiationMode.BUY and item.market_hint > self.player.balance:
            msg = (
                "You don't have enough coins for this item! "
                "Try selling some items first."
            )
            logger.warning(
                "Cannot afford %s (hint %d > balance %.0f)",
                item.name, item.market_hint, self.player.balance,
            )
            self.observer.on_error(msg)
            return None

        self.mode = mode
        self.current_item = item
        self.session = create_session(
            self.merchant, item, mode,
            max_rounds=self.config.negotiation.rounds_for(self.hard_mode),
        )
        self.observer.on_negotiation_start(
            item, MerchantView.of(self.merchant),
            self.messages.greeting(), self.session.max_rounds,
        )
        return self.session

    def submit_offer(self, offer: float) -> OfferReceipt:
        check = validate_offer(offer, self.mode, self.player.balance, self.session)
        if not check.valid:
            logger.warning("Offer %s declined: %s", offer, check.reason)
            self.observer.on_error(check.reason)
            return OfferReceipt(False, check.reason, check.violation_type)

        session = self.session
        item = self.current_item
        result = session.submit_offer(offer)
        is_bluff = session.is_bluffing()

        message = self.messages.generate(MessageContext(
            action=result.action,
            mood=self.merchant.mood,
            trust=self.merchant.trust,
            personality=self.merchant.personality.name,
            round_number=session.round - 1,
            offer_ratio=offer / item.fair_price,
            is_bluff=is_bluff,
            offer=offer,
            item_name=item.name,
            counter_offer=result.counter_offer,
        ))
        self.observer.on_round(
            offer, result, message, MerchantView.of(self.merchant), session.round - 1,
        )

        outcome: Optional[DealOutcome] = None
        if result.action == ActionType.ACCEPT:
            outcome = self.complete_deal(offer)
        elif result.action == ActionType.REJECT or session.is_complete():
            outcome = self.end_negotiation(False)

        return OfferReceipt(True, result=result, message=message, outcome=outcome)

    def complete_deal(self, final_price: float) -> DealOutcome:
        item = self.current_item
        if self.mode == NegotiationMode.BUY:
            profit = item.fair_price - final_price
            self.player.balance -= final_price
        else:
            profit = final_price - item.fair_price
            self.player.balance += final_price
        self.player.profit += profit

        bluffed = self.session.is_bluffing()
        self.merchant.adjust_mood(DEAL_MOOD_BONUS)
        if not bluffed:
            self.merchant.adjust_trust(CLEAN_DEAL_TRUST_BONUS)

        outcome = self._build_outcome(True, final_price, profit, "accepted", bluffed)
        logger.info(
            "Deal on %s at %s (fair %d, profit %+.0f)",
            item.name, final_price, item.fair_price, profit,
        )
        self.outcomes.append(outcome)
        self.observer.on_negotiation_end(outcome)
        self.end_negotiation(True)
        return outcome

    def end_negotiation(self, success: bool) -> Optional[DealOutcome]:
        outcome = None
        if not success and self.session is not None:
            self.merchant.adjust_mood(FAILED_DEAL_MOOD_PENALTY)
            last = self.session.last_result
            termination = (
                "rejected" if last is not None and last.action == ActionType.REJECT
                else "timeout"
            )
            outcome = self._build_outcome(
                False, None, 0.0, termination, self.session.is_bluffing(),
            )
            logger.info("No deal on %s (%s)", self.current_item.name, termination)
            self.outcomes.append(outcome)
            self.observer.on_negotiation_end(outcome)

        self.session = None
        self.current_item = None
        return outcome

    # ── merchant / game management ───────────────────────────────────────

    def new_merchant(self) -> Merchant:
        self.merchant = merchant_from_config(self.config, self.rng)
        self.session = None
        self.current_item = None
        return self.merchant

    def reset(self) -> None:
        self.player = Player(balance=self.config.player.starting_balance)
        self.outcomes = []
        self.new_merchant()

    # ── helpers ──────────────────────────────────────────────────────────

    def _build_outcome(
        self,
        deal_made: bool,
        final_price: Optional[float],
        profit: float,
        termination: str,
        bluffed: bool,
    ) -> DealOutcome:
        return DealOutcome(
            item=self.current_item,
            mode=self.mode,
            deal_made=deal_made,
            final_price=final_price,
            profit=profit,
            rounds_taken=len(self.session.history),
            termination=termination,
            bluff_detected=bluffed,
            merchant_mood=self.merchant.mood,
            merchant_trust=self.merchant.trust,
            history=list(self.session.history),
        )
