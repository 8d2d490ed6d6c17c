"""Headless game simulation: a scripted player against one merchant.

Each negotiation draws a fresh item; the merchant (and its mood and
trust) persists for the whole run, as in the interactive game.
"""
from __future__ import annotations

import logging
import os
import time
from typing import Optional

from stellar_bargains.agents.rule_based import make_strategy
from stellar_bargains.core.config import GameConfig
from stellar_bargains.core.logging import EventLogger
from stellar_bargains.core.rng import SeededRNG
from stellar_bargains.core.types import DealOutcome, NegotiationMode, OfferContext
from stellar_bargains.evaluation.metrics import compute_metrics
from stellar_bargains.evaluation.reports import write_deals_csv, write_summary
from stellar_bargains.game.trading_post import TradingPost

logger = logging.getLogger(__name__)

_MODES = {"buy": NegotiationMode.BUY, "sell": NegotiationMode.SELL}


class GameSimulator:
    """Runs ``config.simulation.negotiations`` negotiations, then writes
    ``events.jsonl``, ``summary.json`` and ``deals.csv`` to a run directory.
    """

    def __init__(
        self,
        config: GameConfig,
        rng: SeededRNG,
        run_name: Optional[str] = None,
    ):
        self.config = config
        self.rng = rng

        if config.simulation.mode not in ("buy", "sell", "alternate"):
            raise ValueError(f"Unknown simulation mode: {config.simulation.mode}")

        timestamp = time.strftime("%Y%m%d_%H%M%S")
        self.run_dir = os.path.join(
            config.simulation.output_dir,
            run_name or f"{timestamp}_s{config.seed}",
        )
        os.makedirs(self.run_dir, exist_ok=True)

        self.event_logger = EventLogger(self.run_dir)
        self.strategy = make_strategy(config.player.strategy)
        self.post = TradingPost(config, rng)

    def _mode_for(self, index: int) -> NegotiationMode:
        mode = self.config.simulation.mode
        if mode == "alternate":
            return NegotiationMode.BUY if index % 2 == 0 else NegotiationMode.SELL
        return _MODES[mode]

    # ── main loop ────────────────────────────────────────────────────────

    def run(self) -> list[DealOutcome]:
        for i in range(self.config.simulation.negotiations):
            mode = self._mode_for(i)
            session = self.post.start_negotiation(mode)
            if session is None:
                self.event_logger.log_declined({
                    "negotiation_id": i,
                    "mode": mode.value,
                    "violation_type": "budget",
                    "balance": self.post.player.balance,
                })
                continue
            self._play(i, session)

        self.event_logger.close()

        outcomes = list(self.post.outcomes)
        metrics = compute_metrics(outcomes)
        metrics["strategy"] = self.strategy.strategy_type
        metrics["merchant"] = self.post.merchant.name
        metrics["personality"] = self.post.merchant.personality.name
        metrics["final_balance"] = round(self.post.player.balance, 2)
        metrics["hard_mode"] = self.post.hard_mode

        write_summary(metrics, self.run_dir)
        write_deals_csv(outcomes, self.run_dir)
        logger.info(
            "Simulation finished: %d negotiations, %d deals",
            metrics["total_negotiations"], metrics["deals_made"],
        )
        return outcomes

    def _play(self, negotiation_id: int, session) -> None:
        item = session.item
        merchant = self.post.merchant
        last_counter = None
        offers: list[float] = []

        # the trading post drops the session once it is settled
        while self.post.session is session:
            ctx = OfferContext(
                mode=session.mode,
                market_hint=item.market_hint,
                round_number=session.round,
                max_rounds=session.max_rounds,
                balance=self.post.player.balance,
                last_counter=last_counter,
                previous_offers=list(offers),
            )
            offer = self.strategy.decide(ctx)
            receipt = self.post.submit_offer(offer)

            if not receipt.accepted:
                self.event_logger.log_declined({
                    "negotiation_id": negotiation_id,
                    "offer": offer,
                    "violation_type": receipt.violation_type,
                    "reason": receipt.reason,
                })
                outcome = self.post.end_negotiation(False)
                if outcome is not None:
                    self.event_logger.log_outcome(outcome, negotiation_id)
                return

            offers.append(offer)
            self.event_logger.log_round(
                session.history[-1], negotiation_id, item, session.mode,
                merchant.mood, merchant.trust,
            )
            if receipt.result.counter_offer is not None:
                last_counter = receipt.result.counter_offer
            if receipt.outcome is not None:
                self.event_logger.log_outcome(receipt.outcome, negotiation_id)
