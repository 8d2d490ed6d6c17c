"""Rule-based scripted players (used for headless simulations)."""
from __future__ import annotations

from stellar_bargains.agents.base import PlayerStrategy
from stellar_bargains.core.pricing import round_price
from stellar_bargains.core.types import NegotiationMode, OfferContext


class AnchoredStrategy(PlayerStrategy):
    """Linear concession anchored on the market hint.

    Buying, it opens at 70 % of the hint and concedes toward 105 %;
    selling, it opens at 130 % and concedes toward 95 %. When the
    merchant has countered, it splits the difference with the counter
    but never crosses its own limit.
    """

    def __init__(self, open_ratio: float = 0.30, limit_ratio: float = 0.05):
        self.open_ratio = open_ratio
        self.limit_ratio = limit_ratio

    @property
    def strategy_type(self) -> str:
        return "anchored"

    def decide(self, ctx: OfferContext) -> float:
        progress = (ctx.round_number - 1) / max(ctx.max_rounds - 1, 1)
        hint = ctx.market_hint

        # ── buyer ────────────────────────────────────────────────────────
        if ctx.mode == NegotiationMode.BUY:
            initial = hint * (1 - self.open_ratio)
            limit = min(hint * (1 + self.limit_ratio), ctx.balance)
            planned = initial + (limit - initial) * progress
            if ctx.last_counter is not None and ctx.last_counter > planned:
                planned = (planned + ctx.last_counter) / 2
            return max(1, round_price(min(planned, limit)))

        # ── seller ───────────────────────────────────────────────────────
        initial = hint * (1 + self.open_ratio)
        limit = hint * (1 - self.limit_ratio)
        planned = initial - (initial - limit) * progress
        if ctx.last_counter is not None and ctx.last_counter < planned:
            planned = (planned + ctx.last_counter) / 2
        return max(1, round_price(max(planned, limit)))


class LowballStrategy(PlayerStrategy):
    """Swings between insulting and moderate offers.

    The pattern trips the bluff detector within a few rounds and is
    mostly useful for exercising the merchant's trust penalties.
    """

    @property
    def strategy_type(self) -> str:
        return "lowball"

    def decide(self, ctx: OfferContext) -> float:
        extreme = ctx.round_number % 2 == 1
        if ctx.mode == NegotiationMode.BUY:
            ratio = 0.3 if extreme else 0.8
            return max(1, round_price(min(ctx.market_hint * ratio, ctx.balance)))
        ratio = 1.8 if extreme else 1.1
        return max(1, round_price(ctx.market_hint * ratio))


def make_strategy(name: str) -> PlayerStrategy:
    if name == "anchored":
        return AnchoredStrategy()
    if name == "lowball":
        return LowballStrategy()
    raise ValueError(f"Unknown player strategy: {name}")
