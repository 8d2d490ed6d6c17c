"""Compute aggregate evaluation metrics from negotiation outcomes."""
from __future__ import annotations

import statistics
from typing import Any

from stellar_bargains.core.types import DealOutcome


def compute_metrics(outcomes: list[DealOutcome]) -> dict[str, Any]:
    """Return a flat dict of summary metrics suitable for JSON serialisation."""
    if not outcomes:
        return _empty_metrics()

    total = len(outcomes)
    deals = [o for o in outcomes if o.deal_made]
    deal_count = len(deals)

    # price relative to the hidden fair value
    price_ratios = [
        o.final_price / o.item.fair_price
        for o in deals
        if o.final_price is not None and o.item.fair_price
    ]
    deal_rounds = [o.rounds_taken for o in deals]
    all_rounds = [o.rounds_taken for o in outcomes]

    walkaways = sum(1 for o in outcomes if o.termination == "rejected")
    timeouts = sum(1 for o in outcomes if o.termination == "timeout")
    bluffs = sum(1 for o in outcomes if o.bluff_detected)

    last = outcomes[-1]
    return {
        "total_negotiations": total,
        "deals_made": deal_count,
        "deal_success_rate": round(deal_count / total, 4),
        "walkaway_rate": round(walkaways / total, 4),
        "timeout_rate": round(timeouts / total, 4),
        "bluff_rate": round(bluffs / total, 4),
        "mean_price_ratio": (
            round(statistics.mean(price_ratios), 4) if price_ratios else 0
        ),
        "total_profit": round(sum(o.profit for o in deals), 2),
        "mean_profit_per_deal": (
            round(statistics.mean([o.profit for o in deals]), 2) if deals else 0
        ),
        "avg_rounds_to_close": (
            round(statistics.mean(deal_rounds), 2) if deal_rounds else 0
        ),
        "avg_rounds": round(statistics.mean(all_rounds), 2),
        "final_merchant_mood": round(last.merchant_mood, 2),
        "final_merchant_trust": round(last.merchant_trust, 2),
    }


def _empty_metrics() -> dict[str, Any]:
    return {
        "total_negotiations": 0,
        "deals_made": 0,
        "deal_success_rate": 0,
        "walkaway_rate": 0,
        "timeout_rate": 0,
        "bluff_rate": 0,
        "mean_price_ratio": 0,
        "total_profit": 0,
        "mean_profit_per_deal": 0,
        "avg_rounds_to_close": 0,
        "avg_rounds": 0,
        "final_merchant_mood": 0,
        "final_merchant_trust": 0,
    }
