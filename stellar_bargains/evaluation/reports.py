"""Write summary JSON and deals CSV to the run directory."""
from __future__ import annotations

import csv
import json
import os
from typing import Any

from stellar_bargains.core.types import DealOutcome


def write_summary(metrics: dict[str, Any], run_dir: str) -> str:
    """Write aggregate metrics as ``summary.json``."""
    path = os.path.join(run_dir, "summary.json")
    with open(path, "w") as f:
        json.dump(metrics, f, indent=2)
    return path


_DEAL_FIELDS = [
    "negotiation_id",
    "item_name",
    "category",
    "rarity",
    "condition",
    "fair_price",
    "market_hint",
    "mode",
    "deal_made",
    "final_price",
    "profit",
    "termination",
    "rounds_taken",
    "bluff_detected",
    "merchant_mood",
    "merchant_trust",
]


def write_deals_csv(outcomes: list[DealOutcome], run_dir: str) -> str:
    """Write per-negotiation rows as ``deals.csv``."""
    path = os.path.join(run_dir, "deals.csv")
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=_DEAL_FIELDS)
        writer.writeheader()
        for i, o in enumerate(outcomes):
            writer.writerow({
                "negotiation_id": i,
                "item_name": o.item.name,
                "category": o.item.category.value,
                "rarity": o.item.rarity.value,
                "condition": o.item.condition.value,
                "fair_price": o.item.fair_price,
                "market_hint": o.item.market_hint,
                "mode": o.mode.value,
                "deal_made": o.deal_made,
                "final_price": o.final_price,
                "profit": o.profit,
                "termination": o.termination,
                "rounds_taken": o.rounds_taken,
                "bluff_detected": o.bluff_detected,
                "merchant_mood": round(o.merchant_mood, 2),
                "merchant_trust": round(o.merchant_trust, 2),
            })
    return path
