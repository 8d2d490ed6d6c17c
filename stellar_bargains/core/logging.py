"""Event-level JSONL logging and run output management."""
from __future__ import annotations

import json
import os
from typing import Any

from stellar_bargains.core.types import DealOutcome, Item, NegotiationMode, RoundRecord


class EventLogger:
    """Writes structured events as newline-delimited JSON."""

    def __init__(self, run_dir: str):
        self.run_dir = run_dir
        os.makedirs(run_dir, exist_ok=True)
        self._events_path = os.path.join(run_dir, "events.jsonl")
        self._file = open(self._events_path, "a")

    @property
    def path(self) -> str:
        return self._events_path

    def log_round(
        self,
        record: RoundRecord,
        negotiation_id: int,
        item: Item,
        mode: NegotiationMode,
        mood: float,
        trust: float,
    ) -> None:
        event: dict[str, Any] = {
            "event": "round",
            "negotiation_id": negotiation_id,
            "item": item.name,
            "mode": mode.value,
            "round": record.round_number,
            "offer": record.player_offer,
            "action": record.result.action.value,
            "counter_offer": record.result.counter_offer,
            "mood_change": record.result.mood_change,
            "trust_change": record.result.trust_change,
            "reasoning": record.result.reasoning,
            "mood": mood,
            "trust": trust,
        }
        self._file.write(json.dumps(event) + "\n")

    def log_outcome(self, outcome: DealOutcome, negotiation_id: int) -> None:
        event: dict[str, Any] = {
            "event": "outcome",
            "negotiation_id": negotiation_id,
            "item": outcome.item.name,
            "rarity": outcome.item.rarity.value,
            "condition": outcome.item.condition.value,
            "fair_price": outcome.item.fair_price,
            "market_hint": outcome.item.market_hint,
            "mode": outcome.mode.value,
            "deal_made": outcome.deal_made,
            "final_price": outcome.final_price,
            "profit": outcome.profit,
            "termination": outcome.termination,
            "rounds_taken": outcome.rounds_taken,
            "bluff_detected": outcome.bluff_detected,
            "merchant_mood": outcome.merchant_mood,
            "merchant_trust": outcome.merchant_trust,
        }
        self._file.write(json.dumps(event) + "\n")

    def log_declined(self, event_data: dict[str, Any]) -> None:
        record = dict(event_data)
        record["event"] = "declined"
        self._file.write(json.dumps(record) + "\n")

    def close(self) -> None:
        self._file.flush()
        self._file.close()
