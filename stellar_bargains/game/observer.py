"""Presentation-side hooks for the trading post.

A renderer implements :class:`NegotiationObserver` and receives
read-only snapshots. It never holds a reference to the orchestrator,
and nothing it returns is read back.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from stellar_bargains.core.types import DealOutcome, Item, NegotiationResult
from stellar_bargains.negotiation.merchant import Merchant


@dataclass(frozen=True)
class MerchantView:
    name: str
    personality: str
    mood: float
    trust: float

    @classmethod
    def of(cls, merchant: Merchant) -> MerchantView:
        return cls(merchant.name, merchant.personality.name, merchant.mood, merchant.trust)


class NegotiationObserver(ABC):
    """Every renderer must implement these callbacks."""

    @abstractmethod
    def on_negotiation_start(
        self, item: Item, merchant: MerchantView, greeting: str, max_rounds: int,
    ) -> None:
        ...

    @abstractmethod
    def on_round(
        self,
        offer: float,
        result: NegotiationResult,
        message: str,
        merchant: MerchantView,
        round_number: int,
    ) -> None:
        ...

    @abstractmethod
    def on_negotiation_end(self, outcome: DealOutcome) -> None:
        ...

    @abstractmethod
    def on_error(self, message: str) -> None:
        ...


class NullObserver(NegotiationObserver):
    """Discards every notification (headless runs)."""

    def on_negotiation_start(self, item, merchant, greeting, max_rounds) -> None:
        pass

    def on_round(self, offer, result, message, merchant, round_number) -> None:
        pass

    def on_negotiation_end(self, outcome) -> None:
        pass

    def on_error(self, message) -> None:
        pass


class RecordingObserver(NegotiationObserver):
    """Keeps every notification in memory, e.g. for a transcript."""

    def __init__(self):
        self.events: list[tuple[str, dict]] = []
        self.last_error: Optional[str] = None

    def on_negotiation_start(self, item, merchant, greeting, max_rounds) -> None:
        self.events.append(("start", {
            "item": item.name, "greeting": greeting, "max_rounds": max_rounds,
        }))

    def on_round(self, offer, result, message, merchant, round_number) -> None:
        self.events.append(("round", {
            "offer": offer,
            "action": result.action.value,
            "counter_offer": result.counter_offer,
            "message": message,
            "mood": merchant.mood,
            "trust": merchant.trust,
            "round": round_number,
        }))

    def on_negotiation_end(self, outcome) -> None:
        self.events.append(("end", {
            "deal_made": outcome.deal_made,
            "termination": outcome.termination,
            "profit": outcome.profit,
        }))

    def on_error(self, message) -> None:
        self.last_error = message
        self.events.append(("error", {"message": message}))
