"""Core domain types for the merchant negotiation game."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ItemCategory(str, Enum):
    WEAPON = "weapon"
    TECH = "tech"
    ARTIFACT = "artifact"
    CONSUMABLE = "consumable"
    WEARABLE = "wearable"


class Rarity(str, Enum):
    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"


class Condition(str, Enum):
    NEW = "new"
    USED = "used"
    DAMAGED = "damaged"


class WearableSlot(str, Enum):
    HEAD = "head"
    BODY = "body"
    ACCESSORY = "accessory"


class NegotiationMode(str, Enum):
    BUY = "BUY"      # player buys, merchant sells
    SELL = "SELL"    # player sells, merchant buys


class ActionType(str, Enum):
    ACCEPT = "ACCEPT"
    COUNTER = "COUNTER"
    REJECT = "REJECT"


class SessionState(str, Enum):
    ACTIVE = "active"
    COMPLETE = "complete"


@dataclass(frozen=True)
class ItemTemplate:
    name: str
    description: str
    category: ItemCategory
    base_price: int
    slot: Optional[WearableSlot] = None
    mood_bonus: Optional[int] = None


@dataclass(frozen=True)
class Item:
    name: str
    description: str
    category: ItemCategory
    rarity: Rarity
    condition: Condition
    fair_price: int          # hidden from the player
    market_hint: int         # shown to the player, deliberately noisy
    slot: Optional[WearableSlot] = None
    mood_bonus: Optional[int] = None


@dataclass
class BluffMetrics:
    """Derived from the full offer history on every analysis."""
    extreme_offers: int
    oscillations: int
    last_offer_ratio: float


@dataclass(frozen=True)
class NegotiationResult:
    action: ActionType
    counter_offer: Optional[int]
    mood_change: float
    trust_change: float
    reasoning: str


@dataclass
class RoundRecord:
    round_number: int
    player_offer: float
    result: NegotiationResult


@dataclass
class MessageContext:
    """Everything the message generator needs to pick a merchant line."""
    action: ActionType
    mood: float
    trust: float
    personality: str
    round_number: int
    offer_ratio: float
    is_bluff: bool
    offer: float
    item_name: str
    counter_offer: Optional[int] = None


@dataclass
class DealOutcome:
    """Settlement of one negotiation, as seen by the orchestrator."""
    item: Item
    mode: NegotiationMode
    deal_made: bool
    final_price: Optional[float]
    profit: float
    rounds_taken: int
    termination: str                 # "accepted" | "rejected" | "timeout"
    bluff_detected: bool = False
    merchant_mood: float = 0.0
    merchant_trust: float = 0.0
    history: list[RoundRecord] = field(default_factory=list)


@dataclass
class OfferContext:
    """Information visible to a scripted player when making an offer."""
    mode: NegotiationMode
    market_hint: int
    round_number: int
    max_rounds: int
    balance: float
    last_counter: Optional[int] = None
    previous_offers: list[float] = field(default_factory=list)
