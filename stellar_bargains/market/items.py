"""Item pricing model and random item generation.

The player only ever sees ``market_hint``; ``fair_price`` stays on the
merchant's side of the table.
"""
from __future__ import annotations

from typing import Optional, Sequence

from stellar_bargains.core.pricing import round_price
from stellar_bargains.core.rng import SeededRNG
from stellar_bargains.core.types import Condition, Item, ItemTemplate, Rarity
from stellar_bargains.market.catalog import Catalog

RARITY_MULTIPLIERS: dict[Rarity, float] = {
    Rarity.COMMON: 1.0,
    Rarity.RARE: 2.5,
    Rarity.EPIC: 5.0,
}

CONDITION_MULTIPLIERS: dict[Condition, float] = {
    Condition.NEW: 1.0,
    Condition.USED: 0.7,
    Condition.DAMAGED: 0.4,
}

_RARITY_ORDER = [Rarity.COMMON, Rarity.RARE, Rarity.EPIC]
_CONDITION_ORDER = [Condition.NEW, Condition.USED, Condition.DAMAGED]


def fair_price_for(base_price: float, rarity: Rarity, condition: Condition) -> int:
    return round_price(
        base_price * RARITY_MULTIPLIERS[rarity] * CONDITION_MULTIPLIERS[condition]
    )


def market_hint_for(
    fair_price: int,
    rng: SeededRNG,
    noise_min: float = 0.15,
    noise_max: float = 0.30,
) -> int:
    """Return ``fair_price`` skewed by 15-30 % in a random direction.

    Consumes exactly two draws: noise magnitude, then direction.
    """
    noise = noise_min + rng.random() * (noise_max - noise_min)
    direction = 1 if rng.random() > 0.5 else -1
    return round_price(fair_price * (1 + direction * noise))


def create_item(
    template: ItemTemplate,
    rarity: Rarity,
    condition: Condition,
    rng: SeededRNG,
    noise_min: float = 0.15,
    noise_max: float = 0.30,
) -> Item:
    """Build an immutable Item from a catalog template."""
    fair = fair_price_for(template.base_price, rarity, condition)
    return Item(
        name=template.name,
        description=template.description,
        category=template.category,
        rarity=rarity,
        condition=condition,
        fair_price=fair,
        market_hint=market_hint_for(fair, rng, noise_min, noise_max),
        slot=template.slot,
        mood_bonus=template.mood_bonus,
    )


generate_item = create_item


def _weighted_pick(rng: SeededRNG, options: list, weights: Sequence[float]):
    if len(options) != len(weights):
        raise ValueError(
            f"Expected {len(options)} weights, got {len(weights)}"
        )
    total = float(sum(weights))
    if total <= 0:
        raise ValueError("Weights must sum to a positive number")
    roll = rng.random() * total
    cumulative = 0.0
    for option, weight in zip(options, weights):
        cumulative += weight
        if roll < cumulative:
            return option
    return options[-1]


class ItemGenerator:
    """Draws random items from a catalog.

    Rarity defaults to 60 % common / 30 % rare / 10 % epic, condition to
    50 % new / 30 % used / 20 % damaged.
    """

    def __init__(
        self,
        rng: SeededRNG,
        catalog: Optional[Catalog] = None,
        rarity_weights: Sequence[float] = (0.6, 0.3, 0.1),
        condition_weights: Sequence[float] = (0.5, 0.3, 0.2),
        noise_min: float = 0.15,
        noise_max: float = 0.30,
    ):
        self.rng = rng
        self.catalog = catalog or Catalog()
        self.rarity_weights = list(rarity_weights)
        self.condition_weights = list(condition_weights)
        self.noise_min = noise_min
        self.noise_max = noise_max

    def random_rarity(self) -> Rarity:
        return _weighted_pick(self.rng, _RARITY_ORDER, self.rarity_weights)

    def random_condition(self) -> Condition:
        return _weighted_pick(self.rng, _CONDITION_ORDER, self.condition_weights)

    def generate_random(self) -> Item:
        template = self.catalog.get_random_template(self.rng)
        rarity = self.random_rarity()
        condition = self.random_condition()
        return create_item(
            template, rarity, condition, self.rng,
            self.noise_min, self.noise_max,
        )
