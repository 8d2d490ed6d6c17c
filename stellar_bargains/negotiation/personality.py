"""Merchant personality presets."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from stellar_bargains.core.rng import SeededRNG


@dataclass(frozen=True)
class PersonalityTraits:
    name: str
    target_margin: float      # % profit the merchant aims for
    patience: int             # rounds before frustration
    concession_rate: float    # fraction of the gap conceded per counter
    bluff_sensitivity: float  # multiplier on the bluff trust penalty
    mood_volatility: float    # mood swing magnitude (10 = neutral)


@dataclass(frozen=True)
class PersonalityExtras:
    """Optional flavour attached to a personality (generated or hand-written).

    Never read by the negotiation engine.
    """
    backstory: str = ""
    speaking_style: str = "neutral"
    quirks: tuple[str, ...] = field(default_factory=tuple)
    catchphrases: tuple[str, ...] = field(default_factory=tuple)


GREEDY = PersonalityTraits(
    name="Greedy",
    target_margin=40,
    patience=6,
    concession_rate=0.03,
    bluff_sensitivity=0.6,
    mood_volatility=8,
)

HONEST = PersonalityTraits(
    name="Honest",
    target_margin=15,
    patience=5,
    concession_rate=0.07,
    bluff_sensitivity=0.9,
    mood_volatility=5,
)

IMPULSIVE = PersonalityTraits(
    name="Impulsive",
    target_margin=25,
    patience=3,
    concession_rate=0.12,
    bluff_sensitivity=1.2,
    mood_volatility=15,
)

PRESETS: dict[str, PersonalityTraits] = {
    t.name.lower(): t for t in (GREEDY, HONEST, IMPULSIVE)
}


class PersonalityProfile:
    """A trait bundle plus optional extras, fixed for a merchant's lifetime."""

    def __init__(
        self,
        traits: PersonalityTraits,
        extras: Optional[PersonalityExtras] = None,
    ):
        self._traits = traits
        self._extras = extras

    @property
    def traits(self) -> PersonalityTraits:
        return self._traits

    @property
    def extras(self) -> Optional[PersonalityExtras]:
        return self._extras

    @property
    def name(self) -> str:
        return self._traits.name

    @classmethod
    def preset(cls, name: str) -> PersonalityProfile:
        key = name.strip().lower()
        if key not in PRESETS:
            raise ValueError(
                f"Unknown personality: {name!r} "
                f"(expected one of {sorted(PRESETS)})"
            )
        return cls(PRESETS[key])

    @classmethod
    def random(cls, rng: SeededRNG) -> PersonalityProfile:
        return cls(rng.choice([GREEDY, HONEST, IMPULSIVE]))

    def __repr__(self) -> str:
        return f"PersonalityProfile({self._traits.name!r})"
