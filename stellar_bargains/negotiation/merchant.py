"""Merchant mood and trust state."""
from __future__ import annotations

from typing import Optional

from stellar_bargains.core.rng import SeededRNG
from stellar_bargains.negotiation.personality import PersonalityProfile

MOOD_MIN, MOOD_MAX = -100.0, 100.0
TRUST_MIN, TRUST_MAX = 0.0, 100.0
MOOD_DECAY = 2.0

_NAME_PREFIXES = ["Zyx", "Kron", "Vex", "Nyx", "Qor", "Jax", "Mek", "Rax"]
_NAME_SUFFIXES = ["ar", "ix", "or", "el", "ak", "us", "an", "ex"]


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def generate_merchant_name(rng: SeededRNG) -> str:
    return rng.choice(_NAME_PREFIXES) + rng.choice(_NAME_SUFFIXES)


class Merchant:
    """Mutable merchant state shared across negotiations.

    Mood lives in [-100, 100] and decays 2 points toward zero as a side
    effect of every :meth:`adjust_mood` call. Trust lives in [0, 100]
    and never decays.

    Any mood/trust in range is a valid starting state, so a merchant
    restored from a saved game can be handed straight to a new session.
    """

    def __init__(
        self,
        personality: PersonalityProfile,
        name: str = "Merchant",
        mood: float = 0.0,
        trust: float = 50.0,
    ):
        self.personality = personality
        self.name = name
        self.mood = _clamp(mood, MOOD_MIN, MOOD_MAX)
        self.trust = _clamp(trust, TRUST_MIN, TRUST_MAX)

    @classmethod
    def random(
        cls,
        rng: SeededRNG,
        personality: Optional[PersonalityProfile] = None,
    ) -> Merchant:
        profile = personality or PersonalityProfile.random(rng)
        return cls(profile, name=generate_merchant_name(rng))

    # ── mutation ─────────────────────────────────────────────────────────

    def adjust_mood(self, delta: float) -> None:
        volatility = self.personality.traits.mood_volatility
        self.mood = _clamp(self.mood + delta * (volatility / 10), MOOD_MIN, MOOD_MAX)

        # decay toward neutral
        if self.mood > 0:
            self.mood = max(0.0, self.mood - MOOD_DECAY)
        elif self.mood < 0:
            self.mood = min(0.0, self.mood + MOOD_DECAY)

    def adjust_trust(self, delta: float) -> None:
        self.trust = _clamp(self.trust + delta, TRUST_MIN, TRUST_MAX)

    # ── derived modifiers ────────────────────────────────────────────────

    def mood_modifier(self) -> float:
        """Maps mood [-100, 100] to [0.8, 1.2]."""
        return 1.0 + self.mood / 500

    def trust_modifier(self) -> float:
        """Maps trust [0, 100] to [0.7, 1.3]."""
        return 0.7 + (self.trust / 100) * 0.6

    # ── snapshot / restore ───────────────────────────────────────────────

    def snapshot(self) -> tuple[float, float]:
        return self.mood, self.trust

    def restore(self, snapshot: tuple[float, float]) -> None:
        mood, trust = snapshot
        self.mood = _clamp(mood, MOOD_MIN, MOOD_MAX)
        self.trust = _clamp(trust, TRUST_MIN, TRUST_MAX)

    def __repr__(self) -> str:
        return (
            f"Merchant({self.name!r}, {self.personality.name}, "
            f"mood={self.mood:.1f}, trust={self.trust:.1f})"
        )
