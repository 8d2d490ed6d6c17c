"""Item template catalog."""
from __future__ import annotations

from typing import Optional

from stellar_bargains.core.rng import SeededRNG
from stellar_bargains.core.types import ItemCategory, ItemTemplate, WearableSlot

_W = ItemCategory.WEAPON
_T = ItemCategory.TECH
_A = ItemCategory.ARTIFACT
_C = ItemCategory.CONSUMABLE

ITEM_TEMPLATES: list[ItemTemplate] = [
    # ── weapons ──────────────────────────────────────────────────────────
    ItemTemplate("Plasma Rifle", "Military-grade energy weapon", _W, 450),
    ItemTemplate("Neural Disruptor", "Non-lethal incapacitation device", _W, 320),
    ItemTemplate("Mono-Blade", "Monomolecular edge sword", _W, 280),
    ItemTemplate("Gravity Hammer", "Crushes targets with localized gravity fields", _W, 550),
    ItemTemplate("Arc Pistol", "Compact electrical discharge sidearm", _W, 180),
    ItemTemplate("Photon Lance", "Long-range beam weapon", _W, 720),
    ItemTemplate("Sonic Stunner", "Area-effect sound weapon", _W, 240),
    ItemTemplate("Nano-Swarm Grenade", "Deploys destructive nanobots", _W, 390),
    # ── tech ─────────────────────────────────────────────────────────────
    ItemTemplate("Quantum Processor", "Advanced computing core", _T, 680),
    ItemTemplate("Holo-Projector", "3D holographic display system", _T, 220),
    ItemTemplate("Neural Interface", "Direct brain-computer connection", _T, 510),
    ItemTemplate("Fusion Cell", "Compact power source", _T, 340),
    ItemTemplate("Stealth Field Generator", "Personal cloaking device", _T, 890),
    ItemTemplate("Gravity Boots", "Walk on any surface", _T, 420),
    ItemTemplate("Translator Implant", "Universal language decoder", _T, 290),
    ItemTemplate("Repair Nanites", "Self-healing technology", _T, 460),
    ItemTemplate("Data Spike", "Hacking tool for electronic systems", _T, 310),
    ItemTemplate("Bio-Scanner", "Life-form detection and analysis", _T, 270),
    # ── artifacts ────────────────────────────────────────────────────────
    ItemTemplate("Precursor Orb", "Ancient alien artifact of unknown purpose", _A, 950),
    ItemTemplate("Psionic Crystal", "Amplifies mental abilities", _A, 770),
    ItemTemplate("Time Shard", "Fragment from a collapsed timeline", _A, 1100),
    ItemTemplate("Void Stone", "Absorbs exotic radiation", _A, 640),
    ItemTemplate("Star Chart", "Ancient navigation data", _A, 530),
    ItemTemplate("Memory Crystal", "Contains lost civilization's knowledge", _A, 820),
    ItemTemplate("Harmonic Resonator", "Emits reality-bending frequencies", _A, 710),
    # ── consumables ──────────────────────────────────────────────────────
    ItemTemplate("Stim Pack", "Emergency medical injection", _C, 85),
    ItemTemplate("Ration Bar", "Nutritionally complete food", _C, 25),
    ItemTemplate("Anti-Radiation Serum", "Protects against ionizing radiation", _C, 140),
    ItemTemplate("Oxygen Canister", "Emergency life support", _C, 60),
    ItemTemplate("Boost Injectable", "Temporary physical enhancement", _C, 110),
    ItemTemplate("Mind Shield Pill", "Blocks psionic intrusion", _C, 95),
    ItemTemplate("Cryo Capsule", "Suspended animation pod", _C, 380),
]


def _wearable(name: str, desc: str, price: int, slot: WearableSlot, bonus: int) -> ItemTemplate:
    return ItemTemplate(name, desc, ItemCategory.WEARABLE, price, slot, bonus)


WEARABLE_TEMPLATES: list[ItemTemplate] = [
    _wearable("Silk Trader Hat", "An elegant hat worn by successful merchants",
              150, WearableSlot.HEAD, 10),
    _wearable("Neural Crown", "Headwear with subtle psionic enhancers",
              300, WearableSlot.HEAD, 15),
    _wearable("Business Suit", "Professional attire that looks trustworthy",
              250, WearableSlot.BODY, 12),
    _wearable("Diplomat's Robe", "Flowing robes that signal peaceful intentions",
              400, WearableSlot.BODY, 18),
    _wearable("Golden Watch", "Expensive timepiece for people who value money",
              300, WearableSlot.ACCESSORY, 15),
    _wearable("Guild Badge", "Official Merchant's Guild badge",
              350, WearableSlot.ACCESSORY, 16),
]


class Catalog:
    """Read-only view over a list of item templates."""

    def __init__(
        self,
        templates: Optional[list[ItemTemplate]] = None,
        include_wearables: bool = False,
    ):
        base = list(templates) if templates is not None else list(ITEM_TEMPLATES)
        if include_wearables:
            base.extend(WEARABLE_TEMPLATES)
        if not base:
            raise ValueError("Catalog needs at least one item template")
        self._templates = base

    @property
    def templates(self) -> list[ItemTemplate]:
        return list(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def by_category(self, category: ItemCategory) -> list[ItemTemplate]:
        return [t for t in self._templates if t.category == category]

    def find(self, name: str) -> Optional[ItemTemplate]:
        for t in self._templates:
            if t.name.lower() == name.lower():
                return t
        return None

    def get_random_template(self, rng: SeededRNG) -> ItemTemplate:
        return rng.choice(self._templates)
