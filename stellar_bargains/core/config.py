"""Configuration loading and defaults."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

import yaml


@dataclass
class PricingConfig:
    hint_noise_min: float = 0.15
    hint_noise_max: float = 0.30
    # common / rare / epic
    rarity_weights: list[float] = field(default_factory=lambda: [0.6, 0.3, 0.1])
    # new / used / damaged
    condition_weights: list[float] = field(default_factory=lambda: [0.5, 0.3, 0.2])
    include_wearables: bool = False


@dataclass
class NegotiationConfig:
    hard_mode: bool = False
    max_rounds: int = 6
    hard_mode_max_rounds: int = 4

    def rounds_for(self, hard_mode: Optional[bool] = None) -> int:
        hard = self.hard_mode if hard_mode is None else hard_mode
        return self.hard_mode_max_rounds if hard else self.max_rounds


@dataclass
class PlayerConfig:
    starting_balance: float = 1000.0
    strategy: str = "anchored"      # "anchored" | "lowball"


@dataclass
class MerchantConfig:
    personality: Optional[str] = None   # preset name; None -> random
    mood: float = 0.0
    trust: float = 50.0


@dataclass
class SimulationConfig:
    negotiations: int = 20
    mode: str = "alternate"             # "buy" | "sell" | "alternate"
    output_dir: str = "outputs/runs"


@dataclass
class GameConfig:
    seed: int = 42
    pricing: PricingConfig = field(default_factory=PricingConfig)
    negotiation: NegotiationConfig = field(default_factory=NegotiationConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    merchant: MerchantConfig = field(default_factory=MerchantConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)


def load_config(path: str) -> GameConfig:
    """Load configuration from a YAML (or ``.json``) file."""
    with open(path, "r") as f:
        raw = f.read()

    if path.endswith(".json"):
        data = json.loads(raw)
    else:
        data = yaml.safe_load(raw) or {}

    return _dict_to_config(data)


_NESTED = {
    "pricing": PricingConfig,
    "negotiation": NegotiationConfig,
    "player": PlayerConfig,
    "merchant": MerchantConfig,
    "simulation": SimulationConfig,
}

_TOP_SCALARS = ("seed",)


def _dict_to_config(data: dict[str, Any]) -> GameConfig:
    cfg = GameConfig()
    for key in _TOP_SCALARS:
        if key in data:
            setattr(cfg, key, data[key])
    for section in _NESTED:
        if section in data and isinstance(data[section], dict):
            obj = getattr(cfg, section)
            for k, v in data[section].items():
                if hasattr(obj, k):
                    setattr(obj, k, v)
    return cfg
