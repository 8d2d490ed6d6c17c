#!/usr/bin/env python3
"""CLI entry-point: run a headless haggling simulation from a YAML config + CLI overrides."""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import time

# Ensure project root is importable
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from stellar_bargains.core.config import GameConfig, load_config  # noqa: E402
from stellar_bargains.core.rng import SeededRNG  # noqa: E402
from stellar_bargains.market.simulator import GameSimulator  # noqa: E402


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Simulate a scripted player haggling with a merchant."
    )
    p.add_argument("--config", type=str, default=None,
                   help="Path to YAML config file")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--negotiations", type=int, default=None)
    p.add_argument("--mode", type=str, default=None,
                   choices=["buy", "sell", "alternate"])
    p.add_argument("--strategy", type=str, default=None,
                   choices=["anchored", "lowball"],
                   help="Scripted player strategy")
    p.add_argument("--personality", type=str, default=None,
                   help="Merchant preset (greedy, honest, impulsive)")
    p.add_argument("--hard_mode", action="store_true",
                   help="Limit negotiations to the hard-mode round count")
    p.add_argument("--starting_balance", type=float, default=None)
    p.add_argument("--wearables", action="store_true",
                   help="Include wearable templates in the item pool")
    p.add_argument("--output_dir", type=str, default=None)
    p.add_argument("--verbose", action="store_true",
                   help="Log engine decisions at DEBUG level")
    return p


def _apply_overrides(cfg: GameConfig, args: argparse.Namespace) -> None:
    """Mutate *cfg* in-place with any non-None CLI overrides."""
    if args.seed is not None:
        cfg.seed = args.seed
    if args.negotiations is not None:
        cfg.simulation.negotiations = args.negotiations
    if args.mode is not None:
        cfg.simulation.mode = args.mode
    if args.strategy is not None:
        cfg.player.strategy = args.strategy
    if args.personality is not None:
        cfg.merchant.personality = args.personality
    if args.hard_mode:
        cfg.negotiation.hard_mode = True
    if args.starting_balance is not None:
        cfg.player.starting_balance = args.starting_balance
    if args.wearables:
        cfg.pricing.include_wearables = True
    if args.output_dir is not None:
        cfg.simulation.output_dir = args.output_dir


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # load config
    if args.config:
        cfg = load_config(args.config)
    else:
        cfg = GameConfig()
    _apply_overrides(cfg, args)

    # run
    rng = SeededRNG(cfg.seed)
    sim = GameSimulator(cfg, rng)
    merchant = sim.post.merchant
    print(
        f"Starting simulation: strategy={cfg.player.strategy}  "
        f"negotiations={cfg.simulation.negotiations}  mode={cfg.simulation.mode}  "
        f"merchant={merchant.name} ({merchant.personality.name})  "
        f"hard_mode={cfg.negotiation.hard_mode}  seed={cfg.seed}"
    )
    t0 = time.time()
    sim.run()
    elapsed = time.time() - t0

    summary_path = os.path.join(sim.run_dir, "summary.json")
    with open(summary_path) as f:
        summary = json.load(f)

    print(
        f"Done in {elapsed:.2f}s  |  {summary['total_negotiations']} negotiations  |  "
        f"{summary['deals_made']} deals ({summary['deal_success_rate']:.1%})  |  "
        f"profit {summary['total_profit']:+.0f}  |  "
        f"mood {summary['final_merchant_mood']:.1f}  "
        f"trust {summary['final_merchant_trust']:.1f}"
    )
    print(f"Results -> {sim.run_dir}")


if __name__ == "__main__":
    main()
