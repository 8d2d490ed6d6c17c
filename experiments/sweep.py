#!/usr/bin/env python3
"""Parameter sweep: personalities x strategies x hard mode, aggregated to CSV."""
from __future__ import annotations

import argparse
import copy
import csv
import json
import os
import sys
import time
from itertools import product

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from stellar_bargains.core.config import GameConfig, load_config  # noqa: E402
from stellar_bargains.core.rng import SeededRNG  # noqa: E402
from stellar_bargains.market.simulator import GameSimulator  # noqa: E402


def main() -> None:
    p = argparse.ArgumentParser(description="Run a parameter sweep.")
    p.add_argument("--config", type=str, default=None,
                   help="Base YAML config file")
    p.add_argument("--seeds", type=int, nargs="+", default=[42, 123, 456])
    p.add_argument("--personalities", type=str, nargs="+",
                   default=["greedy", "honest", "impulsive"])
    p.add_argument("--strategies", type=str, nargs="+",
                   default=["anchored", "lowball"])
    p.add_argument("--hard_mode", type=str, nargs="+", default=["off", "on"],
                   choices=["off", "on"])
    p.add_argument("--negotiations", type=int, default=None,
                   help="Override negotiations per run (keep sweep fast)")
    p.add_argument("--output", type=str, default="outputs/sweep_results.csv")
    args = p.parse_args()

    base_cfg = load_config(args.config) if args.config else GameConfig()

    grid = list(product(
        args.seeds, args.personalities, args.strategies, args.hard_mode,
    ))
    all_summaries: list[dict] = []

    print(f"Sweep: {len(grid)} configurations")
    for i, (seed, personality, strategy, hard) in enumerate(grid, 1):
        cfg = copy.deepcopy(base_cfg)
        cfg.seed = seed
        cfg.merchant.personality = personality
        cfg.player.strategy = strategy
        cfg.negotiation.hard_mode = hard == "on"
        if args.negotiations is not None:
            cfg.simulation.negotiations = args.negotiations

        print(
            f"  [{i}/{len(grid)}] seed={seed}  merchant={personality}  "
            f"strategy={strategy}  hard={hard} ...",
            end="",
            flush=True,
        )
        t0 = time.time()
        run_name = time.strftime("%Y%m%d_%H%M%S") + (
            f"_s{seed}_{personality}_{strategy}_{hard}"
        )
        sim = GameSimulator(cfg, SeededRNG(seed), run_name=run_name)
        sim.run()
        elapsed = time.time() - t0

        with open(os.path.join(sim.run_dir, "summary.json")) as f:
            summary = json.load(f)
        summary["seed"] = seed
        all_summaries.append(summary)
        print(f"  {elapsed:.2f}s")

    os.makedirs(os.path.dirname(os.path.abspath(args.output)), exist_ok=True)
    if all_summaries:
        with open(args.output, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(all_summaries[0].keys()))
            writer.writeheader()
            writer.writerows(all_summaries)

    print(f"\nSweep complete: {len(all_summaries)} runs -> {args.output}")


if __name__ == "__main__":
    main()
