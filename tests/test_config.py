"""Tests for configuration loading."""
import json
import os
import tempfile
import unittest

from stellar_bargains.core.config import GameConfig, load_config


class TestLoadConfig(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, name, text):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "w") as f:
            f.write(text)
        return path

    def test_yaml_overrides_defaults(self):
        path = self._write("game.yaml", (
            "seed: 7\n"
            "negotiation:\n"
            "  hard_mode: true\n"
            "merchant:\n"
            "  personality: greedy\n"
            "  trust: 30\n"
            "pricing:\n"
            "  rarity_weights: [1, 1, 1]\n"
        ))
        cfg = load_config(path)
        self.assertEqual(cfg.seed, 7)
        self.assertTrue(cfg.negotiation.hard_mode)
        self.assertEqual(cfg.merchant.personality, "greedy")
        self.assertEqual(cfg.merchant.trust, 30)
        self.assertEqual(cfg.pricing.rarity_weights, [1, 1, 1])
        # untouched sections keep their defaults
        self.assertEqual(cfg.player.starting_balance, 1000.0)
        self.assertEqual(cfg.merchant.mood, 0.0)

    def test_json_file(self):
        path = self._write("game.json", json.dumps({
            "player": {"starting_balance": 250, "strategy": "lowball"},
            "simulation": {"negotiations": 3},
        }))
        cfg = load_config(path)
        self.assertEqual(cfg.player.starting_balance, 250)
        self.assertEqual(cfg.player.strategy, "lowball")
        self.assertEqual(cfg.simulation.negotiations, 3)

    def test_unknown_keys_ignored(self):
        path = self._write("game.yaml", (
            "colour: red\n"
            "merchant:\n"
            "  hat: fez\n"
            "market: 12\n"
        ))
        cfg = load_config(path)
        self.assertFalse(hasattr(cfg.merchant, "hat"))
        self.assertFalse(hasattr(cfg, "colour"))

    def test_empty_yaml_gives_defaults(self):
        cfg = load_config(self._write("empty.yaml", ""))
        self.assertEqual(cfg.seed, GameConfig().seed)


class TestRounds(unittest.TestCase):

    def test_rounds_for(self):
        cfg = GameConfig()
        self.assertEqual(cfg.negotiation.rounds_for(), 6)
        self.assertEqual(cfg.negotiation.rounds_for(True), 4)
        cfg.negotiation.hard_mode = True
        self.assertEqual(cfg.negotiation.rounds_for(), 4)
        self.assertEqual(cfg.negotiation.rounds_for(False), 6)


if __name__ == "__main__":
    unittest.main()
