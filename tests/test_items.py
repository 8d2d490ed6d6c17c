"""Tests for item pricing and random item generation."""
import unittest

from helpers import ScriptedRNG

from stellar_bargains.core.rng import SeededRNG
from stellar_bargains.core.types import Condition, ItemCategory, ItemTemplate, Rarity
from stellar_bargains.market.catalog import ITEM_TEMPLATES, Catalog
from stellar_bargains.market.items import (
    ItemGenerator,
    create_item,
    fair_price_for,
    generate_item,
)


class TestFairPrice(unittest.TestCase):

    def setUp(self):
        self.template = ItemTemplate("Test Orb", "A test", ItemCategory.ARTIFACT, 100)

    def test_epic_new(self):
        item = create_item(self.template, Rarity.EPIC, Condition.NEW, SeededRNG(1))
        self.assertEqual(item.fair_price, 500)

    def test_common_new_is_base_price(self):
        self.assertEqual(fair_price_for(100, Rarity.COMMON, Condition.NEW), 100)

    def test_rare_damaged(self):
        self.assertEqual(fair_price_for(300, Rarity.RARE, Condition.DAMAGED), 300)

    def test_rounds_half_up(self):
        # 5 * 0.7 = 3.5
        self.assertEqual(fair_price_for(5, Rarity.COMMON, Condition.USED), 4)

    def test_template_fields_copied(self):
        item = create_item(self.template, Rarity.RARE, Condition.USED, SeededRNG(1))
        self.assertEqual(item.name, "Test Orb")
        self.assertEqual(item.category, ItemCategory.ARTIFACT)
        self.assertEqual(item.rarity, Rarity.RARE)
        self.assertEqual(item.condition, Condition.USED)
        self.assertIsNone(item.slot)


class TestMarketHint(unittest.TestCase):

    def setUp(self):
        self.template = ItemTemplate("Test Orb", "A test", ItemCategory.ARTIFACT, 100)

    def test_min_noise_upward(self):
        # noise draw 0.0 -> 15 %, direction draw 0.9 -> up
        rng = ScriptedRNG([0.0, 0.9])
        item = create_item(self.template, Rarity.EPIC, Condition.NEW, rng)
        self.assertEqual(item.market_hint, 575)

    def test_generate_item_matches_create_item(self):
        item = generate_item(self.template, Rarity.EPIC, Condition.NEW, ScriptedRNG([0.0, 0.9]))
        self.assertEqual((item.fair_price, item.market_hint), (500, 575))

    def test_max_noise_downward(self):
        rng = ScriptedRNG([0.99999, 0.1])
        item = create_item(self.template, Rarity.EPIC, Condition.NEW, rng)
        self.assertEqual(item.market_hint, 350)

    def test_direction_half_goes_down(self):
        rng = ScriptedRNG([0.0, 0.5])
        item = create_item(self.template, Rarity.EPIC, Condition.NEW, rng)
        self.assertEqual(item.market_hint, 425)

    def test_hint_always_within_noise_band(self):
        rng = SeededRNG(7)
        for _ in range(200):
            item = create_item(self.template, Rarity.EPIC, Condition.NEW, rng)
            deviation = abs(item.market_hint - item.fair_price) / item.fair_price
            self.assertGreaterEqual(deviation, 0.149)
            self.assertLessEqual(deviation, 0.301)

    def test_item_is_immutable(self):
        item = create_item(self.template, Rarity.EPIC, Condition.NEW, SeededRNG(1))
        with self.assertRaises(Exception):
            item.fair_price = 1


class TestItemGenerator(unittest.TestCase):

    def test_scripted_draws(self):
        # template, rarity, condition, noise, direction
        rng = ScriptedRNG([0.0, 0.95, 0.85, 0.0, 0.9])
        item = ItemGenerator(rng).generate_random()
        self.assertEqual(item.name, "Plasma Rifle")
        self.assertEqual(item.rarity, Rarity.EPIC)
        self.assertEqual(item.condition, Condition.DAMAGED)
        self.assertEqual(item.fair_price, 900)
        self.assertEqual(item.market_hint, 1035)

    def test_deterministic_with_seed(self):
        def _draw_5(seed):
            gen = ItemGenerator(SeededRNG(seed))
            return [gen.generate_random() for _ in range(5)]

        self.assertEqual(_draw_5(3), _draw_5(3))

    def test_rarity_distribution_roughly_weighted(self):
        gen = ItemGenerator(SeededRNG(11))
        draws = [gen.random_rarity() for _ in range(2000)]
        common = draws.count(Rarity.COMMON) / len(draws)
        epic = draws.count(Rarity.EPIC) / len(draws)
        self.assertAlmostEqual(common, 0.6, delta=0.05)
        self.assertAlmostEqual(epic, 0.1, delta=0.03)

    def test_bad_weights_rejected(self):
        gen = ItemGenerator(SeededRNG(1), rarity_weights=[1.0, 0.0])
        with self.assertRaises(ValueError):
            gen.random_rarity()


class TestCatalog(unittest.TestCase):

    def test_default_catalog(self):
        catalog = Catalog()
        self.assertEqual(len(catalog), len(ITEM_TEMPLATES))
        self.assertEqual(len(catalog.by_category(ItemCategory.WEAPON)), 8)
        self.assertEqual(catalog.by_category(ItemCategory.WEARABLE), [])

    def test_wearables_carry_slot_and_bonus(self):
        catalog = Catalog(include_wearables=True)
        hat = catalog.find("silk trader hat")
        self.assertIsNotNone(hat)
        item = create_item(hat, Rarity.COMMON, Condition.NEW, SeededRNG(1))
        self.assertEqual(item.category, ItemCategory.WEARABLE)
        self.assertEqual(item.mood_bonus, 10)
        self.assertIsNotNone(item.slot)

    def test_find_missing(self):
        self.assertIsNone(Catalog().find("Nope"))

    def test_empty_catalog_rejected(self):
        with self.assertRaises(ValueError):
            Catalog(templates=[])


if __name__ == "__main__":
    unittest.main()
