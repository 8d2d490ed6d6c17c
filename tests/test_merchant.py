"""Tests for merchant mood/trust state and personality presets."""
import unittest

from stellar_bargains.core.rng import SeededRNG
from stellar_bargains.negotiation.merchant import Merchant, generate_merchant_name
from stellar_bargains.negotiation.personality import (
    GREEDY,
    HONEST,
    IMPULSIVE,
    PersonalityExtras,
    PersonalityProfile,
    PersonalityTraits,
)


def _merchant(traits=HONEST, mood=0.0, trust=50.0):
    return Merchant(PersonalityProfile(traits), name="Vexar", mood=mood, trust=trust)


class TestMood(unittest.TestCase):

    def test_volatility_then_decay(self):
        m = _merchant()            # volatility 5 -> half strength
        m.adjust_mood(20)
        self.assertAlmostEqual(m.mood, 8.0)

    def test_negative_decays_toward_zero(self):
        m = _merchant()
        m.adjust_mood(-20)
        self.assertAlmostEqual(m.mood, -8.0)

    def test_clamped_before_decay(self):
        m = _merchant(IMPULSIVE, mood=99)
        m.adjust_mood(100)
        self.assertAlmostEqual(m.mood, 98.0)

        m = _merchant(IMPULSIVE, mood=-99)
        m.adjust_mood(-100)
        self.assertAlmostEqual(m.mood, -98.0)

    def test_decay_does_not_cross_zero(self):
        m = _merchant(mood=1.0)
        m.adjust_mood(0)
        self.assertEqual(m.mood, 0.0)

        m = _merchant(mood=-1.5)
        m.adjust_mood(0)
        self.assertEqual(m.mood, 0.0)

    def test_neutral_stays_neutral(self):
        m = _merchant()
        m.adjust_mood(0)
        self.assertEqual(m.mood, 0.0)

    def test_mood_always_in_range(self):
        rng = SeededRNG(5)
        m = _merchant(IMPULSIVE)
        for _ in range(500):
            m.adjust_mood(rng.uniform(-200, 200))
            self.assertGreaterEqual(m.mood, -100)
            self.assertLessEqual(m.mood, 100)


class TestTrust(unittest.TestCase):

    def test_no_decay(self):
        m = _merchant()
        m.adjust_trust(5)
        self.assertEqual(m.trust, 55.0)

    def test_clamped(self):
        m = _merchant()
        m.adjust_trust(80)
        self.assertEqual(m.trust, 100.0)
        m.adjust_trust(-500)
        self.assertEqual(m.trust, 0.0)


class TestModifiers(unittest.TestCase):

    def test_mood_modifier_bounds(self):
        self.assertAlmostEqual(_merchant(mood=100).mood_modifier(), 1.2)
        self.assertAlmostEqual(_merchant(mood=-100).mood_modifier(), 0.8)
        self.assertAlmostEqual(_merchant(mood=0).mood_modifier(), 1.0)

    def test_trust_modifier_bounds(self):
        self.assertAlmostEqual(_merchant(trust=0).trust_modifier(), 0.7)
        self.assertAlmostEqual(_merchant(trust=100).trust_modifier(), 1.3)
        self.assertAlmostEqual(_merchant(trust=50).trust_modifier(), 1.0)


class TestConstruction(unittest.TestCase):

    def test_external_state_is_clamped(self):
        m = _merchant(mood=-150, trust=120)
        self.assertEqual(m.mood, -100)
        self.assertEqual(m.trust, 100)

    def test_snapshot_restore(self):
        m = _merchant(mood=12, trust=40)
        snap = m.snapshot()
        m.adjust_mood(-50)
        m.adjust_trust(-30)
        m.restore(snap)
        self.assertEqual((m.mood, m.trust), (12, 40))

    def test_random_merchant_deterministic(self):
        a = Merchant.random(SeededRNG(9))
        b = Merchant.random(SeededRNG(9))
        self.assertEqual(a.name, b.name)
        self.assertEqual(a.personality.traits, b.personality.traits)
        self.assertEqual((a.mood, a.trust), (0.0, 50.0))

    def test_generated_name_shape(self):
        name = generate_merchant_name(SeededRNG(1))
        self.assertTrue(name[0].isupper())
        self.assertGreaterEqual(len(name), 4)


class TestPersonality(unittest.TestCase):

    def test_presets(self):
        self.assertEqual(GREEDY.target_margin, 40)
        self.assertEqual(HONEST.patience, 5)
        self.assertEqual(IMPULSIVE.concession_rate, 0.12)

    def test_preset_lookup_case_insensitive(self):
        self.assertEqual(PersonalityProfile.preset("Greedy").traits, GREEDY)
        self.assertEqual(PersonalityProfile.preset(" impulsive ").traits, IMPULSIVE)

    def test_unknown_preset(self):
        with self.assertRaises(ValueError):
            PersonalityProfile.preset("sneaky")

    def test_custom_traits_and_extras(self):
        traits = PersonalityTraits("Stoic", 20, 4, 0.05, 1.0, 10)
        extras = PersonalityExtras(backstory="Ex-miner", quirks=("hums",))
        profile = PersonalityProfile(traits, extras)
        self.assertEqual(profile.name, "Stoic")
        self.assertEqual(profile.extras.backstory, "Ex-miner")
        self.assertIsNone(PersonalityProfile(HONEST).extras)

    def test_traits_immutable(self):
        with self.assertRaises(Exception):
            HONEST.patience = 10


if __name__ == "__main__":
    unittest.main()
