"""Tests for the scripted player strategies."""
import unittest

from stellar_bargains.agents.rule_based import (
    AnchoredStrategy,
    LowballStrategy,
    make_strategy,
)
from stellar_bargains.core.types import NegotiationMode, OfferContext

BUY = NegotiationMode.BUY
SELL = NegotiationMode.SELL


def _ctx(mode=BUY, round_number=1, balance=5000.0, last_counter=None, hint=1000):
    return OfferContext(
        mode=mode,
        market_hint=hint,
        round_number=round_number,
        max_rounds=6,
        balance=balance,
        last_counter=last_counter,
    )


class TestAnchoredStrategy(unittest.TestCase):

    def setUp(self):
        self.strategy = AnchoredStrategy()

    def test_buyer_opens_low_and_concedes(self):
        offers = [self.strategy.decide(_ctx(round_number=r)) for r in range(1, 7)]
        self.assertEqual(offers[0], 700)
        self.assertEqual(offers[-1], 1050)
        self.assertEqual(offers, sorted(offers))

    def test_buyer_never_exceeds_balance(self):
        offer = self.strategy.decide(_ctx(round_number=6, balance=900))
        self.assertEqual(offer, 900)

    def test_buyer_splits_with_higher_counter(self):
        offer = self.strategy.decide(_ctx(last_counter=1300))
        self.assertEqual(offer, 1000)

    def test_buyer_ignores_lower_counter(self):
        offer = self.strategy.decide(_ctx(last_counter=500))
        self.assertEqual(offer, 700)

    def test_seller_opens_high_and_concedes(self):
        offers = [
            self.strategy.decide(_ctx(SELL, round_number=r)) for r in range(1, 7)
        ]
        self.assertEqual(offers[0], 1300)
        self.assertEqual(offers[-1], 950)
        self.assertEqual(offers, sorted(offers, reverse=True))

    def test_seller_split_stops_at_limit(self):
        offer = self.strategy.decide(_ctx(SELL, last_counter=400))
        self.assertEqual(offer, 950)

    def test_offer_always_positive(self):
        self.assertGreaterEqual(self.strategy.decide(_ctx(hint=0)), 1)


class TestLowballStrategy(unittest.TestCase):

    def test_buyer_alternates(self):
        strategy = LowballStrategy()
        offers = [strategy.decide(_ctx(round_number=r)) for r in range(1, 5)]
        self.assertEqual(offers, [300, 800, 300, 800])

    def test_seller_alternates(self):
        strategy = LowballStrategy()
        offers = [strategy.decide(_ctx(SELL, round_number=r)) for r in range(1, 3)]
        self.assertEqual(offers, [1800, 1100])


class TestFactory(unittest.TestCase):

    def test_known_names(self):
        self.assertEqual(make_strategy("anchored").strategy_type, "anchored")
        self.assertEqual(make_strategy("lowball").strategy_type, "lowball")

    def test_unknown_name(self):
        with self.assertRaises(ValueError):
            make_strategy("telepath")


if __name__ == "__main__":
    unittest.main()
