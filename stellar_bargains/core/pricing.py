"""Price rounding shared by the item model and the negotiation engine."""
from __future__ import annotations

import math


def round_price(value: float) -> int:
    """Round half up to a whole coin (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))
