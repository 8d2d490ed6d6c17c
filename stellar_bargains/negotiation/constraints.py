"""Hard validation for player offers, applied before the engine sees them."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from stellar_bargains.core.types import NegotiationMode

if TYPE_CHECKING:
    from stellar_bargains.negotiation.session import NegotiationSession


@dataclass
class ValidationResult:
    valid: bool
    reason: str = ""
    violation_type: Optional[str] = None   # "closed" | "bounds" | "budget"


def validate_offer(
    offer: float,
    mode: NegotiationMode,
    balance: float,
    session: Optional[NegotiationSession],
) -> ValidationResult:
    """Validate a player offer against the caller-side rules.

    Returns a ``ValidationResult`` with *valid=True* when all checks pass.
    """
    if session is None or session.is_complete():
        return ValidationResult(False, "Negotiation has ended.", "closed")

    if not math.isfinite(offer) or offer <= 0:
        return ValidationResult(
            False, "Please enter a valid positive amount.", "bounds"
        )

    if mode == NegotiationMode.BUY and offer > balance:
        return ValidationResult(
            False,
            f"You don't have enough coins! ({offer:g} > {balance:g})",
            "budget",
        )

    return ValidationResult(True)
