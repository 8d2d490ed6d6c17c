"""Abstract base class for scripted players."""
from __future__ import annotations

from abc import ABC, abstractmethod

from stellar_bargains.core.types import OfferContext


class PlayerStrategy(ABC):
    """Every strategy must implement *decide* and expose *strategy_type*."""

    @abstractmethod
    def decide(self, ctx: OfferContext) -> float:
        """Return the next (positive) offer given the current context."""
        ...

    @property
    @abstractmethod
    def strategy_type(self) -> str:
        """A short identifier for this strategy."""
        ...
