"""Market state and store."""

from .state import MarketState
from .store import MarketStore, MarketConfigError

__all__ = ["MarketState", "MarketStore", "MarketConfigError"]
