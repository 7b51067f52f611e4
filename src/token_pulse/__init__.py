"""
Token Pulse

A simulated live token market: a deterministic mock universe, a tick-based
price mutator and per-category filtered views over one authoritative dataset.
"""

__version__ = "0.1.0"

from .core.models import TokenRecord, SecurityInfo, FilterSpec
from .core.enums import TokenStatus, SortOption
from .generator.mock_tokens import generate_tokens
from .filters.engine import apply_filter
from .simulator.updater import UpdateSimulator, TickReport
from .market.store import MarketStore, MarketConfigError
from .feed.clock import MarketFeed

__all__ = [
    "TokenRecord",
    "SecurityInfo",
    "FilterSpec",
    "TokenStatus",
    "SortOption",
    "generate_tokens",
    "apply_filter",
    "UpdateSimulator",
    "TickReport",
    "MarketStore",
    "MarketConfigError",
    "MarketFeed",
]
