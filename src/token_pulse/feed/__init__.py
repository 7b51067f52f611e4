"""Feed clock."""

from .clock import MarketFeed

__all__ = ["MarketFeed"]
