"""Authoritative market state."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..core.enums import SortOption, TokenStatus
from ..core.models import FilterSpec, TokenRecord


def _empty_filters() -> Dict[TokenStatus, FilterSpec]:
    return {status: FilterSpec() for status in TokenStatus}


@dataclass
class MarketState:
    """Owned state: the ranked token sequence plus one filter spec per category."""
    tokens: List[TokenRecord] = field(default_factory=list)
    filters: Dict[TokenStatus, FilterSpec] = field(default_factory=_empty_filters)
    sort: SortOption = SortOption.TRENDING
    selected_token_id: Optional[str] = None
