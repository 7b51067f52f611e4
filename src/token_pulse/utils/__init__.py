"""Formatting and validation helpers for presentation layers."""

from .formatters import (
    format_price,
    format_percentage,
    format_large_number,
    format_market_cap,
    format_volume,
    format_time_since,
    truncate_address,
)
from .validators import (
    is_valid_solana_address,
    is_valid_keyword,
    parse_keywords,
    split_terms,
    is_in_range,
    is_valid_percentage,
    is_valid_number,
    is_valid_token_data,
)

__all__ = [
    "format_price",
    "format_percentage",
    "format_large_number",
    "format_market_cap",
    "format_volume",
    "format_time_since",
    "truncate_address",
    "is_valid_solana_address",
    "is_valid_keyword",
    "parse_keywords",
    "split_terms",
    "is_in_range",
    "is_valid_percentage",
    "is_valid_number",
    "is_valid_token_data",
]
