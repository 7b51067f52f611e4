"""Input validation helpers for addresses, keywords and numbers."""

import math
import re
from typing import Any, List

SOLANA_ADDRESS_RE = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")
KEYWORD_RE = re.compile(r"^[a-zA-Z0-9\s,]+$")


def is_valid_solana_address(address: str) -> bool:
    """Base58, 32 to 44 characters."""
    return bool(SOLANA_ADDRESS_RE.match(address))


def is_valid_keyword(keyword: str) -> bool:
    return bool(KEYWORD_RE.match(keyword))


def split_terms(text: str) -> List[str]:
    """Split comma-separated input into trimmed, non-blank terms."""
    terms = [t.strip() for t in (text or "").split(",")]
    return [t for t in terms if t]


def parse_keywords(text: str) -> List[str]:
    """Split comma-separated input, dropping blank and invalid entries."""
    return [k for k in split_terms(text) if is_valid_keyword(k)]


def is_in_range(value: float, minimum: float, maximum: float) -> bool:
    return minimum <= value <= maximum


def is_valid_percentage(value: float) -> bool:
    return is_in_range(value, 0, 100)


def is_valid_number(value: Any) -> bool:
    """Finite int or float; bools are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_valid_token_data(data: Any) -> bool:
    """Check the minimal shape of a serialized token record."""
    if not isinstance(data, dict):
        return False
    return (
        isinstance(data.get("id"), str)
        and isinstance(data.get("name"), str)
        and isinstance(data.get("symbol"), str)
        and is_valid_number(data.get("price"))
        and is_valid_number(data.get("market_cap"))
    )
