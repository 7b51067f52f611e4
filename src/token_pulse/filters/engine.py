"""Per-category filter engine."""

import logging
from typing import Iterable, List, Sequence

from ..core.models import FilterSpec, TokenRecord

logger = logging.getLogger(__name__)


def _contains_any(record: TokenRecord, terms: Sequence[str]) -> bool:
    name = record.name.lower()
    symbol = record.symbol.lower()
    return any(term in name or term in symbol for term in terms)


def matches(record: TokenRecord, spec: FilterSpec) -> bool:
    """Check one record against a spec.

    Rules run in order and stop at the first failure:
    protocol allow-list, then required keywords, then excluded keywords.
    """
    if spec.protocols and record.protocol not in spec.protocols:
        return False

    if spec.keywords:
        if not _contains_any(record, [k.lower() for k in spec.keywords]):
            return False

    if spec.excluded_keywords:
        if _contains_any(record, [k.lower() for k in spec.excluded_keywords]):
            return False

    return True


def apply_filter(records: Iterable[TokenRecord], spec: FilterSpec) -> List[TokenRecord]:
    """Return the records that pass ``spec``, in their original order."""
    records = list(records)
    if spec.is_empty:
        return records

    result = [r for r in records if matches(r, spec)]
    logger.debug(f"Filter kept {len(result)} of {len(records)} records ({spec.active_count} rules)")
    return result
