"""Core data models for the market simulation."""

from collections import deque
from dataclasses import dataclass, field, replace
from typing import Any, Deque, Dict, FrozenSet, Iterable, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..utils.validators import split_terms
from .enums import TokenStatus

HISTORY_LENGTH = 20

_AGE_UNITS_MINUTES = {"m": 1, "h": 60, "d": 1440}


@dataclass(frozen=True)
class SecurityInfo:
    """Security flags fixed when the token is created."""
    no_mint: bool
    has_audit: bool
    is_burned: bool
    top10_holders: float  # percentage


@dataclass
class TokenRecord:
    """One simulated market entry.

    Identity and descriptive fields never change after generation; the
    market metrics are mutated in place by the update simulator.
    """

    id: str
    name: str
    symbol: str
    image: str
    contract_address: str
    protocol: str
    status: TokenStatus
    time_since_creation: str
    security: SecurityInfo

    # Market metrics
    price: float
    market_cap: float
    liquidity: float
    volume_24h: float
    transactions: int
    holders: int

    # Running percentage changes
    price_change_5m: float
    price_change_1h: float
    price_change_24h: float

    history: Deque[float] = field(default_factory=lambda: deque(maxlen=HISTORY_LENGTH))

    def __post_init__(self):
        if not isinstance(self.history, deque) or self.history.maxlen != HISTORY_LENGTH:
            self.history = deque(self.history, maxlen=HISTORY_LENGTH)

    @property
    def age_minutes(self) -> int:
        """Age parsed from ``time_since_creation`` ("42m", "3h", "2d")."""
        text = self.time_since_creation.strip()
        unit = _AGE_UNITS_MINUTES.get(text[-1:], None)
        if unit is None:
            return int(text or 0)
        return int(text[:-1] or 0) * unit

    def snapshot(self) -> "TokenRecord":
        """Detached copy safe to hand out to readers."""
        return replace(self, history=deque(self.history, maxlen=HISTORY_LENGTH))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "symbol": self.symbol,
            "image": self.image,
            "contract_address": self.contract_address,
            "protocol": self.protocol,
            "status": self.status.value,
            "time_since_creation": self.time_since_creation,
            "security": {
                "no_mint": self.security.no_mint,
                "has_audit": self.security.has_audit,
                "is_burned": self.security.is_burned,
                "top10_holders": self.security.top10_holders,
            },
            "price": self.price,
            "market_cap": self.market_cap,
            "liquidity": self.liquidity,
            "volume_24h": self.volume_24h,
            "transactions": self.transactions,
            "holders": self.holders,
            "price_change_5m": self.price_change_5m,
            "price_change_1h": self.price_change_1h,
            "price_change_24h": self.price_change_24h,
            "history": list(self.history),
        }


def _clean_terms(value: Optional[Iterable[Any]]) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise ValueError(f"expected a list of strings, got {type(value).__name__}")
    terms = []
    for item in value:
        if item is None:
            continue
        if not isinstance(item, str):
            raise ValueError(f"filter terms must be strings, got {type(item).__name__}")
        text = item.strip()
        if text:
            terms.append(text)
    return terms


class FilterSpec(BaseModel):
    """Inclusion/exclusion rules for one category view.

    Specs are immutable; a category's spec is only ever replaced as a whole.
    Blank keyword or protocol entries are dropped rather than rejected.
    """

    model_config = ConfigDict(frozen=True)

    protocols: FrozenSet[str] = Field(default_factory=frozenset, description="Protocol allow-list")
    keywords: List[str] = Field(default_factory=list, description="Name/symbol must contain one of these")
    excluded_keywords: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("excluded_keywords", "excludedKeywords"),
        description="Name/symbol must contain none of these",
    )

    @field_validator("protocols", mode="before")
    @classmethod
    def clean_protocols(cls, v):
        return frozenset(_clean_terms(v))

    @field_validator("keywords", "excluded_keywords", mode="before")
    @classmethod
    def clean_keywords(cls, v):
        return _clean_terms(v)

    @classmethod
    def from_text(
        cls,
        protocols: Optional[Iterable[str]] = None,
        keywords: str = "",
        excluded_keywords: str = "",
    ) -> "FilterSpec":
        """Build a spec from comma-separated keyword inputs."""
        return cls(
            protocols=list(protocols or []),
            keywords=split_terms(keywords),
            excluded_keywords=split_terms(excluded_keywords),
        )

    @property
    def is_empty(self) -> bool:
        return not (self.protocols or self.keywords or self.excluded_keywords)

    @property
    def active_count(self) -> int:
        """Number of active rules (protocols + keywords + excluded keywords)."""
        return len(self.protocols) + len(self.keywords) + len(self.excluded_keywords)
