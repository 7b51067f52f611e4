"""Market store: owns the state and exposes the query API to consumers."""

import logging
from typing import Callable, Dict, List, Optional, Union

import pandas as pd

from ..core.enums import SortOption, TokenStatus
from ..core.models import FilterSpec, TokenRecord
from ..core.state_lock import StateManager
from ..filters.engine import apply_filter, matches
from ..generator.mock_tokens import generate_tokens
from ..generator.seeded import SeededRandom, seeded_random
from ..simulator.updater import TickReport, UpdateSimulator
from .state import MarketState

logger = logging.getLogger(__name__)

FRAME_COLUMNS = [
    "id", "name", "symbol", "protocol", "status", "price", "market_cap",
    "liquidity", "volume_24h", "transactions", "holders",
    "price_change_5m", "price_change_1h", "price_change_24h", "time_since_creation",
]


class MarketConfigError(ValueError):
    """Invalid arguments at the store boundary."""


class MarketStore:
    """
    Single owner of the market state.

    ``tick``, ``set_filter``, ``set_sort`` and ``select_token`` are the only
    mutation points; all of them and every read run under one lock, so a
    reader sees either the pre-tick or the post-tick universe. Reads return
    snapshots, never the live records.
    """

    def __init__(
        self,
        config: Optional[Dict] = None,
        simulator: Optional[UpdateSimulator] = None,
        rand: SeededRandom = seeded_random,
    ):
        defaults = self._default_config()
        if config:
            defaults.update(config)
        self.config = defaults

        self.simulator = simulator or UpdateSimulator(self.config.get("simulator"))
        self._rand = rand
        self._state = MarketState()
        self._state_manager = StateManager()
        self._version = 0
        self._subscribers: List[Callable[[int], None]] = []

        logger.info("Market store initialized")

    @staticmethod
    def _default_config() -> Dict:
        return {
            "universe_size": 30,
            "simulator": None,
        }

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def init(self, count: Optional[int] = None) -> int:
        """Populate the universe from the deterministic generator.

        Calling again replaces the universe and resets filters.
        """
        count = self.config["universe_size"] if count is None else count
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise MarketConfigError(f"Universe size must be a positive int, got {count!r}")

        tokens = generate_tokens(count, self._rand)
        with self._lock():
            self._state = MarketState(tokens=tokens)
            version = self._bump()

        logger.info(f"Market universe initialized with {count} tokens")
        self._notify(version)
        return version

    def tick(self) -> TickReport:
        """Advance the simulation one step."""
        with self._lock():
            backup = [t.snapshot() for t in self._state.tokens]
            try:
                report = self.simulator.tick(self._state.tokens)
            except Exception:
                # Restore the pre-tick universe
                self._state.tokens = backup
                logger.error("Tick failed, market state rolled back")
                raise
            report.version = self._bump()

        self._notify(report.version)
        return report

    def set_filter(self, category: Union[TokenStatus, str], spec: Union[FilterSpec, Dict, None]) -> int:
        """Replace one category's filter spec as a whole."""
        status = self._parse_status(category)
        if spec is None:
            spec = FilterSpec()
        elif not isinstance(spec, FilterSpec):
            spec = FilterSpec.model_validate(spec)

        with self._lock():
            self._state.filters[status] = spec
            version = self._bump()

        logger.info(f"Filter for {status.value} set ({spec.active_count} active rules)")
        self._notify(version)
        return version

    def reset_filter(self, category: Union[TokenStatus, str]) -> int:
        return self.set_filter(category, FilterSpec())

    def set_sort(self, sort: Union[SortOption, str]) -> int:
        try:
            option = SortOption(sort)
        except ValueError:
            raise MarketConfigError(f"Unknown sort option: {sort!r}") from None

        with self._lock():
            self._state.sort = option
            version = self._bump()

        self._notify(version)
        return version

    def select_token(self, token_id: Optional[str]) -> int:
        """Mark a token as selected, or clear the selection with None."""
        with self._lock():
            if token_id is not None and self._find(token_id) is None:
                raise MarketConfigError(f"Unknown token id: {token_id!r}")
            self._state.selected_token_id = token_id
            version = self._bump()

        self._notify(version)
        return version

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def select_category(self, category: Union[TokenStatus, str]) -> List[TokenRecord]:
        """Filtered view of one category, computed fresh from current state."""
        status = self._parse_status(category)
        with self._lock():
            members = [t for t in self._state.tokens if t.status is status]
            view = apply_filter(members, self._state.filters[status])
            view = self._sorted(view, self._state.sort)
            return [t.snapshot() for t in view]

    def select_all(self) -> List[TokenRecord]:
        """Every token that passes its own category's filter, in ranking order."""
        with self._lock():
            filters = self._state.filters
            view = [
                t for t in self._state.tokens
                if matches(t, filters[t.status])
            ]
            return [t.snapshot() for t in view]

    def count_category(self, category: Union[TokenStatus, str]) -> int:
        """Number of tokens in a category, ignoring filters."""
        status = self._parse_status(category)
        with self._lock():
            return sum(1 for t in self._state.tokens if t.status is status)

    def get_filter(self, category: Union[TokenStatus, str]) -> FilterSpec:
        status = self._parse_status(category)
        with self._lock():
            return self._state.filters[status]

    def filter_count(self, category: Union[TokenStatus, str]) -> int:
        """Number of active filter rules for a category."""
        return self.get_filter(category).active_count

    def selected_token(self) -> Optional[TokenRecord]:
        with self._lock():
            token_id = self._state.selected_token_id
            if token_id is None:
                return None
            token = self._find(token_id)
            return token.snapshot() if token is not None else None

    def all_tokens(self) -> List[TokenRecord]:
        """Snapshot of the full authoritative sequence."""
        with self._lock():
            return [t.snapshot() for t in self._state.tokens]

    def to_frame(self, category: Union[TokenStatus, str]) -> pd.DataFrame:
        """Category view as a DataFrame."""
        rows = [t.to_dict() for t in self.select_category(category)]
        return pd.DataFrame(rows, columns=FRAME_COLUMNS)

    @property
    def sort(self) -> SortOption:
        with self._lock():
            return self._state.sort

    @property
    def version(self) -> int:
        with self._lock():
            return self._version

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def subscribe(self, callback: Callable[[int], None]) -> Callable[[], None]:
        """Call ``callback(version)`` after every mutation.

        Returns a function that removes the subscription.
        """
        with self._lock():
            self._subscribers.append(callback)

        def unsubscribe():
            with self._lock():
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, version: int) -> None:
        with self._lock():
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(version)
            except Exception as e:
                logger.error(f"Subscriber {callback!r} failed at version {version}: {e}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _lock(self):
        return self._state_manager.lock_state("market")

    def _bump(self) -> int:
        self._version += 1
        return self._version

    def _find(self, token_id: str) -> Optional[TokenRecord]:
        for token in self._state.tokens:
            if token.id == token_id:
                return token
        return None

    @staticmethod
    def _parse_status(category) -> TokenStatus:
        try:
            return TokenStatus(category)
        except ValueError:
            raise MarketConfigError(f"Unknown category: {category!r}") from None

    @staticmethod
    def _sorted(tokens: List[TokenRecord], sort: SortOption) -> List[TokenRecord]:
        if sort is SortOption.MARKET_CAP:
            return sorted(tokens, key=lambda t: t.market_cap, reverse=True)
        if sort is SortOption.CREATION_TIME:
            return sorted(tokens, key=lambda t: t.age_minutes)
        return tokens
