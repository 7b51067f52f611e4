"""Tick-based price and metric updates that emulate a live market feed."""

import logging
import math
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from ..core.models import TokenRecord

logger = logging.getLogger(__name__)


@dataclass
class TickReport:
    """Summary of one simulator pass."""
    updated: int = 0
    skipped_degenerate: int = 0
    elapsed_ms: float = 0.0
    version: int = 0


class UpdateSimulator:
    """
    Advances the market one tick at a time.

    Each tick only touches a random subset of records so motion looks
    desynchronized, then re-ranks the whole sequence by 5m change.

    *rng* is any object exposing ``random() -> float`` in [0, 1); a numpy
    ``Generator`` is used when none is given.
    """

    def __init__(self, config: Optional[Dict] = None, rng=None):
        defaults = self._default_config()
        if config:
            defaults.update(config)
        self.config = defaults
        self.rng = rng if rng is not None else np.random.default_rng()
        logger.info(
            f"Update simulator initialized (update_probability={self.config['update_probability']})"
        )

    @staticmethod
    def _default_config() -> Dict:
        return {
            "update_probability": 0.15,
            "spike_probability": 0.10,
            "spike_volatility": 0.05,
            "calm_volatility": 0.005,
            "up_probability": 0.55,
            "volume_probability": 0.30,
            "max_volume_increment": 1000.0,
            "price_floor": 1e-6,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def tick(self, records: List[TokenRecord]) -> TickReport:
        """Mutate ``records`` in place and re-sort it."""
        start = time.monotonic()
        report = TickReport()

        for token in records:
            if self.rng.random() >= self.config["update_probability"]:
                continue

            if self.rng.random() < self.config["spike_probability"]:
                volatility = self.config["spike_volatility"]
            else:
                volatility = self.config["calm_volatility"]
            direction = 1 if self.rng.random() < self.config["up_probability"] else -1

            if not self.apply_move(token, volatility, direction):
                report.skipped_degenerate += 1
                continue

            if self.rng.random() < self.config["volume_probability"]:
                token.volume_24h += self.rng.random() * self.config["max_volume_increment"]
                token.transactions += 1

            report.updated += 1

        self.rank(records)

        report.elapsed_ms = (time.monotonic() - start) * 1000
        logger.debug(
            f"Tick updated {report.updated}/{len(records)} tokens "
            f"({report.skipped_degenerate} skipped) in {report.elapsed_ms:.2f}ms"
        )
        return report

    def apply_move(self, token: TokenRecord, volatility: float, direction: int) -> bool:
        """
        Move one token's price by ``volatility`` in ``direction``.

        Market cap keeps its ratio to the pre-update price. Returns False
        and leaves the token untouched if the move would be degenerate.
        """
        old_price = token.price
        old_cap = token.market_cap
        if not math.isfinite(old_price) or old_price <= 0 or not math.isfinite(old_cap):
            logger.warning(f"Skipping {token.id}: degenerate state price={old_price} cap={old_cap}")
            return False

        delta = old_price * volatility * direction
        new_price = max(self.config["price_floor"], old_price + delta)
        new_cap = new_price * (old_cap / old_price)
        # Accumulators follow the move actually applied after the floor clamp
        pct_move = (new_price - old_price) / new_price * 100

        if not all(math.isfinite(v) for v in (new_price, new_cap, pct_move)):
            logger.warning(f"Skipping {token.id}: non-finite update (price={new_price}, cap={new_cap})")
            return False

        token.price = new_price
        token.market_cap = new_cap
        token.price_change_5m += pct_move
        token.price_change_1h += pct_move
        token.history.append(new_price)
        return True

    @staticmethod
    def rank(records: List[TokenRecord]) -> None:
        """Stable sort, highest 5m change first."""
        records.sort(key=lambda t: t.price_change_5m, reverse=True)
