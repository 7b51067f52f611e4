"""Periodic clock that drives market ticks, emulating an async feed."""

import asyncio
import logging
from typing import Optional

from ..market.store import MarketStore
from ..simulator.updater import TickReport

logger = logging.getLogger(__name__)


class MarketFeed:
    """Calls ``store.tick()`` every ``interval_ms`` from a single task.

    Ticks run one after another, so two ticks can never overlap. Stopping
    the feed is the only way to cancel; a tick in progress always completes.
    """

    def __init__(
        self,
        store: MarketStore,
        interval_ms: int = 800,
        max_ticks: Optional[int] = None,
        error_backoff_ms: int = 5000,
    ):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        if max_ticks is not None and max_ticks < 0:
            raise ValueError(f"max_ticks must be non-negative, got {max_ticks}")

        self.store = store
        self.interval_ms = interval_ms
        self.max_ticks = max_ticks
        self.error_backoff_ms = error_backoff_ms

        self._running = False
        self._ticks = 0
        self._failures = 0
        self.last_report: Optional[TickReport] = None

        logger.info(f"Market feed initialized (interval={interval_ms}ms, max_ticks={max_ticks})")

    @property
    def running(self) -> bool:
        return self._running

    @property
    def tick_count(self) -> int:
        return self._ticks

    @property
    def failure_count(self) -> int:
        return self._failures

    async def start(self):
        """Run the clock until ``stop()`` is called or ``max_ticks`` is reached."""
        self._running = True
        logger.info("Market feed started")

        while self._running:
            if self.max_ticks is not None and self._ticks >= self.max_ticks:
                break

            try:
                self.last_report = self.store.tick()
                self._ticks += 1
            except Exception as e:
                self._failures += 1
                logger.error(f"Tick failed: {e}")
                await asyncio.sleep(self.error_backoff_ms / 1000)
                continue

            await asyncio.sleep(self.interval_ms / 1000)

        self._running = False
        logger.info(f"Market feed stopped after {self._ticks} ticks")

    def stop(self):
        """Stop after the current tick."""
        self._running = False
