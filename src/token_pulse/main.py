"""Run the simulated market feed and log category leaderboards."""

import asyncio
import logging
import os
import signal
import sys
from typing import Dict, Optional

from dotenv import load_dotenv

load_dotenv()

from .core.enums import STATUS_DISPLAY_NAMES, TokenStatus
from .feed.clock import MarketFeed
from .market.store import MarketStore
from .utils.formatters import format_market_cap, format_percentage, format_price

logger = logging.getLogger(__name__)


class TokenPulseApp:
    """Wires the store to a feed clock and reports on it."""

    def __init__(self, config: Optional[Dict] = None):
        defaults = self._default_config()
        if config:
            for key, val in config.items():
                if isinstance(val, dict) and key in defaults and isinstance(defaults[key], dict):
                    defaults[key].update(val)
                else:
                    defaults[key] = val
        self.config = defaults

        self.store = MarketStore({
            "universe_size": self.config["universe_size"],
            "simulator": self.config["simulator"],
        })
        self.feed = MarketFeed(
            self.store,
            interval_ms=self.config["tick_ms"],
            max_ticks=self.config["max_ticks"],
        )
        self._unsubscribe = self.store.subscribe(self._on_change)

        logger.info("Token pulse app initialized")

    @staticmethod
    def _default_config() -> Dict:
        return {
            "tick_ms": 800,
            "universe_size": 30,
            "max_ticks": None,
            "report_every": 10,
            "top_n": 3,
            "simulator": {},
        }

    async def start(self):
        self.store.init()
        await self.feed.start()

    async def stop(self):
        self.feed.stop()
        self._unsubscribe()
        self.log_leaderboard()

    def _on_change(self, version: int):
        ticks = self.feed.tick_count + 1
        if self.feed.running and ticks % self.config["report_every"] == 0:
            self.log_leaderboard()

    def log_leaderboard(self):
        """Log the top movers of each category."""
        for status in TokenStatus:
            frame = self.store.to_frame(status).head(self.config["top_n"])
            total = self.store.count_category(status)
            lines = [
                f"{row.symbol:<8} {format_price(row.price):>12} "
                f"{format_percentage(row.price_change_5m):>9} {format_market_cap(row.market_cap):>10}"
                for row in frame.itertuples()
            ]
            logger.info(
                f"{STATUS_DISPLAY_NAMES[status]} (v{self.store.version}, {len(frame)}/{total}): "
                + (" | ".join(lines) if lines else "no matches")
            )

    def _signal_handler(self, signum, frame):
        logger.info(f"Received signal {signum}, shutting down...")
        self.feed.stop()


def _config_from_env() -> Dict:
    """Build config overrides from environment variables."""
    config: Dict = {}

    tick_ms = os.getenv('TOKEN_PULSE_TICK_MS', '').strip()
    universe_size = os.getenv('TOKEN_PULSE_UNIVERSE_SIZE', '').strip()
    max_ticks = os.getenv('TOKEN_PULSE_MAX_TICKS', '').strip()

    if tick_ms:
        config['tick_ms'] = int(tick_ms)
    if universe_size:
        config['universe_size'] = int(universe_size)
    if max_ticks:
        config['max_ticks'] = int(max_ticks)

    return config


def _configure_logging():
    level = os.getenv('TOKEN_PULSE_LOG_LEVEL', 'INFO').strip().upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )


async def main():
    """Main entry point."""
    _configure_logging()
    app = TokenPulseApp(_config_from_env())

    signal.signal(signal.SIGINT, app._signal_handler)
    signal.signal(signal.SIGTERM, app._signal_handler)

    try:
        await app.start()
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        raise
    finally:
        await app.stop()


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
