"""Pytest configuration and fixtures."""

import pytest

from token_pulse.core.enums import TokenStatus
from token_pulse.core.models import SecurityInfo, TokenRecord
from token_pulse.market.store import MarketStore
from token_pulse.simulator.updater import UpdateSimulator


class ScriptedRandom:
    """Returns queued draws in order, then ``default`` once exhausted."""

    def __init__(self, draws=None, default=0.99):
        self.draws = list(draws or [])
        self.default = default
        self.calls = 0

    def random(self):
        self.calls += 1
        if self.draws:
            return self.draws.pop(0)
        return self.default


def make_token(
    token_id="token-x",
    name="Pepe Coin",
    symbol="PEPE",
    protocol="Pump",
    status=TokenStatus.NEW_PAIRS,
    price=10.0,
    market_cap=1000.0,
    price_change_5m=0.0,
    time_since_creation="10m",
    history=None,
):
    return TokenRecord(
        id=token_id,
        name=name,
        symbol=symbol,
        image="https://example.invalid/img.png",
        contract_address="1" * 44,
        protocol=protocol,
        status=status,
        time_since_creation=time_since_creation,
        security=SecurityInfo(no_mint=True, has_audit=False, is_burned=True, top10_holders=12.5),
        price=price,
        market_cap=market_cap,
        liquidity=5000.0,
        volume_24h=20000.0,
        transactions=10,
        holders=100,
        price_change_5m=price_change_5m,
        price_change_1h=0.0,
        price_change_24h=0.0,
        history=history if history is not None else [price],
    )


@pytest.fixture
def sample_tokens():
    """Small mixed universe across all categories and protocols."""
    return [
        make_token("t0", "Pepe Coin", "PEPE", "Pump", TokenStatus.NEW_PAIRS),
        make_token("t1", "Doge Killer", "LEASH", "Bonk", TokenStatus.NEW_PAIRS),
        make_token("t2", "Shiba Inu", "SHIB", "Pump", TokenStatus.FINAL_STRETCH),
        make_token("t3", "Baby Pepe", "BPEPE", "Moonshot", TokenStatus.MIGRATED),
        make_token("t4", "Floki", "FLOKI", "Bags", TokenStatus.NEW_PAIRS),
    ]


@pytest.fixture
def store():
    """Store over the deterministic 30-token universe."""
    s = MarketStore({"universe_size": 30})
    s.init()
    return s


@pytest.fixture
def always_update_simulator():
    """Simulator that updates every token on every tick."""
    return UpdateSimulator({"update_probability": 1.0})


@pytest.fixture
def token_factory():
    return make_token


@pytest.fixture
def scripted_random():
    return ScriptedRandom
