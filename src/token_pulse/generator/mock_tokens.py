"""Deterministic mock universe of token records."""

import logging
import math
from typing import List

from ..core.enums import PROTOCOL_NAMES, STATUS_CYCLE
from ..core.models import HISTORY_LENGTH, SecurityInfo, TokenRecord
from .seeded import SeededRandom, seeded_random

logger = logging.getLogger(__name__)

# Base58 alphabet: no 0, O, I or l
ADDRESS_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
ADDRESS_LENGTH = 44

PRICE_FLOOR = 1e-6

MEME_NAMES = [
    ("Pepe Coin", "PEPE"),
    ("Doge Killer", "LEASH"),
    ("Shiba Inu", "SHIB"),
    ("Floki", "FLOKI"),
    ("Wojak", "WOJAK"),
    ("Milady", "LADYS"),
    ("Turbo", "TURBO"),
    ("Sponge", "SPONGE"),
    ("Mog Coin", "MOG"),
    ("HarryPotter", "BITCOIN"),
    ("HODL", "HODL"),
    ("GigaChad", "GIGA"),
    ("BasedGod", "BASED"),
    ("Zoomer", "ZOOM"),
    ("Boomer", "BOOM"),
    ("Coq Inu", "COQ"),
    ("Bonk", "BONK"),
    ("Myro", "MYRO"),
    ("Wen", "WEN"),
    ("Popcat", "POPCAT"),
    ("Dogwifhat", "WIF"),
    ("Silly Dragon", "SILLY"),
    ("Ponke", "PONKE"),
    ("Michi", "MICHI"),
    ("Gecko", "GECKO"),
    ("Mew", "MEW"),
    ("Maneki", "MANEKI"),
    ("Slothana", "SLOTH"),
    ("Book of Meme", "BOME"),
    ("Slerf", "SLERF"),
]


def _pick(options, draw: float):
    return options[min(int(draw * len(options)), len(options) - 1)]


def generate_address(index: int, rand: SeededRandom = seeded_random) -> str:
    """44 base58 characters, one draw per position."""
    chars = []
    for position in range(ADDRESS_LENGTH):
        draw = rand(index * 100 + position)
        chars.append(_pick(ADDRESS_ALPHABET, draw))
    return "".join(chars)


def _build_record(i: int, rand: SeededRandom) -> TokenRecord:
    name, symbol = MEME_NAMES[i % len(MEME_NAMES)]
    protocol = _pick(PROTOCOL_NAMES, rand(i * 15))

    return TokenRecord(
        id=f"token-{i}",
        name=name,
        symbol=symbol,
        image=f"https://picsum.photos/seed/{i + 142}/200",
        contract_address=generate_address(i, rand),
        protocol=protocol,
        status=STATUS_CYCLE[i % len(STATUS_CYCLE)],
        time_since_creation=f"{math.floor(rand(i * 10) * 60)}m",
        security=SecurityInfo(
            no_mint=rand(i * 11) > 0.2,
            has_audit=rand(i * 12) > 0.5,
            is_burned=rand(i * 13) > 0.3,
            top10_holders=rand(i * 14) * 50,
        ),
        # sin(0) == 0, so index 0 would otherwise start at a zero price
        price=max(PRICE_FLOOR, rand(i * 1) * 10),
        market_cap=rand(i * 5) * 2_000_000,
        liquidity=rand(i * 6) * 500_000,
        volume_24h=rand(i * 7) * 1_000_000,
        transactions=math.floor(rand(i * 8) * 500),
        holders=math.floor(rand(i * 9) * 1000),
        price_change_5m=rand(i * 4) * 5 - 2.5,
        price_change_1h=rand(i * 3) * 10 - 5,
        price_change_24h=rand(i * 2) * 40 - 20,
        history=[rand(i * 20 + h) * 100 for h in range(HISTORY_LENGTH)],
    )


def generate_tokens(count: int, rand: SeededRandom = seeded_random) -> List[TokenRecord]:
    """
    Generate ``count`` token records.

    Every field is a pure function of the record index and ``rand``, so two
    calls with the same arguments always return identical universes.
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"count must be an int, got {type(count).__name__}")
    if count <= 0:
        raise ValueError(f"count must be positive, got {count}")

    tokens = [_build_record(i, rand) for i in range(count)]
    logger.debug(f"Generated {len(tokens)} mock tokens")
    return tokens
