"""Core enumerations for the market simulation."""

from enum import Enum


class TokenStatus(str, Enum):
    """Category a token is listed under."""
    NEW_PAIRS = "new_pairs"
    FINAL_STRETCH = "final_stretch"
    MIGRATED = "migrated"


class SortOption(str, Enum):
    """Orderings available for a category view."""
    TRENDING = "trending"
    MARKET_CAP = "market_cap"
    CREATION_TIME = "creation_time"


# Generation cycles through statuses in this order (index mod 3)
STATUS_CYCLE = [
    TokenStatus.NEW_PAIRS,
    TokenStatus.FINAL_STRETCH,
    TokenStatus.MIGRATED,
]

STATUS_DISPLAY_NAMES = {
    TokenStatus.NEW_PAIRS: "New Pairs",
    TokenStatus.FINAL_STRETCH: "Final Stretch",
    TokenStatus.MIGRATED: "Migrated",
}

PROTOCOL_NAMES = [
    "Pump",
    "Mayhem",
    "Bonk",
    "Bags",
    "Moonshot",
    "Heaven",
    "Daos.fun",
    "Candle",
    "Sugar",
    "Believe",
    "Jupiter Studio",
    "Moonit",
]

PROTOCOL_ICONS = {
    "Pump": "🚀",
    "Mayhem": "💥",
    "Bonk": "🔥",
    "Bags": "💰",
    "Moonshot": "🌙",
    "Heaven": "☁️",
    "Daos.fun": "🌊",
    "Candle": "🕯️",
    "Sugar": "🍬",
    "Believe": "✨",
    "Jupiter Studio": "🪐",
    "Moonit": "⚡",
}


def get_protocol(name: str):
    """Return ``{"name", "icon"}`` for a known protocol, else None."""
    if name not in PROTOCOL_ICONS:
        return None
    return {"name": name, "icon": PROTOCOL_ICONS[name]}
