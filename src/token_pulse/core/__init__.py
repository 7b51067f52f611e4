"""Core module for the market simulation."""

from .models import TokenRecord, SecurityInfo, FilterSpec, HISTORY_LENGTH
from .enums import (
    TokenStatus, SortOption, STATUS_CYCLE, STATUS_DISPLAY_NAMES, PROTOCOL_NAMES, get_protocol
)
from .state_lock import StateManager, StateLock

__all__ = [
    "TokenRecord",
    "SecurityInfo",
    "FilterSpec",
    "HISTORY_LENGTH",
    "TokenStatus",
    "SortOption",
    "STATUS_CYCLE",
    "STATUS_DISPLAY_NAMES",
    "PROTOCOL_NAMES",
    "get_protocol",
    "StateManager",
    "StateLock",
]
