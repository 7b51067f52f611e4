"""Filter engine for category views."""

from .engine import apply_filter, matches

__all__ = ["apply_filter", "matches"]
