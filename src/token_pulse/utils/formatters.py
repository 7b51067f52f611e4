"""Display formatting helpers for market values."""


def format_price(price: float) -> str:
    """Format a price with more precision for small values."""
    if price < 0.000001:
        return f"{price:.2e}"
    if price < 0.01:
        return f"{price:.6f}"
    if price < 1:
        return f"{price:.4f}"
    return f"{price:.2f}"


def format_percentage(value: float) -> str:
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"


def format_large_number(value: float, prefix: str = "$") -> str:
    """Format with K/M/B suffixes."""
    if value >= 1e9:
        return f"{prefix}{value / 1e9:.2f}B"
    if value >= 1e6:
        return f"{prefix}{value / 1e6:.2f}M"
    if value >= 1e3:
        return f"{prefix}{value / 1e3:.2f}K"
    return f"{prefix}{value:.2f}"


def format_market_cap(value: float) -> str:
    return format_large_number(value, "$")


def format_volume(value: float) -> str:
    return format_large_number(value, "$")


def format_time_since(minutes: int) -> str:
    """Minutes as the largest whole unit: 45m, 3h, 2d."""
    if minutes < 60:
        return f"{minutes}m"
    if minutes < 1440:
        return f"{minutes // 60}h"
    return f"{minutes // 1440}d"


def truncate_address(address: str, start_chars: int = 6, end_chars: int = 4) -> str:
    if len(address) <= start_chars + end_chars:
        return address
    return f"{address[:start_chars]}...{address[-end_chars:]}"
