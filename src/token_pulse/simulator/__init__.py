"""Market update simulation."""

from .updater import UpdateSimulator, TickReport

__all__ = ["UpdateSimulator", "TickReport"]
