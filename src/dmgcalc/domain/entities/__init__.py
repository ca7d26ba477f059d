"""Runtime entity exports."""

from .stats import STAT_FIELDS, Stats
from .unit import Unit

__all__ = [
    "STAT_FIELDS",
    "Stats",
    "Unit",
]
