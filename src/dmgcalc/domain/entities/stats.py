"""Stat models for classes and unit modifiers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from dmgcalc.core.types import StatField

STAT_FIELDS: Tuple[StatField, ...] = (
    "attack",
    "min_dmg",
    "max_dmg",
    "defense",
    "health",
    "luck",
    "leadership",
    "absorb",
)


@dataclass(slots=True)
class Stats:
    """Combat stats of a class, or a unit's personal modifiers on top of it."""

    attack: int = 0
    min_dmg: int = 0
    max_dmg: int = 0
    defense: int = 0
    health: int = 0
    luck: int = 0
    leadership: int = 0
    absorb: int = 0
    description: str = ""

    def combine(self, modifiers: Stats) -> Stats:
        """Return base stats with the given modifiers added field by field."""
        summed = {name: getattr(self, name) + getattr(modifiers, name) for name in STAT_FIELDS}
        return Stats(description=self.description, **summed)
