"""Runtime unit model."""
from __future__ import annotations

from dataclasses import dataclass, field

from .stats import Stats


@dataclass(slots=True)
class Unit:
    """A stack of identical creatures of one class."""

    name: str
    stats: Stats = field(default_factory=Stats)
    value: int = 0
    damage_left: int = 0  # health already lost by the top creature

    @property
    def is_destroyed(self) -> bool:
        return self.value <= 0
