"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from dmgcalc.domain.entities import Unit


@dataclass(slots=True)
class Team:
    """A named roster of unit slots plus its battle parameters."""

    name: str
    units: List[Optional[Unit]] = field(default_factory=list)
    select: int = 0
    second_select: int = 0  # friendly-fire target slot
    percent: int = 100
    retaliation: bool = False

    @classmethod
    def new(cls, count: int, name: str = "team") -> Team:
        return cls(name=name, units=[None] * count)

    def selected_unit(self) -> Unit | None:
        return self.unit_at(self.select)

    def unit_at(self, slot: int) -> Unit | None:
        if 0 <= slot < len(self.units):
            return self.units[slot]
        return None


@dataclass(frozen=True, slots=True)
class StrikeResult:
    """Outcome of one strike and its optional counter-strike."""

    damage: int
    messages: Tuple[str, ...] = ()
    retaliation: StrikeResult | None = None


@dataclass(frozen=True, slots=True)
class InvalidUnitView:
    """A roster slot whose unit references a class missing from the registry."""

    team_index: int
    team_name: str
    slot: int
    class_name: str

    @property
    def label(self) -> str:
        return f"{self.team_name}_{self.slot}#{self.class_name}"
