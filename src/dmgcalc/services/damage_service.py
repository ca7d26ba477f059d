"""Damage resolution between two unit stacks."""
from __future__ import annotations

import logging
import math
from typing import List

from dmgcalc.config import DEFAULT_LEADERSHIP_MESSAGE, DEFAULT_LUCK_MESSAGE
from dmgcalc.core.rng import RNG, shared_rng
from dmgcalc.data.repositories import ClassRegistry
from dmgcalc.domain.battle_models import StrikeResult
from dmgcalc.domain.entities import Unit
from dmgcalc.services.errors import InvalidStatsError

logger = logging.getLogger(__name__)

ATTACK_BONUS_PER_POINT = 5
ATTACK_BONUS_CAP = 300
DEFENCE_PENALTY_PER_POINT = 2.5
DEFENCE_PENALTY_CAP = 70
RETALIATION_PERCENT = 100


def damage_delta(attack: int, defence: int) -> float:
    """Return the signed percentage bonus (or penalty) from attack vs defence."""
    if attack > defence:
        return min((attack - defence) * ATTACK_BONUS_PER_POINT, ATTACK_BONUS_CAP)
    if attack < defence:
        return -min((defence - attack) * DEFENCE_PENALTY_PER_POINT, DEFENCE_PENALTY_CAP)
    return 0


def damage_multiplier(attack: int, defence: int) -> float:
    """Return the damage multiplier for the given attack and defence."""
    return (100 + damage_delta(attack, defence)) / 100


def apply_casualties(defender: Unit, health: int, damage: float) -> None:
    """Remove `damage` worth of health from the defender's stack.

    Damage first finishes the already wounded top creature, then spills into
    the next ones. The survivor count rounds up; the leftover wound truncates.
    """
    remaining = defender.value * health - damage - defender.damage_left
    survivors = math.ceil(remaining / health)
    defender.value = survivors
    defender.damage_left = int(survivors * health - remaining)


class DamageResolver:
    """Resolves strikes between units using class stats from a registry."""

    def __init__(
        self,
        registry: ClassRegistry,
        rng: RNG | None = None,
        *,
        luck_message: str = DEFAULT_LUCK_MESSAGE,
        leadership_message: str = DEFAULT_LEADERSHIP_MESSAGE,
    ) -> None:
        self._registry = registry
        self._rng = rng or shared_rng()
        self._luck_message = luck_message
        self._leadership_message = leadership_message

    def calculate(
        self,
        defender: Unit,
        attacker: Unit,
        percent: int = 100,
        retaliation: bool = False,
    ) -> StrikeResult:
        """Strike `defender` with `attacker`, mutating the defender's stack.

        `percent` scales the attack strength. When `retaliation` is set the
        defender strikes back once at full strength; the counter-strike never
        triggers another one.
        """
        self._check_stats(defender, attacker)
        if retaliation:
            self._check_stats(attacker, defender)
        return self._strike(defender, attacker, percent, retaliation=retaliation, echo=False)

    def _check_stats(self, defender: Unit, attacker: Unit) -> None:
        attacker_stats = self._registry.effective_stats(attacker)
        defender_stats = self._registry.effective_stats(defender)
        if defender_stats.health <= 0:
            raise InvalidStatsError(
                f"'{defender.name}' has non-positive effective health ({defender_stats.health})."
            )
        if attacker_stats.min_dmg > attacker_stats.max_dmg:
            raise InvalidStatsError(
                f"'{attacker.name}' has an empty damage range "
                f"({attacker_stats.min_dmg}-{attacker_stats.max_dmg})."
            )

    def _strike(
        self,
        defender: Unit,
        attacker: Unit,
        percent: int,
        *,
        retaliation: bool,
        echo: bool,
    ) -> StrikeResult:
        attacker_stats = self._registry.effective_stats(attacker)
        defender_stats = self._registry.effective_stats(defender)
        health = defender_stats.health

        luck_roll = self._rng.randint(0, 99)
        leadership_roll = self._rng.randint(0, 99)
        base_damage = self._rng.randint(attacker_stats.min_dmg, attacker_stats.max_dmg)

        delta = damage_delta(attacker_stats.attack, defender_stats.defense)
        raw = base_damage * attacker.value * (100 + delta) * percent / 10_000

        messages: List[str] = []
        if luck_roll < attacker_stats.luck:
            messages.append(self._luck_message)
        if leadership_roll < attacker_stats.leadership:
            messages.append(self._leadership_message)

        if raw <= defender.stats.absorb:
            defender.stats.absorb -= int(raw)
            dealt = 0
        else:
            raw -= defender.stats.absorb
            defender.stats.absorb = 0
            apply_casualties(defender, health, raw)
            dealt = int(raw)

        logger.debug(
            "%s x%d -> %s: roll=%d delta=%s percent=%d dealt=%d left=%d/%d%s",
            attacker.name,
            attacker.value,
            defender.name,
            base_damage,
            delta,
            percent,
            dealt,
            defender.value,
            defender.damage_left,
            " (retaliation)" if echo else "",
        )

        counter = None
        if retaliation and not echo:
            counter = self._strike(attacker, defender, RETALIATION_PERCENT, retaliation=False, echo=True)
        return StrikeResult(damage=dealt, messages=tuple(messages), retaliation=counter)
