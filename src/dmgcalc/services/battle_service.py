"""Team-level battle actions on top of the damage resolver."""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from dmgcalc.config import CalcSettings
from dmgcalc.data.repositories import ClassRegistry
from dmgcalc.domain.battle_models import InvalidUnitView, StrikeResult, Team
from dmgcalc.domain.entities import Unit
from dmgcalc.services.damage_service import DamageResolver
from dmgcalc.services.errors import BattleError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class AttackResolvedEvent(BattleEvent):
    attacker_name: str
    defender_name: str
    damage: int
    messages: Tuple[str, ...]
    defender_value: int
    defender_damage_left: int


@dataclass(slots=True)
class RetaliationResolvedEvent(BattleEvent):
    attacker_name: str
    defender_name: str
    damage: int
    messages: Tuple[str, ...]
    defender_value: int
    defender_damage_left: int


@dataclass(slots=True)
class StackDestroyedEvent(BattleEvent):
    team_name: str
    unit_name: str


class BattleService:
    """Runs attacks between the selected units of two teams."""

    def __init__(
        self,
        registry: ClassRegistry,
        resolver: DamageResolver,
        settings: CalcSettings | None = None,
    ) -> None:
        self._registry = registry
        self._resolver = resolver
        self._settings = settings or CalcSettings()

    # -----------------------
    # Attacks
    # -----------------------
    def attack(self, attacking_team: Team, defending_team: Team) -> List[BattleEvent]:
        """Strike the defending team's selected unit with the attacker's selected unit.

        Strength follows the attacking team's percent; whether the defender
        strikes back follows the defending team's retaliation flag.
        """
        attacker = self._require_selected(attacking_team, attacking_team.select)
        defender = self._require_selected(defending_team, defending_team.select)
        result = self._resolver.calculate(
            defender,
            attacker,
            attacking_team.percent,
            defending_team.retaliation,
        )
        return self._build_events(result, attacking_team, attacker, defending_team, defender)

    def attack_own_unit(self, team: Team) -> List[BattleEvent]:
        """Strike the team's `second_select` slot with its `select` slot."""
        if not self._settings.can_kill_yourself:
            raise BattleError("Attacking your own units is disabled.")
        attacker = copy.deepcopy(self._require_selected(team, team.select))
        defender = copy.deepcopy(self._require_selected(team, team.second_select))
        result = self._resolver.calculate(defender, attacker, team.percent, team.retaliation)
        team.units[team.select] = attacker
        team.units[team.second_select] = defender
        return self._build_events(result, team, attacker, team, defender)

    # -----------------------
    # Roster helpers
    # -----------------------
    def new_team(self, name: str = "team") -> Team:
        """Create an empty team sized by the configured slot count."""
        return Team.new(self._settings.units_count, name=name)

    def find_invalid_units(self, teams: Iterable[Team]) -> List[InvalidUnitView]:
        """Return every unit whose class is missing from the registry."""
        invalid: List[InvalidUnitView] = []
        for team_index, team in enumerate(teams):
            for slot, unit in enumerate(team.units):
                if unit is not None and unit.name not in self._registry:
                    invalid.append(
                        InvalidUnitView(
                            team_index=team_index,
                            team_name=team.name,
                            slot=slot,
                            class_name=unit.name,
                        )
                    )
        return invalid

    def remove_unit(self, team: Team, slot: int) -> None:
        if not 0 <= slot < len(team.units):
            raise BattleError(f"Team '{team.name}' has no slot {slot}.")
        team.units[slot] = None

    # -----------------------
    # Helpers
    # -----------------------
    def _require_selected(self, team: Team, slot: int) -> Unit:
        unit = team.unit_at(slot)
        if unit is None:
            raise BattleError(f"Team '{team.name}' has no unit in slot {slot}.")
        return unit

    def _build_events(
        self,
        result: StrikeResult,
        attacking_team: Team,
        attacker: Unit,
        defending_team: Team,
        defender: Unit,
    ) -> List[BattleEvent]:
        events: List[BattleEvent] = [
            AttackResolvedEvent(
                attacker_name=attacker.name,
                defender_name=defender.name,
                damage=result.damage,
                messages=result.messages,
                defender_value=defender.value,
                defender_damage_left=defender.damage_left,
            )
        ]
        if result.retaliation is not None:
            events.append(
                RetaliationResolvedEvent(
                    attacker_name=defender.name,
                    defender_name=attacker.name,
                    damage=result.retaliation.damage,
                    messages=result.retaliation.messages,
                    defender_value=attacker.value,
                    defender_damage_left=attacker.damage_left,
                )
            )
        if defender.is_destroyed:
            events.append(StackDestroyedEvent(team_name=defending_team.name, unit_name=defender.name))
        if attacker is not defender and attacker.is_destroyed:
            events.append(StackDestroyedEvent(team_name=attacking_team.name, unit_name=attacker.name))
        logger.debug("%s attacked %s: %d damage", attacking_team.name, defending_team.name, result.damage)
        return events
