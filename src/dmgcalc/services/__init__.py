"""Service layer exports."""

from .errors import BattleError, InvalidStatsError
from .damage_service import DamageResolver, apply_casualties, damage_multiplier
from .battle_service import (
    AttackResolvedEvent,
    BattleEvent,
    BattleService,
    RetaliationResolvedEvent,
    StackDestroyedEvent,
)

__all__ = [
    "BattleError",
    "InvalidStatsError",
    "DamageResolver",
    "apply_casualties",
    "damage_multiplier",
    "AttackResolvedEvent",
    "BattleEvent",
    "BattleService",
    "RetaliationResolvedEvent",
    "StackDestroyedEvent",
]
