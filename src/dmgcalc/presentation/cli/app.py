"""Command-line front end: import a class table and resolve one strike."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Sequence

from dmgcalc.config import load_config
from dmgcalc.core.rng import RNG
from dmgcalc.data.errors import DataLoadError, UnknownClassError
from dmgcalc.data.repositories import ClassRegistry
from dmgcalc.domain.battle_models import StrikeResult
from dmgcalc.domain.entities import Unit
from dmgcalc.services import DamageResolver, InvalidStatsError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dmgcalc",
        description="Resolve one attack between two unit stacks.",
    )
    parser.add_argument("classes", type=Path, help="JSON class table")
    parser.add_argument("attacker", help="attacking unit class")
    parser.add_argument("defender", help="defending unit class")
    parser.add_argument("--attackers", type=int, default=1, help="attacking stack size")
    parser.add_argument("--defenders", type=int, default=1, help="defending stack size")
    parser.add_argument("--percent", type=int, default=100, help="attack strength in percent")
    parser.add_argument("--retaliation", action="store_true", help="let the defender strike back")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible rolls")
    parser.add_argument("--config", type=Path, default=None, help="settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every roll")
    return parser


def format_strike(label: str, result: StrikeResult) -> List[str]:
    lines = [f"{label}: {result.damage} damage"]
    lines.extend(f"  {message}" for message in result.messages)
    return lines


def format_stack(unit: Unit, health: int) -> str:
    if unit.is_destroyed:
        return f"{unit.name}: destroyed"
    return f"{unit.name}: {unit.value} left, top creature {health - unit.damage_left}/{health}"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.percent < 0:
        print("error: --percent must not be negative", file=sys.stderr)
        return 1

    settings = load_config(args.config)
    registry = ClassRegistry()
    try:
        errors = registry.import_file(args.classes)
    except DataLoadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if errors < 0:
        print(f"error: {args.classes} is not a JSON object of classes", file=sys.stderr)
        return 1
    if errors:
        print(f"warning: skipped {errors} malformed class entries")

    resolver = DamageResolver(
        registry,
        RNG(args.seed),
        luck_message=settings.luck_message,
        leadership_message=settings.leadership_message,
    )
    attacker = Unit(name=args.attacker, value=args.attackers)
    defender = Unit(name=args.defender, value=args.defenders)
    try:
        result = resolver.calculate(defender, attacker, args.percent, args.retaliation)
    except (UnknownClassError, InvalidStatsError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    lines = format_strike(f"{attacker.name} -> {defender.name}", result)
    if result.retaliation is not None:
        lines.extend(format_strike(f"{defender.name} -> {attacker.name}", result.retaliation))
    lines.append(format_stack(defender, registry.effective_stats(defender).health))
    if result.retaliation is not None:
        lines.append(format_stack(attacker, registry.effective_stats(attacker).health))
    for line in lines:
        print(line)
    return 0
