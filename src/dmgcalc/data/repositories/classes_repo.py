"""Class registry rebuilt wholesale from a JSON class table."""
from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Tuple

from dmgcalc.data.errors import DataValidationError, UnknownClassError
from dmgcalc.data.json_loader import parse_json, read_text
from dmgcalc.domain.entities import Stats, Unit

logger = logging.getLogger(__name__)

LUCK_MARKER = "Удача:"
LEADERSHIP_MARKER = "Лидерство:"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def parse_legacy_luck_and_leadership(description: str) -> Tuple[int | None, int | None]:
    """Read luck and leadership embedded in an old-style description.

    Each value follows its marker and runs up to the next comma, e.g.
    ``"Удача: 12, Лидерство: 3,"``. A value that is absent or not an
    integer comes back as None.
    """
    return (
        _parse_marked_int(description, LUCK_MARKER),
        _parse_marked_int(description, LEADERSHIP_MARKER),
    )


def _parse_marked_int(description: str, marker: str) -> int | None:
    start = description.find(marker)
    if start < 0:
        return None
    start += len(marker)
    end = description.find(",", start)
    if end < 0:
        return None
    candidate = description[start:end].strip()
    if not _INT_PATTERN.fullmatch(candidate):
        return None
    value = int(candidate)
    if not _I32_MIN <= value <= _I32_MAX:
        return None
    return value


class ClassRegistry:
    """Maps class names to base stats; replaced atomically on each import."""

    def __init__(self) -> None:
        self._classes: Dict[str, Stats] = {}
        self.last_error_count = -1
        self.source_text = ""

    # -----------------------
    # Import
    # -----------------------
    def import_json(self, raw: str | bytes | Mapping[str, object]) -> int:
        """Replace the registry from a JSON class table.

        Returns the number of skipped entries, or -1 when the payload is not a
        JSON object at all (the registry is left untouched in that case).
        """
        if isinstance(raw, Mapping):
            payload: object = raw
            text = None
        else:
            try:
                payload = parse_json(raw)
            except DataValidationError as exc:
                logger.warning("Class table rejected: %s", exc)
                self.last_error_count = -1
                return -1
            text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw

        if not isinstance(payload, Mapping):
            logger.warning("Class table rejected: expected a top-level object, got %s", type(payload).__name__)
            self.last_error_count = -1
            return -1

        classes, errors = self._build(payload)
        self._classes = classes
        if text is not None:
            self.source_text = text
        self.last_error_count = errors
        logger.info("Loaded %d classes (%d skipped)", len(classes), errors)
        return errors

    def import_file(self, path: Path | str) -> int:
        """Replace the registry from a JSON file; unreadable files raise DataLoadError."""
        return self.import_json(read_text(Path(path)))

    def _build(self, payload: Mapping[str, object]) -> Tuple[Dict[str, Stats], int]:
        classes: Dict[str, Stats] = {}
        errors = 0
        for raw_name, entry in payload.items():
            try:
                classes[str(raw_name)] = self._parse_stats(entry, f"class '{raw_name}'")
            except DataValidationError as exc:
                logger.warning("Skipping %s", exc)
                errors += 1
        return classes, errors

    @classmethod
    def _parse_stats(cls, entry: object, context: str) -> Stats:
        if not isinstance(entry, Mapping):
            raise DataValidationError(f"{context}: entry must be an object/dict.")
        description = entry.get("description")
        if not isinstance(description, str):
            raise DataValidationError(f"{context}: description must be a string.")
        attack = cls._require_int(entry, "attack", context)
        min_dmg = cls._require_int(entry, "min_dmg", context)
        max_dmg = cls._require_int(entry, "max_dmg", context)
        defense = cls._require_int(entry, "defence", context)
        health = cls._require_int(entry, "health", context)

        luck = cls._optional_int(entry, "luck")
        leadership = cls._optional_int(entry, "leadership")
        if luck is None or leadership is None:
            legacy_luck, legacy_leadership = parse_legacy_luck_and_leadership(description)
            if luck is None:
                luck = legacy_luck or 0
            if leadership is None:
                leadership = legacy_leadership or 0

        return Stats(
            attack=attack,
            min_dmg=min_dmg,
            max_dmg=max_dmg,
            defense=defense,
            health=health,
            luck=luck,
            leadership=leadership,
            absorb=0,
            description=description,
        )

    @staticmethod
    def _require_int(entry: Mapping[str, object], key: str, context: str) -> int:
        if key not in entry:
            raise DataValidationError(f"{context}: missing field '{key}'.")
        value = entry[key]
        if isinstance(value, bool) or not isinstance(value, int):
            raise DataValidationError(f"{context}: {key} must be an integer.")
        return value

    @staticmethod
    def _optional_int(entry: Mapping[str, object], key: str) -> int | None:
        value = entry.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    # -----------------------
    # Lookup
    # -----------------------
    def lookup(self, name: str) -> Stats | None:
        """Return the base stats of a class, or None when it is unknown."""
        stats = self._classes.get(name)
        return replace(stats) if stats is not None else None

    def require(self, name: str) -> Stats:
        """Return the base stats of a class or raise UnknownClassError."""
        try:
            stats = self._classes[name]
        except KeyError as exc:
            raise UnknownClassError(name) from exc
        return replace(stats)

    def effective_stats(self, unit: Unit) -> Stats:
        """Return the unit's class stats with its personal modifiers applied."""
        return self.require(unit.name).combine(unit.stats)

    def names(self) -> List[str]:
        return sorted(self._classes)

    def all(self) -> List[Stats]:
        """Return all class stats sorted deterministically by class name."""
        return [replace(self._classes[name]) for name in sorted(self._classes)]

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def __len__(self) -> int:
        return len(self._classes)
