"""Repository exports."""

from .classes_repo import ClassRegistry, parse_legacy_luck_and_leadership

__all__ = [
    "ClassRegistry",
    "parse_legacy_luck_and_leadership",
]
