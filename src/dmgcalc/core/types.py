"""Shared type aliases for the core and domain layers."""
from typing import Literal

StatField = Literal[
    "attack",
    "min_dmg",
    "max_dmg",
    "defense",
    "health",
    "luck",
    "leadership",
    "absorb",
]

__all__ = ["StatField"]
