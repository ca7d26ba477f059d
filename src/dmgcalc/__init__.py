"""Damage calculator for stack-based tactical battles."""

__version__ = "0.1.0"
