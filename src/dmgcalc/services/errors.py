"""Service-layer exceptions."""


class InvalidStatsError(ValueError):
    """Raised when effective stats cannot produce a valid strike."""


class BattleError(ValueError):
    """Raised when a team-level attack cannot be carried out."""
