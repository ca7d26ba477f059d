"""RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random


class RNG:
    """Wrapper around random.Random; pass a seed for reproducible draws."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()


_shared_rng: RNG | None = None


def shared_rng() -> RNG:
    """Return the process-wide unseeded RNG."""
    global _shared_rng
    if _shared_rng is None:
        _shared_rng = RNG()
    return _shared_rng
