"""random_source.py
================
Seedable uniform random numbers for one simulator session.

Every stochastic decision of the fault layer (whether a fault fires, where it
lands, which Pauli it is) is drawn from one :class:`RandomSource`. Keeping the
generator an explicit object rather than module-level ``random`` state makes
runs reproducible per session: two sessions seeded alike see identical draws.

Core API
--------
class RandomSource(seed: int | None = None):
    .uniform() -> float            # in [0, 1)
    .integer(upper: int) -> int    # in [0, upper] inclusive
"""

from __future__ import annotations

from typing import Optional
import random


class RandomSource:
    """Thin wrapper around :class:`random.Random` with the two draws we need."""

    __slots__ = ("_seed", "_rng")

    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def uniform(self) -> float:
        """Float uniformly distributed in [0, 1)."""
        return self._rng.random()

    def integer(self, upper: int) -> int:
        """Integer uniformly distributed in [0, upper], both ends included."""
        if upper < 0:
            raise ValueError("upper must be >= 0.")
        return self._rng.randint(0, upper)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed})"


__all__ = ["RandomSource"]
