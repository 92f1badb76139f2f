"""Uniform choice of the fault site for a (possibly controlled) gate call."""

from __future__ import annotations

from typing import Any, Sequence

from .random_source import RandomSource


class TargetSelector:
    """Pick one of the N controls or the target, each with probability 1/(N+1).

    A plain call (no controls) always lands on the target and consumes no
    random draw.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: RandomSource) -> None:
        self._rng = rng

    def select(self, target: Any, controls: Sequence[Any] = ()) -> Any:
        n = len(controls)
        if n == 0:
            return target
        idx = self._rng.integer(n)
        if idx == n:
            return target
        return controls[idx]


__all__ = ["TargetSelector"]
