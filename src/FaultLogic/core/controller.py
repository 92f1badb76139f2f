"""controller.py
=============
Enable/disable state machine deciding whether a fault fires on a gate call.

State Machine
-------------
A session starts with ``enabled=False, fired=False``.

    set_enabled(True)   -> enabled=True,  fired=False   (re-arm)
    set_enabled(False)  -> enabled=False, fired kept
    maybe_fire(p)       -> True at most once per arming

Disabling only pauses injection: the "already fired" memory survives until the
next enable. A run that fired, was disabled and re-enabled gets a fresh fault.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from .random_source import RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FaultState:
    """Snapshot of the controller flags."""

    enabled: bool = False
    fired: bool = False


class FaultController:
    """Answers "should an error fire now?" for one session.

    Parameters
    ----------
    rng : RandomSource
        Shared with the rest of the session. One uniform draw is consumed per
        :meth:`maybe_fire` call while the controller is armed, whether or not
        the fault ends up firing.
    """

    __slots__ = ("_rng", "_enabled", "_fired")

    def __init__(self, rng: RandomSource) -> None:
        self._rng = rng
        self._enabled = False
        self._fired = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def armed(self) -> bool:
        """True iff a future :meth:`maybe_fire` can still return True."""
        return self._enabled and not self._fired

    @property
    def state(self) -> FaultState:
        return FaultState(enabled=self._enabled, fired=self._fired)

    def set_enabled(self, enabled: bool) -> None:
        if enabled:
            self._enabled = True
            self._fired = False
            logger.info("Fault injection enabled (armed)")
        else:
            self._enabled = False
            logger.info("Fault injection disabled (fired=%s)", self._fired)

    def maybe_fire(self, probability: float) -> bool:
        """Bernoulli trial with success ``probability``; fires at most once per arming."""
        if not self.armed:
            return False
        if self._rng.uniform() < probability:
            self._fired = True
            return True
        return False

    def __repr__(self) -> str:
        return f"FaultController(enabled={self._enabled}, fired={self._fired})"


__all__ = ["FaultState", "FaultController"]
