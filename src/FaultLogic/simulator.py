"""simulator.py
============
Provides :class:`FaultySimulator`, one fault-injection session over a host
engine.

Responsibilities
----------------
• Own the per-session state: :class:`RandomSource`, :class:`FaultController`,
  error model, target selector and control channel.
• Expose H, X, Z and their controlled forms with the host engine's
  signatures, each wrapped by a :class:`GateInterceptor` for its kind.
• Route string messages through the control channel so ``"FaultyEnabled"``
  / ``"FaultyDisabled"`` toggle injection and everything else reaches the
  host engine.
• Keep a session log of every :class:`ErrorEvent` and notify listeners.

Core API
--------
class FaultySimulator(engine, config=None, rng=None):
    .h(q) / .x(q) / .z(q)
    .controlled_h(controls, q) / .controlled_x(...) / .controlled_z(...)
    .message(msg)
    .enable() / .disable()
    .add_listener(callback)
    .error_events -> list[ErrorEvent]

Sessions must not be shared between concurrently running circuits; build one
per trial. The same ``rng`` may only be passed to sessions that run one after
another, never to sessions running at the same time.

Example
-------
    >>> sim = FaultySimulator(StimEngine(), FaultConfig(probability=1.0))
    >>> sim.message("FaultyEnabled")
    >>> sim.h(0)              # one X or Z on qubit 0, then H
    >>> sim.error_events[0].pauli
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .config import FaultConfig
from .core.control_channel import DISABLE_MESSAGE, ENABLE_MESSAGE, ControlChannel, ControlMessage
from .core.controller import FaultController, FaultState
from .core.error_model import ErrorModel, build_error_model
from .core.events import ErrorEvent, ErrorListener
from .core.random_source import RandomSource
from .core.target_selector import TargetSelector
from .engines.base import GateEngine
from .gates.interceptor import GateInterceptor
from .pauli import GateKind


class FaultySimulator:
    """Decorates a :class:`GateEngine` with at-most-one-fault-per-run injection.

    Parameters
    ----------
    engine : GateEngine
        The host engine; its primitives perform the real gates and the
        injected Paulis.
    config : FaultConfig | None
        Defaults to ``FaultConfig()``.
    rng : RandomSource | None
        Explicit random source. When omitted one is created from
        ``config.seed``. Only share one between sessions run back to back.
    """

    def __init__(self, engine: GateEngine, config: Optional[FaultConfig] = None, rng: Optional[RandomSource] = None) -> None:
        self.engine = engine
        self.config = config if config is not None else FaultConfig()
        self.rng = rng if rng is not None else RandomSource(self.config.seed)
        self.controller = FaultController(self.rng)
        self.selector = TargetSelector(self.rng)
        self.error_model: ErrorModel = build_error_model(self.config.error_model, self.rng)
        self.channel = ControlChannel(self.controller, engine.message)
        self.error_events: List[ErrorEvent] = []
        self._listeners: List[ErrorListener] = [self.error_events.append]

        self.interceptors: Dict[GateKind, GateInterceptor] = {
            kind: GateInterceptor(
                kind,
                self.controller,
                self.selector,
                self.error_model,
                engine,
                self.config.probability,
                listeners=self._listeners,
            )
            for kind in GateKind
        }

        self.h = self._wrap(GateKind.H, engine.h)
        self.x = self._wrap(GateKind.X, engine.x)
        self.z = self._wrap(GateKind.Z, engine.z)
        self.controlled_h = self._wrap_controlled(GateKind.H, engine.controlled_h)
        self.controlled_x = self._wrap_controlled(GateKind.X, engine.controlled_x)
        self.controlled_z = self._wrap_controlled(GateKind.Z, engine.controlled_z)

    def _wrap(self, kind: GateKind, real_gate):
        return self.interceptors[kind].wrap(real_gate)

    def _wrap_controlled(self, kind: GateKind, real_gate):
        if not self.config.intercept_controlled:
            return real_gate
        return self.interceptors[kind].wrap_controlled(real_gate)

    # ------------------------------------------------------------------
    # Control surface
    # ------------------------------------------------------------------
    def message(self, msg: str) -> ControlMessage:
        """Deliver a host message; control messages toggle injection."""
        return self.channel.deliver(msg)

    def enable(self) -> None:
        self.message(ENABLE_MESSAGE)

    def disable(self) -> None:
        self.message(DISABLE_MESSAGE)

    @property
    def state(self) -> FaultState:
        return self.controller.state

    # ------------------------------------------------------------------
    # Observability
    # ------------------------------------------------------------------
    def add_listener(self, listener: ErrorListener) -> None:
        """Call ``listener(event)`` for every fault injected from now on."""
        self._listeners.append(listener)

    def remove_listener(self, listener: ErrorListener) -> None:
        self._listeners.remove(listener)

    @property
    def fault_count(self) -> int:
        return len(self.error_events)

    def apply_gates(self, ops: Sequence[tuple]) -> None:
        """Run ``(name, *args)`` tuples, e.g. ``("h", q)`` or ``("controlled_x", [c], t)``."""
        for name, *args in ops:
            getattr(self, name)(*args)

    def __getattr__(self, name: str) -> Any:
        # Anything the fault layer does not intercept goes to the host engine.
        engine = self.__dict__.get("engine")
        if engine is None:
            raise AttributeError(name)
        return getattr(engine, name)

    def __repr__(self) -> str:
        return f"FaultySimulator(engine={type(self.engine).__name__}, config={self.config}, state={self.state})"


__all__ = ["FaultySimulator"]
