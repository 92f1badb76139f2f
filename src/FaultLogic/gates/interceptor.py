"""
interceptor.py
==============
Decorates host-engine gate primitives with single-shot fault injection.

Responsibilities
----------------
• Keep the external behavior of each gate exactly as the host implements it.
• Before delegating, ask the session's :class:`FaultController` whether a
  fault fires; if so pick the fault site and apply the error model to it.
• Guarantee ordering: the injected error always precedes the real gate.

Example
-------
    hook = GateInterceptor(GateKind.X, controller, selector, model, engine, probability=0.05)
    x = hook.wrap(engine.x)
    cx = hook.wrap_controlled(engine.controlled_x)
    x(q)                # maybe fault on q, then X(q)
    cx([c1, c2], t)     # maybe fault on one of c1, c2, t, then CCX

Failures of the real gate (invalid or released qubit, unsupported form, ...)
belong to the host engine and propagate unchanged; nothing here catches them.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence
import functools
import logging

from ..core.controller import FaultController
from ..core.error_model import ErrorModel
from ..core.events import ErrorEvent, ErrorListener, GateCall
from ..core.target_selector import TargetSelector
from ..engines.base import GateEngine
from ..pauli import GateKind

logger = logging.getLogger(__name__)

__all__ = ["GateInterceptor"]

SingleQubitGate = Callable[[Any], Any]
ControlledGate = Callable[[Sequence[Any], Any], Any]


class GateInterceptor:
    """Fault-injecting decorator for one gate kind (H, X or Z).

    Parameters
    ----------
    kind : GateKind
        Gate kind being wrapped; recorded on every :class:`ErrorEvent`.
    controller : FaultController
        Shared by all interceptors of a session.
    selector : TargetSelector
        Picks the fault site for controlled calls.
    error_model : ErrorModel
        Simple or compound fault.
    engine : GateEngine
        Raw host engine the error model acts on.
    probability : float
        Per-call firing probability while armed.
    listeners : list of callables, optional
        Receive each :class:`ErrorEvent`. The list is held by reference so a
        session can register listeners after construction.
    """

    def __init__(
        self,
        kind: GateKind,
        controller: FaultController,
        selector: TargetSelector,
        error_model: ErrorModel,
        engine: GateEngine,
        probability: float,
        listeners: Optional[List[ErrorListener]] = None,
    ) -> None:
        self.kind = kind
        self.controller = controller
        self.selector = selector
        self.error_model = error_model
        self.engine = engine
        self.probability = probability
        self.listeners: List[ErrorListener] = listeners if listeners is not None else []

    # ------------------------------------------------------------------
    # Decoration
    # ------------------------------------------------------------------
    def wrap(self, real_gate: SingleQubitGate) -> SingleQubitGate:
        """Return ``real_gate`` preceded by a possible fault on its qubit."""

        @functools.wraps(real_gate)
        def gate(qubit: Any) -> Any:
            if self.controller.maybe_fire(self.probability):
                self._inject(qubit, GateCall(self.kind, qubit))
            return real_gate(qubit)

        return gate

    def wrap_controlled(self, real_gate: ControlledGate) -> ControlledGate:
        """Return ``real_gate`` preceded by a possible fault on one of its qubits."""

        @functools.wraps(real_gate)
        def controlled_gate(controls: Sequence[Any], target: Any) -> Any:
            controls = tuple(controls)
            if self.controller.maybe_fire(self.probability):
                call = GateCall(self.kind, target, controls, controlled=True)
                site = self.selector.select(target, controls)
                self._inject(site, call)
            return real_gate(controls, target)

        return controlled_gate

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _inject(self, qubit: Any, call: GateCall) -> ErrorEvent:
        pauli = self.error_model.apply(self.engine, qubit)
        event = ErrorEvent(qubit=qubit, pauli=pauli, compound=self.error_model.compound, call=call)
        logger.debug("Injected %s", event)
        for listener in tuple(self.listeners):
            listener(event)
        return event

    def __repr__(self) -> str:
        return f"GateInterceptor(kind={self.kind}, p={self.probability}, model={self.error_model!r})"
