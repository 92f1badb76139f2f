"""
stim_engine.py
==============
Host engine backed by ``stim.TableauSimulator``.

Qubits are integer indices; stim grows the register on first use. The
tableau simulator is Clifford-only, so the controlled forms it can execute
are CX and CZ with exactly one control. An empty control list is the plain
gate. Anything else (controlled-H, multiple controls) raises
``NotImplementedError`` as an engine-defined error.
"""

from __future__ import annotations

from typing import Optional, Sequence

import stim

from .base import GateEngine


class StimEngine(GateEngine):
    """Adapter exposing a stim tableau simulator through :class:`GateEngine`.

    Parameters
    ----------
    num_qubits : int
        Qubits to pre-allocate; more are added on demand.
    seed : int | None
        Seed for stim's measurement randomness (independent of the fault
        layer's :class:`RandomSource`).
    """

    def __init__(self, num_qubits: int = 0, seed: Optional[int] = None) -> None:
        self.sim = stim.TableauSimulator(seed=seed) if seed is not None else stim.TableauSimulator()
        if num_qubits:
            self.sim.set_num_qubits(num_qubits)

    # ------------------------------------------------------------------
    # Plain gates
    # ------------------------------------------------------------------
    def h(self, qubit: int) -> None:
        self.sim.h(qubit)

    def x(self, qubit: int) -> None:
        self.sim.x(qubit)

    def z(self, qubit: int) -> None:
        self.sim.z(qubit)

    # ------------------------------------------------------------------
    # Controlled gates
    # ------------------------------------------------------------------
    def controlled_h(self, controls: Sequence[int], target: int) -> None:
        if not controls:
            self.sim.h(target)
            return
        raise NotImplementedError("StimEngine cannot apply controlled-H (not a Clifford gate).")

    def controlled_x(self, controls: Sequence[int], target: int) -> None:
        match len(controls):
            case 0:
                self.sim.x(target)
            case 1:
                self.sim.cx(controls[0], target)
            case _:
                raise NotImplementedError("StimEngine only supports controlled-X with a single control.")

    def controlled_z(self, controls: Sequence[int], target: int) -> None:
        match len(controls):
            case 0:
                self.sim.z(target)
            case 1:
                self.sim.cz(controls[0], target)
            case _:
                raise NotImplementedError("StimEngine only supports controlled-Z with a single control.")

    # ------------------------------------------------------------------
    # Inspection helpers (not part of GateEngine)
    # ------------------------------------------------------------------
    def peek_x(self, qubit: int) -> int:
        """+1 / -1 if the qubit is in an X eigenstate, 0 otherwise."""
        return self.sim.peek_x(qubit)

    def peek_z(self, qubit: int) -> int:
        """+1 / -1 if the qubit is in a Z eigenstate, 0 otherwise."""
        return self.sim.peek_z(qubit)

    def measure(self, qubit: int) -> bool:
        return self.sim.measure(qubit)

    @property
    def num_qubits(self) -> int:
        return self.sim.num_qubits


__all__ = ["StimEngine"]
