"""
pauli_frame.py
==============
Host engine that tracks only the Pauli content of a Clifford circuit.

Every X or Z applied to a qubit is composed onto its :class:`PhysicalQubit`
frame, and frames are pushed through later Clifford gates:

    H        X <-> Z
    CX       X_c -> X_c X_t,  Z_t -> Z_c Z_t
    CZ       X_c -> X_c Z_t,  X_t -> Z_c X_t

Running a circuit once clean and once with fault injection and composing the
two final frames (:func:`propagated_fault`) leaves exactly where the injected
Pauli ended up. Compound faults add a Hadamard, which is not a Pauli, so the
comparison is only meaningful for the simple error model.

Qubits are allocated and released by the engine. Gates on a released qubit,
or on a qubit allocated by another engine, raise ``ValueError``. Controlled-H
and gates with more than one control are outside the Clifford frame model and
raise ``NotImplementedError``.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..core.physical_qubit import PhysicalQubit
from ..pauli import Pauli
from .base import GateEngine


class PauliFrameEngine(GateEngine):

    def __init__(self, keep_history: bool = False) -> None:
        self.keep_history = keep_history
        self.qubits: List[PhysicalQubit] = []

    # ------------------------------------------------------------------
    # Allocation
    # ------------------------------------------------------------------
    def allocate(self, label: Optional[str] = None) -> PhysicalQubit:
        q = PhysicalQubit(label=label if label is not None else f"q{len(self.qubits)}", keep_history=self.keep_history)
        self.qubits.append(q)
        return q

    def allocate_many(self, n: int) -> List[PhysicalQubit]:
        return [self.allocate() for _ in range(n)]

    def release(self, qubit: PhysicalQubit) -> None:
        self._check(qubit)
        qubit.released = True

    def _check(self, qubit: PhysicalQubit) -> None:
        if not any(qubit is q for q in self.qubits):
            raise ValueError(f"Qubit {qubit!r} was not allocated by this engine.")
        if qubit.released:
            raise ValueError(f"Qubit {qubit!r} has already been released.")

    # ------------------------------------------------------------------
    # Plain gates
    # ------------------------------------------------------------------
    def h(self, qubit: PhysicalQubit) -> None:
        self._check(qubit)
        qubit.conjugate_h()

    def x(self, qubit: PhysicalQubit) -> None:
        self._check(qubit)
        qubit.apply_pauli(Pauli.X)

    def z(self, qubit: PhysicalQubit) -> None:
        self._check(qubit)
        qubit.apply_pauli(Pauli.Z)

    # ------------------------------------------------------------------
    # Controlled gates
    # ------------------------------------------------------------------
    def controlled_h(self, controls: Sequence[PhysicalQubit], target: PhysicalQubit) -> None:
        if not controls:
            self.h(target)
            return
        raise NotImplementedError("Controlled-H does not map Paulis to Paulis; frame tracking unsupported.")

    def controlled_x(self, controls: Sequence[PhysicalQubit], target: PhysicalQubit) -> None:
        if not controls:
            self.x(target)
            return
        control = self._single_control(controls, "X")
        c_err, t_err = control.current_error, target.current_error
        if not c_err.commutes_with(Pauli.Z):
            target.apply_pauli(Pauli.X)
        if not t_err.commutes_with(Pauli.X):
            control.apply_pauli(Pauli.Z)

    def controlled_z(self, controls: Sequence[PhysicalQubit], target: PhysicalQubit) -> None:
        if not controls:
            self.z(target)
            return
        control = self._single_control(controls, "Z")
        c_err, t_err = control.current_error, target.current_error
        if not c_err.commutes_with(Pauli.Z):
            target.apply_pauli(Pauli.Z)
        if not t_err.commutes_with(Pauli.Z):
            control.apply_pauli(Pauli.Z)

    def _single_control(self, controls: Sequence[PhysicalQubit], gate: str) -> PhysicalQubit:
        if len(controls) != 1:
            raise NotImplementedError(f"Controlled-{gate} with {len(controls)} controls is not a Clifford gate.")
        return controls[0]

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    def frames(self) -> Dict[str, Pauli]:
        """Current frame per qubit label, in allocation order."""
        return {str(q): q.current_error for q in self.qubits}

    def corrupted(self) -> List[str]:
        """Labels of qubits whose frame is not the identity."""
        return [str(q) for q in self.qubits if q.has_error()]

    def reset(self) -> None:
        """Clear every frame so the same qubits can run the circuit again."""
        for q in self.qubits:
            q.reset_error()


def propagated_fault(clean: PauliFrameEngine, faulty: PauliFrameEngine) -> Dict[str, Pauli]:
    """Per-qubit Pauli separating a faulty run from its clean twin.

    Both engines must have allocated the same qubit labels. Qubits the fault
    never reached are omitted.
    """
    clean_frames = clean.frames()
    faulty_frames = faulty.frames()
    if clean_frames.keys() != faulty_frames.keys():
        raise ValueError("Clean and faulty runs allocated different qubits.")
    diff = {label: clean_frames[label].compose(faulty_frames[label]) for label in clean_frames}
    return {label: p for label, p in diff.items() if p != Pauli.I}


__all__ = ["PauliFrameEngine", "propagated_fault"]
