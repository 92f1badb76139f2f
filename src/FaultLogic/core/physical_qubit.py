"""physical_qubit.py
=================
Implements the :class:`PhysicalQubit` handle used by the Pauli-frame engine.

A physical qubit tracks the accumulated single-qubit Pauli operator
``{I, X, Y, Z}`` applied to it (up to global phase), after pushing it through
the Clifford gates that followed. The engine owns these handles; callers only
pass them back to gate primitives.

Design Principles
-----------------
• Represent the frame internally using two parity bits (x_bit, z_bit)
  so composition is a constant-time XOR.
• Compare by identity: two qubits with the same frame are still distinct
  handles.
• Ignore global phases (±1, ±i) because they do not affect stabilizer outcomes.

Public API (stable)
-------------------
class PhysicalQubit(label: str | None = None, keep_history: bool = False):
    .apply_pauli(pauli: str | Pauli) -> Pauli
        Compose a new Pauli onto the stored frame.
    .conjugate_h() -> Pauli
        Push the frame through a Hadamard (X <-> Z).
    .reset_error() -> None
        Clear the frame to identity.
    .current_error -> Pauli
    .has_error() -> bool
    .history -> list[Pauli]
        Chronological frame states (only if keep_history=True).
    .released -> bool
        Set by the engine once the qubit is returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from ..pauli import Pauli


@dataclass(slots=True, eq=False)
class PhysicalQubit:
    """A single simulated qubit tracking its Pauli frame.

    Parameters
    ----------
    label : str | None
        Optional human-readable identifier.
    keep_history : bool
        If True, record each new frame state after every update.
    """

    label: Optional[str] = None
    keep_history: bool = False
    released: bool = field(init=False, default=False)
    _x_bit: int = field(init=False, repr=False, default=0)
    _z_bit: int = field(init=False, repr=False, default=0)
    _history: List[Pauli] = field(init=False, repr=False, default_factory=list)

    # ------------------------------------------------------------------
    # Core state helpers
    # ------------------------------------------------------------------
    @property
    def current_error(self) -> Pauli:
        """Return current accumulated Pauli frame."""
        return Pauli.from_bits(self._x_bit, self._z_bit)

    def has_error(self) -> bool:
        """True iff current frame isn't identity."""
        return (self._x_bit | self._z_bit) != 0

    @property
    def history(self) -> List[Pauli]:  # read-only external view
        return list(self._history)

    # ------------------------------------------------------------------
    # Mutation operations
    # ------------------------------------------------------------------
    def _record(self) -> None:
        if self.keep_history:
            self._history.append(self.current_error)

    def reset_error(self) -> None:
        """Reset to the identity (clean) frame."""
        self._x_bit = 0
        self._z_bit = 0
        self._record()

    def apply_pauli(self, pauli: Union[str, Pauli]) -> Pauli:
        """Compose a Pauli onto this qubit; returns the updated frame."""
        x_new, z_new = Pauli.parse(pauli).bits
        # XOR composition (mod 2 addition)
        self._x_bit ^= x_new
        self._z_bit ^= z_new
        self._record()
        return self.current_error

    def conjugate_h(self) -> Pauli:
        """H conjugation on the frame: X <-> Z, Y -> -Y (phase ignored)."""
        self._x_bit, self._z_bit = self._z_bit, self._x_bit
        self._record()
        return self.current_error

    # ------------------------------------------------------------------
    # Utility / representation
    # ------------------------------------------------------------------
    def __repr__(self) -> str:  # for debugging
        lbl = f"[{self.label}]" if self.label else ""
        state = ", released" if self.released else ""
        return f"PhysicalQubit{lbl}(frame={self.current_error}{state})"

    def __str__(self) -> str:
        return self.label if self.label else self.__repr__()


__all__ = ["PhysicalQubit"]
