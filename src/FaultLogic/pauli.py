"""Single-qubit Pauli labels used by the fault layer.

Faults are discrete Pauli operators. We only ever need them up to global
phase, so each Pauli is encoded as two parity bits ``(x_bit, z_bit)``:

    I -> (0,0)
    X -> (1,0)
    Z -> (0,1)
    Y -> (1,1)

Composition is then a bitwise XOR and Hadamard conjugation swaps the bits.

Examples:
    >>> from src.FaultLogic import Pauli
    >>> Pauli.X.compose(Pauli.Z)
    Y
    >>> Pauli.X.conjugate_by_h()
    Z
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple, Union


class Pauli(Enum):
    I = 0
    Z = 1
    X = 2
    Y = 3

    # --- Public API -----------------------------------------------------
    @classmethod
    def from_bits(cls, x_bit: int, z_bit: int) -> "Pauli":
        """Inverse of :attr:`bits`."""
        match (x_bit & 1, z_bit & 1):
            case (0, 0):
                return cls.I
            case (1, 0):
                return cls.X
            case (0, 1):
                return cls.Z
            case (1, 1):
                return cls.Y
        raise ValueError(f"Invalid bits {(x_bit, z_bit)} for Pauli decode.")

    @classmethod
    def parse(cls, label: Union[str, "Pauli"]) -> "Pauli":
        """Accept a ``Pauli`` or one of the labels 'I','X','Y','Z' (any case)."""
        if isinstance(label, Pauli):
            return label
        if not isinstance(label, str):
            raise TypeError("Pauli.parse expects str or Pauli enum.")
        try:
            return cls[label.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid Pauli label '{label}'. Expected one of I, X, Y, Z.") from None

    @property
    def bits(self) -> Tuple[int, int]:
        """Parity-bit encoding ``(x_bit, z_bit)``."""
        match self:
            case Pauli.I:
                return 0, 0
            case Pauli.X:
                return 1, 0
            case Pauli.Z:
                return 0, 1
            case Pauli.Y:
                return 1, 1
        raise ValueError(f"Unhandled Pauli {self!r}")

    def compose(self, other: "Pauli") -> "Pauli":
        """Product of two Paulis with the global phase dropped."""
        x1, z1 = self.bits
        x2, z2 = other.bits
        return Pauli.from_bits(x1 ^ x2, z1 ^ z2)

    def conjugate_by_h(self) -> "Pauli":
        """H P H: X <-> Z, Y -> -Y (phase ignored)."""
        x_bit, z_bit = self.bits
        return Pauli.from_bits(z_bit, x_bit)

    def commutes_with(self, other: "Pauli") -> bool:
        """Identity commutes with everything; distinct non-identity Paulis anticommute."""
        if self == Pauli.I or other == Pauli.I:
            return True
        return self == other

    # --- Representation --------------------------------------------------
    def __repr__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


class GateKind(Enum):
    """The gate kinds the fault layer intercepts."""

    H = "H"
    X = "X"
    Z = "Z"

    def __str__(self) -> str:
        return self.value
