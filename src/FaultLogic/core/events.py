"""Value objects describing an intercepted gate call and an injected fault."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from ..pauli import GateKind, Pauli


@dataclass(frozen=True, slots=True)
class GateCall:
    """One intercepted invocation. ``controls`` is empty for the plain form."""

    kind: GateKind
    target: Any
    controls: Tuple[Any, ...] = ()
    controlled: bool = False

    @property
    def form(self) -> str:
        return "controlled" if self.controlled else "plain"

    @property
    def qubits(self) -> Tuple[Any, ...]:
        """Controls in order, then the target."""
        return (*self.controls, self.target)

    def __str__(self) -> str:
        if not self.controlled:
            return f"{self.kind}({self.target!r})"
        return f"C{self.kind}({list(self.controls)!r}, {self.target!r})"


@dataclass(frozen=True, slots=True)
class ErrorEvent:
    """A Pauli ``pauli`` was applied to ``qubit`` by fault injection.

    ``compound`` marks the variant where an H preceded the Pauli. ``call`` is
    the gate call during which the fault fired (None when the error model was
    driven directly).
    """

    qubit: Any
    pauli: Pauli
    compound: bool = False
    call: Optional[GateCall] = None

    def __str__(self) -> str:
        prefix = "H;" if self.compound else ""
        where = f" during {self.call}" if self.call is not None else ""
        return f"fault {prefix}{self.pauli} on {self.qubit!r}{where}"


ErrorListener = Callable[[ErrorEvent], None]

__all__ = ["GateCall", "ErrorEvent", "ErrorListener"]
