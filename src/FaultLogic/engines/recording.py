"""recording.py
============
A host engine that performs nothing and remembers everything.

Each primitive call is appended to :attr:`RecordingEngine.operations` as an
:class:`Operation` in call order, which makes it the operation-order log used
to check that an injected fault precedes the gate it was attached to. Messages
that reach the engine are kept in :attr:`RecordingEngine.messages`.

Operation names follow the usual circuit notation: ``H``, ``X``, ``Z`` for
plain gates and ``CH``, ``CX``, ``CZ`` for controlled ones, whose ``qubits``
list the controls first and the target last.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple

from .base import GateEngine


@dataclass(frozen=True, slots=True)
class Operation:
    name: str
    qubits: Tuple[Any, ...]

    def __str__(self) -> str:
        return f"{self.name} {' '.join(map(str, self.qubits))}"


class RecordingEngine(GateEngine):

    def __init__(self) -> None:
        self.operations: List[Operation] = []
        self.messages: List[str] = []

    def _record(self, name: str, *qubits: Any) -> None:
        self.operations.append(Operation(name, tuple(qubits)))

    def h(self, qubit: Any) -> None:
        self._record("H", qubit)

    def x(self, qubit: Any) -> None:
        self._record("X", qubit)

    def z(self, qubit: Any) -> None:
        self._record("Z", qubit)

    def controlled_h(self, controls: Sequence[Any], target: Any) -> None:
        self._record("CH", *controls, target)

    def controlled_x(self, controls: Sequence[Any], target: Any) -> None:
        self._record("CX", *controls, target)

    def controlled_z(self, controls: Sequence[Any], target: Any) -> None:
        self._record("CZ", *controls, target)

    def message(self, msg: str) -> None:
        self.messages.append(msg)

    @property
    def names(self) -> List[str]:
        """Just the operation names, in order."""
        return [op.name for op in self.operations]

    def clear(self) -> None:
        self.operations.clear()
        self.messages.clear()


__all__ = ["Operation", "RecordingEngine"]
