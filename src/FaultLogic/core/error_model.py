"""
error_model.py
==============
Defines the fault applied to a chosen qubit once the controller fires.

Responsibilities
----------------
• Pick a random single-qubit Pauli error (X bit-flip or Z phase-flip, 50/50).
• Optionally precede it with a Hadamard: the "compound" fault also changes
  basis and is harder for a code to correct.
• Request the operations from the *raw* host engine. Going through the
  intercepted gates instead would re-enter the fault layer.

Core API
--------
class SimplePauliError:
    .apply(engine, qubit) -> Pauli
class CompoundError:
    .apply(engine, qubit) -> Pauli      # H, then X or Z
def build_error_model(name, rng) -> ErrorModel

Both variants consume exactly one uniform draw per application; the H step is
deterministic.

Used By
-------
• `gates/interceptor.py`
• `simulator.py` (selected from `FaultConfig.error_model`)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Type

from ..pauli import Pauli
from .random_source import RandomSource

if TYPE_CHECKING:  # pragma: no cover
    from ..engines.base import GateEngine


class ErrorModel(ABC):
    """Base class: shared 50/50 X/Z choice, subclasses decide what precedes it."""

    name: str = ""
    compound: bool = False

    def __init__(self, rng: RandomSource) -> None:
        self.rng = rng

    @abstractmethod
    def apply(self, engine: "GateEngine", qubit: Any) -> Pauli: ...

    def _apply_random_pauli(self, engine: "GateEngine", qubit: Any) -> Pauli:
        if self.rng.uniform() < 0.5:
            engine.x(qubit)
            return Pauli.X
        engine.z(qubit)
        return Pauli.Z

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SimplePauliError(ErrorModel):
    """Bit-flip or phase-flip with equal probability."""

    name = "simple"
    compound = False

    def apply(self, engine: "GateEngine", qubit: Any) -> Pauli:
        return self._apply_random_pauli(engine, qubit)


class CompoundError(ErrorModel):
    """Hadamard followed by a random X or Z on the same qubit."""

    name = "compound"
    compound = True

    def apply(self, engine: "GateEngine", qubit: Any) -> Pauli:
        engine.h(qubit)
        return self._apply_random_pauli(engine, qubit)


ERROR_MODELS: Dict[str, Type[ErrorModel]] = {
    SimplePauliError.name: SimplePauliError,
    CompoundError.name: CompoundError,
}


def build_error_model(name: str, rng: RandomSource) -> ErrorModel:
    """Instantiate the error model registered under ``name``."""
    try:
        cls = ERROR_MODELS[name]
    except KeyError:
        raise ValueError(f"Unknown error model '{name}'. Available: {sorted(ERROR_MODELS)}") from None
    return cls(rng)


__all__ = ["ErrorModel", "SimplePauliError", "CompoundError", "ERROR_MODELS", "build_error_model"]
