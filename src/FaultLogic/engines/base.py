"""Gate-application capability the fault layer expects from a host engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence
import logging

logger = logging.getLogger(__name__)


class GateEngine(ABC):
    """Abstract host engine.

    Qubit handles are owned by the engine; the fault layer only passes them
    back. Controlled forms take an ordered sequence of control qubits and one
    target. Engines raise their own errors for invalid qubits or unsupported
    gate forms.
    """

    @abstractmethod
    def h(self, qubit: Any) -> None: ...

    @abstractmethod
    def x(self, qubit: Any) -> None: ...

    @abstractmethod
    def z(self, qubit: Any) -> None: ...

    @abstractmethod
    def controlled_h(self, controls: Sequence[Any], target: Any) -> None: ...

    @abstractmethod
    def controlled_x(self, controls: Sequence[Any], target: Any) -> None: ...

    @abstractmethod
    def controlled_z(self, controls: Sequence[Any], target: Any) -> None: ...

    def message(self, msg: str) -> None:
        """General-purpose message handling: log it."""
        logger.info("%s", msg)


__all__ = ["GateEngine"]
