"""
config.py
=========
Construction-time parameters of a fault-injection session.

Fault probability and the error-model choice are fixed when a session is
built; the only runtime switch is the enable/disable control message.

Two presets mirror the simulator variants the layer was written for:

    verification   simple X/Z fault, plain gates only
    exploration    compound H+X/Z fault, controlled gates intercepted too

YAML files may hold the parameters either at the top level or under a
``fault:`` section:

    fault:
      probability: 0.05
      error_model: compound
      intercept_controlled: true
      seed: 7
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Literal, Mapping, Optional
import os

import yaml

from .core.error_model import ERROR_MODELS

ErrorModelName = Literal["simple", "compound"]

DEFAULT_PROBABILITY = 0.05


@dataclass(frozen=True, slots=True)
class FaultConfig:
    """Parameters of one :class:`~src.FaultLogic.simulator.FaultySimulator`.

    Attributes
    ----------
    probability : float
        Chance that an armed gate call fires the fault. Must lie in [0,1].
    error_model : {"simple", "compound"}
        Which fault to apply at the chosen site.
    intercept_controlled : bool
        Whether controlled gate forms can carry the fault as well.
    seed : int | None
        Seed for the session's :class:`RandomSource`.
    """

    probability: float = DEFAULT_PROBABILITY
    error_model: ErrorModelName = "simple"
    intercept_controlled: bool = True
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if not (0.0 <= self.probability <= 1.0):
            raise ValueError("probability must be in [0,1].")
        if self.error_model not in ERROR_MODELS:
            raise ValueError(f"Unknown error model '{self.error_model}'. Available: {sorted(ERROR_MODELS)}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FaultConfig":
        """Build from a flat mapping or one with a ``fault`` section; unknown keys are ignored."""
        section = data.get("fault", data)
        if not isinstance(section, Mapping):
            raise ValueError("'fault' section must be a mapping.")
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in section.items() if k in known})

    def with_overrides(self, **kwargs: Any) -> "FaultConfig":
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


PRESETS: Dict[str, FaultConfig] = {
    "verification": FaultConfig(error_model="simple", intercept_controlled=False),
    "exploration": FaultConfig(error_model="compound", intercept_controlled=True),
}


def preset(name: str, **overrides: Any) -> FaultConfig:
    """Return a named preset, optionally with fields replaced."""
    if name not in PRESETS:
        raise ValueError(f"Unknown preset '{name}'. Available: {sorted(PRESETS)}")
    return PRESETS[name].with_overrides(**overrides) if overrides else PRESETS[name]


def load_config(path: str | os.PathLike) -> FaultConfig:
    """Read a :class:`FaultConfig` from a YAML file."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping/dict: {path}")
    return FaultConfig.from_dict(data)


__all__ = ["FaultConfig", "PRESETS", "preset", "load_config", "DEFAULT_PROBABILITY"]
