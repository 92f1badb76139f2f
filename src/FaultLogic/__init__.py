from .pauli import Pauli, GateKind
from .core.random_source import RandomSource
from .core.controller import FaultController, FaultState
from .core.target_selector import TargetSelector
from .core.error_model import ErrorModel, SimplePauliError, CompoundError, build_error_model
from .core.control_channel import ControlChannel, ControlMessage
from .core.events import GateCall, ErrorEvent
from .core.physical_qubit import PhysicalQubit
from .gates.interceptor import GateInterceptor
from .engines.base import GateEngine
from .engines.recording import RecordingEngine
from .engines.pauli_frame import PauliFrameEngine, propagated_fault
from .engines.stim_engine import StimEngine
from .config import FaultConfig, load_config, preset
from .simulator import FaultySimulator

__all__ = [
	"Pauli",
	"GateKind",
	"RandomSource",
	"FaultController",
	"FaultState",
	"TargetSelector",
	"ErrorModel",
	"SimplePauliError",
	"CompoundError",
	"build_error_model",
	"ControlChannel",
	"ControlMessage",
	"GateCall",
	"ErrorEvent",
	"PhysicalQubit",
	"GateInterceptor",
	"GateEngine",
	"RecordingEngine",
	"PauliFrameEngine",
	"StimEngine",
	"propagated_fault",
	"FaultConfig",
	"load_config",
	"preset",
	"FaultySimulator",
]
