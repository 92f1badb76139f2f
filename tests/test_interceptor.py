import pytest

from src.FaultLogic import (
    FaultController,
    GateInterceptor,
    GateKind,
    RandomSource,
    RecordingEngine,
    SimplePauliError,
    TargetSelector,
)

from helpers import ScriptedSource


def _interceptor(kind=GateKind.H, probability=1.0, rng=None, enabled=True):
    rng = rng if rng is not None else RandomSource(11)
    engine = RecordingEngine()
    ctl = FaultController(rng)
    if enabled:
        ctl.set_enabled(True)
    events = []
    hook = GateInterceptor(kind, ctl, TargetSelector(rng), SimplePauliError(rng), engine, probability, listeners=[events.append])
    return hook, engine, events


def test_fault_precedes_plain_gate():
    hook, engine, events = _interceptor(GateKind.H)
    h = hook.wrap(engine.h)
    h("q")
    assert len(engine.operations) == 2
    fault, gate = engine.operations
    assert fault.name in ("X", "Z") and fault.qubits == ("q",)
    assert gate.name == "H" and gate.qubits == ("q",)
    assert events[0].pauli.name == fault.name
    assert events[0].call.form == "plain"


def test_fault_precedes_controlled_gate():
    # fire draw, site index 1 -> second control, Pauli draw 0.9 -> Z
    rng = ScriptedSource(uniforms=[0.0, 0.9], integers=[1])
    hook, engine, events = _interceptor(GateKind.X, rng=rng)
    cx = hook.wrap_controlled(engine.controlled_x)
    cx(["c1", "c2"], "t")
    assert [str(op) for op in engine.operations] == ["Z c2", "CX c1 c2 t"]
    (event,) = events
    assert event.qubit == "c2"
    assert event.call.controls == ("c1", "c2")
    assert event.call.qubits == ("c1", "c2", "t")
    assert event.call.form == "controlled"


def test_no_fault_when_disabled():
    hook, engine, events = _interceptor(GateKind.Z, enabled=False)
    z = hook.wrap(engine.z)
    cz = hook.wrap_controlled(engine.controlled_z)
    for _ in range(20):
        z(0)
        cz([1], 0)
    assert engine.names == ["Z", "CZ"] * 20
    assert events == []


def test_wrapped_gate_keeps_metadata():
    hook, engine, _ = _interceptor()
    assert hook.wrap(engine.h).__name__ == "h"
    assert hook.wrap_controlled(engine.controlled_h).__wrapped__ == engine.controlled_h


def test_real_gate_errors_propagate_unchanged():
    hook, engine, events = _interceptor(GateKind.X)
    boom = RuntimeError("qubit released")

    def broken_gate(qubit):
        raise boom

    x = hook.wrap(broken_gate)
    with pytest.raises(RuntimeError) as info:
        x("q")
    assert info.value is boom
    # The fault was still injected before the real gate failed.
    assert len(events) == 1
    assert engine.names in (["X"], ["Z"])


def test_return_value_passes_through():
    hook, _, _ = _interceptor(enabled=False)
    assert hook.wrap(lambda q: ("done", q))("q") == ("done", "q")
