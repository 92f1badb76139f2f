import pytest

from src.FaultLogic import CompoundError, ErrorModel, Pauli, RecordingEngine, SimplePauliError, build_error_model

from helpers import CountingSource, ScriptedSource


def test_simple_pauli_choice():
    engine = RecordingEngine()
    model = SimplePauliError(ScriptedSource(uniforms=[0.25, 0.75, 0.5]))
    assert model.apply(engine, 7) == Pauli.X
    assert model.apply(engine, 7) == Pauli.Z
    assert model.apply(engine, 7) == Pauli.Z  # 0.5 is not < 0.5
    assert engine.names == ["X", "Z", "Z"]


def test_compound_applies_h_first():
    engine = RecordingEngine()
    model = CompoundError(ScriptedSource(uniforms=[0.1]))
    assert model.apply(engine, "q") == Pauli.X
    assert [str(op) for op in engine.operations] == ["H q", "X q"]
    assert model.compound


@pytest.mark.parametrize("cls", [SimplePauliError, CompoundError])
def test_one_draw_per_application(cls):
    rng = CountingSource(9)
    model = cls(rng)
    for _ in range(5):
        model.apply(RecordingEngine(), 0)
    assert rng.uniform_calls == 5
    assert rng.integer_calls == 0


def test_build_error_model():
    rng = CountingSource(0)
    assert isinstance(build_error_model("simple", rng), SimplePauliError)
    assert isinstance(build_error_model("compound", rng), CompoundError)
    with pytest.raises(ValueError, match="Available"):
        build_error_model("depolarizing", rng)


def test_error_model_base_is_abstract():
    with pytest.raises(TypeError):
        ErrorModel(CountingSource(0))
