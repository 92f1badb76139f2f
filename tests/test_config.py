import pytest

from src.FaultLogic import FaultConfig, FaultySimulator, RecordingEngine, load_config, preset
from src.FaultLogic.config import PRESETS, DEFAULT_PROBABILITY
from src.FaultLogic.core.error_model import CompoundError, SimplePauliError


def test_defaults():
    cfg = FaultConfig()
    assert cfg.probability == DEFAULT_PROBABILITY == 0.05
    assert cfg.error_model == "simple"
    assert cfg.intercept_controlled
    assert cfg.seed is None


@pytest.mark.parametrize("p", [-0.1, 1.5])
def test_probability_validated(p):
    with pytest.raises(ValueError):
        FaultConfig(probability=p)


def test_unknown_error_model_rejected():
    with pytest.raises(ValueError, match="Unknown error model"):
        FaultConfig(error_model="amplitude_damping")


def test_from_dict_flat_and_nested():
    flat = FaultConfig.from_dict({"probability": 0.2, "error_model": "compound", "other": 1})
    nested = FaultConfig.from_dict({"fault": {"probability": 0.2, "error_model": "compound"}, "run": {"shots": 10}})
    assert flat == nested == FaultConfig(probability=0.2, error_model="compound")
    with pytest.raises(ValueError):
        FaultConfig.from_dict({"fault": [1, 2]})


def test_to_dict_round_trip():
    cfg = FaultConfig(probability=0.3, seed=4)
    assert FaultConfig.from_dict(cfg.to_dict()) == cfg


def test_presets():
    assert PRESETS["verification"].error_model == "simple"
    assert not PRESETS["verification"].intercept_controlled
    assert PRESETS["exploration"].error_model == "compound"
    assert preset("exploration", seed=3).seed == 3
    with pytest.raises(ValueError):
        preset("unknown")


def test_simulator_picks_configured_model():
    assert isinstance(FaultySimulator(RecordingEngine()).error_model, SimplePauliError)
    assert isinstance(FaultySimulator(RecordingEngine(), preset("exploration")).error_model, CompoundError)


def test_load_config(tmp_path):
    path = tmp_path / "fault.yaml"
    path.write_text("fault:\n  probability: 0.5\n  error_model: compound\n  seed: 7\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg == FaultConfig(probability=0.5, error_model="compound", seed=7)


def test_load_config_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")
    bad = tmp_path / "list.yaml"
    bad.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(bad)
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert load_config(empty) == FaultConfig()


@pytest.mark.parametrize("name", ["verification", "exploration"])
def test_shipped_configs_match_presets(name):
    from pathlib import Path

    path = Path(__file__).resolve().parent.parent / "configs" / f"{name}.yaml"
    assert load_config(path) == PRESETS[name]
