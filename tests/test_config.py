import json

import pytest

from gravity.config import PRESETS, SimulationConfig, from_mapping, get_preset, load_config
from gravity.errors import ConfigurationError


def test_defaults_match_classic_setup():
    config = SimulationConfig().validate()
    assert config.gravitational_constant == 0.2
    assert config.body_count == 15
    assert config.position_range == (-280.0, 280.0)
    assert config.mass_range == (0.1, 100.0)
    assert config.timestep == 1.0
    assert config.center == (700, 700)


def test_presets():
    assert get_preset("classic") == SimulationConfig()
    dense = get_preset("dense")
    assert dense.gravitational_constant == 0.003
    assert dense.body_count == 90
    assert set(PRESETS) == {"classic", "dense"}
    with pytest.raises(ConfigurationError):
        get_preset("galaxy")


def test_explicit_view_center():
    assert SimulationConfig(view_center=(801, 801)).center == (801, 801)


@pytest.mark.parametrize("overrides", [
    {"body_count": 0},
    {"mass_range": (0.0, 10.0)},
    {"mass_range": (5.0, 1.0)},
    {"position_range": (10.0, -10.0)},
    {"min_distance": 0.0},
    {"timestep": -1.0},
    {"update_policy": "random"},
    {"recenter_mode": "sometimes"},
    {"view_width": 0},
    {"view_scale": 0.0},
    {"fps": 0},
    {"gravitational_constant": float("nan")},
])
def test_validate_rejects(overrides):
    with pytest.raises(ConfigurationError):
        SimulationConfig(**overrides).validate()


def test_with_overrides_ignores_none():
    base = SimulationConfig(seed=3)
    config = base.with_overrides(body_count=40, gravitational_constant=None, seed=None)
    assert config.body_count == 40
    assert config.gravitational_constant == base.gravitational_constant
    assert config.seed == 3


def test_from_mapping_coerces_types():
    config = from_mapping({"body_count": "20", "position_range": [-10, 10], "view_center": [5.0, 6.0]})
    assert config.body_count == 20
    assert config.position_range == (-10.0, 10.0)
    assert config.view_center == (5, 6)


def test_from_mapping_rejects_unknown_and_malformed():
    with pytest.raises(ConfigurationError):
        from_mapping({"bodies": 3})
    with pytest.raises(ConfigurationError):
        from_mapping({"mass_range": 5})
    with pytest.raises(ConfigurationError):
        from_mapping({"fps": "fast"})
    with pytest.raises(ConfigurationError):
        from_mapping({"frame_pacing": "false"})
    with pytest.raises(ConfigurationError):
        from_mapping({"frame_pacing": 0})


@pytest.mark.parametrize("key", ["body_count", "fps", "view_width", "view_height", "seed"])
def test_from_mapping_rejects_fractional_integers(key):
    with pytest.raises(ConfigurationError):
        from_mapping({key: 2.7})
    with pytest.raises(ConfigurationError):
        from_mapping({key: True})


def test_from_mapping_accepts_integral_values_and_real_bools():
    config = from_mapping({"body_count": 20.0, "fps": 30, "frame_pacing": False})
    assert config.body_count == 20
    assert isinstance(config.body_count, int)
    assert config.fps == 30
    assert config.frame_pacing is False


def test_load_config(tmp_path):
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"gravitational_constant": 0.003, "body_count": 90, "seed": 7}))
    config = load_config(str(path))
    assert config.gravitational_constant == 0.003
    assert config.body_count == 90
    assert config.seed == 7


def test_load_config_applies_on_top_of_base(tmp_path):
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"seed": 1}))
    config = load_config(str(path), base=get_preset("dense"))
    assert config.body_count == 90
    assert config.seed == 1


def test_load_config_errors(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(str(tmp_path / "missing.json"))
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(ConfigurationError):
        load_config(str(bad))
    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]")
    with pytest.raises(ConfigurationError):
        load_config(str(listing))
