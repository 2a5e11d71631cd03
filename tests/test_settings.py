import json

import pytest

from sortvis.settings import DEFAULTS, ConfigError, build_config, read_settings_json


def write(tmp_path, data):
    p = tmp_path / "sortvis_settings.json"
    p.write_text(data if isinstance(data, str) else json.dumps(data))
    return str(p)


def test_defaults_without_file(tmp_path):
    cfg = build_config(path=str(tmp_path / "missing.json"))
    assert cfg == DEFAULTS
    assert cfg["array_size"] == 200
    assert (cfg["value_low"], cfg["value_high"]) == (10, 599)


def test_file_then_overrides(tmp_path):
    path = write(tmp_path, {"array_size": 50, "fps": 30, "algorithm": "heap"})
    cfg = build_config({"fps": 120, "seed": None}, path=path)
    assert cfg["array_size"] == 50
    assert cfg["algorithm"] == "heap"
    assert cfg["fps"] == 120
    assert cfg["seed"] is None


def test_unknown_keys_are_ignored(tmp_path, caplog):
    path = write(tmp_path, {"colour": "red"})
    cfg = build_config(path=path)
    assert "colour" not in cfg
    assert "Unknown setting" in caplog.text


def test_broken_json_falls_back(tmp_path, caplog):
    path = write(tmp_path, "{not json")
    assert read_settings_json(path) == {}
    assert "Ignoring settings file" in caplog.text
    assert read_settings_json(write(tmp_path, "[1, 2]")) == {}


@pytest.mark.parametrize("overrides", [
    {"array_size": 0},
    {"fps": 0},
    {"value_low": 50, "value_high": 40},
    {"value_low": -1},
    {"array_size": "many"},
    {"algorithm": "bogo"},
    {"seed": 1.5},
    {"window_height": 10},
])
def test_invalid_values(tmp_path, overrides):
    with pytest.raises(ConfigError):
        build_config(overrides, path=str(tmp_path / "missing.json"))
