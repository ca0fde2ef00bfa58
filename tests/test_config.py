"""Test suite for ConfigManager: verifying loading formats, defaults, and merging behavior."""

import json
import pytest

import yaml
import toml

from multistl.analytics.stl import StlParams
from multistl.core.config import ConfigManager, ConfigValidationError


def test_defaults():
    """A fresh manager has the default table layout and no periods."""
    cfg = ConfigManager()
    assert cfg.get_value_col() == "y"
    assert cfg.get_date_col() == "date"
    assert cfg.get_periods() == []
    assert cfg.get_stl_params() == StlParams()


def test_load_json(tmp_path):
    """Ensure JSON files load correctly and default values are returned for missing keys."""
    cfg_file = tmp_path / "cfg.json"
    data = {"periods": [168, 24], "value_col": "demand"}
    cfg_file.write_text(json.dumps(data), encoding="utf-8")

    cfg = ConfigManager()
    cfg.load(str(cfg_file))

    assert cfg.get_periods() == [168, 24]
    assert cfg.get_value_col() == "demand"
    assert cfg.get("missing", "def") == "def"


def test_load_yaml_stl_options(tmp_path):
    """Verify YAML STL tables become StlParams."""
    cfg_file = tmp_path / "cfg.yaml"
    data = {"stl": {"seasonal_deg": 0, "inner_iter": 2, "outer_iter": 0}}
    cfg_file.write_text(yaml.safe_dump(data), encoding="utf-8")

    cfg = ConfigManager(str(cfg_file))
    params = cfg.get_stl_params()

    assert params.seasonal_deg == 0
    assert params.inner_iter == 2
    assert params.outer_iter == 0
    assert params.trend_deg == 1


def test_load_toml(tmp_path):
    """Check TOML file loading and value retrieval functionality."""
    cfg_file = tmp_path / "cfg.toml"
    data = {"periods": [24], "stl": {"robust": True}}
    cfg_file.write_text(toml.dumps(data), encoding="utf-8")

    cfg = ConfigManager(str(cfg_file))

    assert cfg.get_periods() == [24]
    assert cfg.get_stl_params().robust is True


def test_load_unsupported_extension(tmp_path):
    """Confirm that loading unsupported file extensions raises ConfigValidationError."""
    cfg_file = tmp_path / "cfg.txt"
    cfg_file.write_text("whatever", encoding="utf-8")

    cfg = ConfigManager()
    with pytest.raises(ConfigValidationError):
        cfg.load(str(cfg_file))


def test_load_invalid_content(tmp_path):
    """Ensure invalid JSON content triggers a ConfigValidationError."""
    cfg_file = tmp_path / "bad.json"
    cfg_file.write_text("not a json!", encoding="utf-8")

    cfg = ConfigManager()
    with pytest.raises(ConfigValidationError):
        cfg.load(str(cfg_file))


def test_unknown_stl_option(tmp_path):
    cfg_file = tmp_path / "cfg.json"
    cfg_file.write_text(json.dumps({"stl": {"seasonal_window": 7}}), encoding="utf-8")

    cfg = ConfigManager(str(cfg_file))
    with pytest.raises(ConfigValidationError):
        cfg.get_stl_params()


def test_invalid_periods():
    cfg = ConfigManager()
    cfg.config["periods"] = ["daily"]
    with pytest.raises(ConfigValidationError):
        cfg.get_periods()


def test_merge_configs():
    """Merging overrides top-level keys and combines STL tables per option."""
    cfg1 = ConfigManager()
    cfg1.config.update({"periods": [24], "stl": {"seasonal_deg": 0, "robust": True}})

    cfg2 = ConfigManager()
    cfg2.config.update({"periods": [24, 168], "stl": {"robust": False}})

    cfg1.merge(cfg2)

    assert cfg1.get_periods() == [24, 168]
    assert cfg1.get("stl") == {"seasonal_deg": 0, "robust": False}


def test_merge_wrong_type():
    """Assert merging with a non-ConfigManager object raises a TypeError."""
    cfg = ConfigManager()
    with pytest.raises(TypeError):
        cfg.merge("not a config manager")


def test_fill_method():
    cfg = ConfigManager()
    assert cfg.get_fill_method() == "time"
    cfg.config["fill_method"] = "linear"
    assert cfg.get_fill_method() == "linear"
    cfg.config["fill_method"] = "bogus"
    with pytest.raises(ConfigValidationError):
        cfg.get_fill_method()
