import dataclasses

import pytest

from bgjk.config import CONFIG, BGJKConfig


def test_defaults():
    assert BGJKConfig().max_iterations == 1000
    assert isinstance(CONFIG, BGJKConfig)

def test_from_yaml(tmp_path):
    path = tmp_path / "bgjk.yaml"
    path.write_text("max_iterations: 64\nunknown_key: 1\n", encoding="utf-8")
    assert BGJKConfig.from_yaml(path) == BGJKConfig(max_iterations=64)

def test_from_yaml_unbounded(tmp_path):
    path = tmp_path / "bgjk.yaml"
    path.write_text("max_iterations: null\n", encoding="utf-8")
    assert BGJKConfig.from_yaml(path).max_iterations is None

def test_from_yaml_empty_file(tmp_path):
    path = tmp_path / "bgjk.yaml"
    path.write_text("", encoding="utf-8")
    assert BGJKConfig.from_yaml(path) == BGJKConfig()

def test_from_yaml_missing_file(tmp_path):
    assert BGJKConfig.from_yaml(tmp_path / "nope.yaml") == BGJKConfig()

def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        CONFIG.max_iterations = 5
    assert CONFIG.max_iterations == BGJKConfig.from_yaml().max_iterations
