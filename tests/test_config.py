from __future__ import annotations

import json

import pytest

from average_calculator.config import Preferences, load_preferences


pytestmark = pytest.mark.usefixtures("clean_env")


def test_defaults_when_missing(tmp_path):
    p = load_preferences(tmp_path / "nope.json")
    assert p == Preferences()
    assert p.window_size == 10 and p.decimals == 2


def test_load_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"window_size": 5, "theme": "dark", "default_category": "f"}), encoding="utf-8")
    p = load_preferences(path)
    assert p.window_size == 5
    assert p.theme == "dark"
    assert p.default_category == "f"


def test_bad_values_fall_back(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"theme": "neon", "default_category": "z", "log_level": "loud"}), encoding="utf-8")
    p = load_preferences(path)
    assert p.theme == "light"
    assert p.default_category == "p"
    assert p.log_level == "INFO"


def test_broken_file_uses_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_preferences(path) == Preferences()
    path.write_text(json.dumps({"window_size": 0}), encoding="utf-8")
    assert load_preferences(path) == Preferences()


def test_env_overrides(tmp_path, monkeypatch):
    path = tmp_path / "other.json"
    path.write_text(json.dumps({"decimals": 3}), encoding="utf-8")
    monkeypatch.setenv("AVGCALC_CONFIG", str(path))
    monkeypatch.setenv("AVGCALC_LOG_LEVEL", "debug")
    p = load_preferences()
    assert p.decimals == 3
    assert p.log_level == "DEBUG"


def test_env_log_level_survives_invalid_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"window_size": 0}), encoding="utf-8")
    monkeypatch.setenv("AVGCALC_LOG_LEVEL", "DEBUG")
    p = load_preferences(path)
    assert p.window_size == 10
    assert p.log_level == "DEBUG"
