import json

import pytest

from quickpass import config


@pytest.fixture(autouse=True)
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("QUICKPASS_HOME", str(tmp_path))
    return tmp_path


def test_defaults_when_missing(home):
    assert config.load_config() == config.DEFAULTS
    assert config.config_path() == str(home / "config.json")


def test_save_and_merge(home):
    config.save_config({"clipboard_clear_seconds": 5})
    cfg = config.load_config()
    assert cfg["clipboard_clear_seconds"] == 5
    assert cfg["copied_indicator_seconds"] == 2.0
    assert json.loads((home / "config.json").read_text(encoding="utf-8")) == {"clipboard_clear_seconds": 5}


def test_corrupt_file_falls_back(home):
    (home / "config.json").write_text("{not json", encoding="utf-8")
    assert config.load_config() == config.DEFAULTS
