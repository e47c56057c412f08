import json

import pytest

from engine import config


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "engine.json"
    monkeypatch.setattr(config, "_CONFIG_PATH", path)
    config.reload()
    yield path
    config.reload()


def test_dotted_lookup(config_file):
    config_file.write_text(json.dumps({"volume": {"default_size": 8}}), encoding="utf-8")
    assert config.get("volume.default_size") == 8
    assert config.get("volume.missing", "fallback") == "fallback"
    assert config.get("volume.default_size.deeper", 3) == 3
    assert config.get("") == {"volume": {"default_size": 8}}


def test_missing_file_uses_defaults(config_file):
    assert config.get("volume.default_size", 16) == 16


def test_malformed_file_is_reported(config_file, capsys):
    config_file.write_text("{not json", encoding="utf-8")
    assert config.get("volume.report_range_errors", True) is True
    assert "[config]" in capsys.readouterr().out


def test_non_object_file_is_ignored(config_file, capsys):
    config_file.write_text("[1, 2, 3]", encoding="utf-8")
    assert config.get("") == {}
    assert "[config]" in capsys.readouterr().out


def test_reload_picks_up_changes(config_file):
    config_file.write_text(json.dumps({"volume": {"default_size": 4}}), encoding="utf-8")
    assert config.get("volume.default_size") == 4
    config_file.write_text(json.dumps({"volume": {"default_size": 6}}), encoding="utf-8")
    assert config.get("volume.default_size") == 4
    config.reload()
    assert config.get("volume.default_size") == 6
