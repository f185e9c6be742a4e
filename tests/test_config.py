# tests/test_config.py
import json

import pytest

from multitrie.core.trie import TrieSettings
from multitrie.utils.config_manager import Config, ConfigError


def test_defaults_without_file(tmp_path):
    cfg = Config(str(tmp_path / "missing.json"))
    assert cfg.settings() == TrieSettings()
    assert cfg.get("max_results") == 20
    assert not (tmp_path / "missing.json").exists()


def test_file_overrides_and_coerces(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"use_partial_search": "false", "max_results": "5"}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg.settings() == TrieSettings(use_partial_search=False, use_consonant_search=True)
    assert cfg.get("max_results") == 5


def test_unknown_option_rejected(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"colour": "red"}), encoding="utf8")
    with pytest.raises(ConfigError):
        Config(str(path))


def test_bad_json_rejected(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text("{not json", encoding="utf8")
    with pytest.raises(ConfigError):
        Config(str(path))


def test_bad_bool_rejected():
    cfg = Config()
    with pytest.raises(ConfigError):
        cfg.set("use_consonant_search", "maybe")


def test_set_persists_when_path_given(tmp_path):
    path = tmp_path / "cfg.json"
    cfg = Config(str(path))
    cfg.set("use_consonant_search", False)
    assert json.loads(path.read_text(encoding="utf8"))["use_consonant_search"] is False
    assert Config(str(path)).settings().use_consonant_search is False


def test_unknown_log_level_rejected(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"log_level": "verbose"}), encoding="utf8")
    with pytest.raises(ConfigError):
        Config(str(path))


def test_log_level_upper_cased():
    cfg = Config()
    cfg.set("log_level", "debug", persist=False)
    assert cfg.get("log_level") == "DEBUG"
