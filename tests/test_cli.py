# tests/test_cli.py - CLI smoke checks through the one-shot --query path
import json

from multitrie.cli.cli import CLI, main
from multitrie.core.trie import TrieSettings


def test_query_mode_prints_matches(tmp_path, capsys):
    path = tmp_path / "pairs.json"
    path.write_text(json.dumps({"apple": "fruit-apple", "한글": "hangul"}), encoding="utf8")
    rc = main([str(path), "--query", "ppl", "--query", "ㅎㄱ"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "fruit-apple" in out
    assert "hangul" in out


def test_prefix_only_flag(tmp_path, capsys):
    path = tmp_path / "pairs.tsv"
    path.write_text("apple\tfruit\n", encoding="utf8")
    rc = main([str(path), "--no-partial", "-q", "ppl"])
    assert rc == 0
    assert "no matches" in capsys.readouterr().out


def test_missing_file_returns_error(tmp_path):
    assert main([str(tmp_path / "missing.tsv"), "-q", "x"]) == 1


def test_commands_update_index():
    cli = CLI(TrieSettings())
    cli._handle_command("/add tomato red")
    assert cli.search("mat") == ["red"]
    cli._handle_command("/clear")
    assert cli.search("mat") == []
    cli._handle_command("/quit")
    assert cli.running is False
    assert cli.metrics.count("search") == 2


def test_bad_log_level_in_config_returns_error(tmp_path, capsys):
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"log_level": "verbose"}), encoding="utf8")
    assert main(["--config", str(cfg), "-q", "x"]) == 2
    assert "Config error" in capsys.readouterr().out
