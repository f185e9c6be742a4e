# tests/test_pair_loader.py
import json

import pytest

from multitrie.core.trie import Pair
from multitrie.utils.pair_loader import PairFileError, load_pairs


def test_json_list(tmp_path):
    path = tmp_path / "pairs.json"
    path.write_text(json.dumps([{"key": "apple", "value": 1}, {"key": "한글", "value": "ko"}]), encoding="utf8")
    assert load_pairs(path) == [Pair("apple", 1), Pair("한글", "ko")]


def test_json_mapping(tmp_path):
    path = tmp_path / "pairs.json"
    path.write_text(json.dumps({"red": "#f00", "green": "#0f0"}), encoding="utf8")
    assert load_pairs(path) == [Pair("red", "#f00"), Pair("green", "#0f0")]


def test_json_entry_missing_value(tmp_path):
    path = tmp_path / "pairs.json"
    path.write_text(json.dumps([{"key": "apple"}]), encoding="utf8")
    with pytest.raises(PairFileError):
        load_pairs(path)


def test_tsv_lines(tmp_path):
    path = tmp_path / "pairs.tsv"
    path.write_text("# tags\napple\tfruit\n\nbanana\n new york\tcity\n", encoding="utf8")
    assert load_pairs(path) == [
        Pair("apple", "fruit"),
        Pair("banana", "banana"),
        Pair(" new york", "city"),
    ]


def test_missing_file(tmp_path):
    with pytest.raises(PairFileError):
        load_pairs(tmp_path / "nope.tsv")
