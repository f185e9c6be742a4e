# pair_loader.py - read (key, value) pairs from JSON or tab-separated files
"""
Supported formats:
  *.json  - [{"key": "apple", "value": 1}, ...]  or  {"apple": 1, ...}
  other   - one pair per line, "key<TAB>value". Blank lines and lines
            starting with '#' are skipped. A line without a tab is its own value.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Union

from multitrie.core.protocols import PairRecord
from multitrie.core.trie import Pair


class PairFileError(ValueError):
    """Pair file cannot be read or has the wrong shape."""


def load_pairs(path: Union[str, Path]) -> List[Pair[Any]]:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf8")
    except OSError as e:
        raise PairFileError(f"cannot read {p}: {e}") from e

    if p.suffix.lower() == ".json":
        return _from_json(text, p)
    return _from_tsv(text)


def _from_json(text: str, p: Path) -> List[Pair[Any]]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise PairFileError(f"{p}: invalid JSON ({e})") from e

    if isinstance(raw, dict):
        return [Pair(str(k), v) for k, v in raw.items()]
    if not isinstance(raw, list):
        raise PairFileError(f"{p}: expected a list or an object")

    out: List[Pair[Any]] = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict) or "key" not in item or "value" not in item:
            raise PairFileError(f"{p}: entry {i} needs 'key' and 'value'")
        rec: PairRecord = {"key": str(item["key"]), "value": item["value"]}
        out.append(Pair(rec["key"], rec["value"]))
    return out


def _from_tsv(text: str) -> List[Pair[Any]]:
    out: List[Pair[Any]] = []
    for line in text.splitlines():
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        if "\t" in line:
            key, value = line.split("\t", 1)
        else:
            key = value = line.strip()
        out.append(Pair(key, value))
    return out
