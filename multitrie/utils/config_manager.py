# config_manager.py - JSON config manager

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from multitrie.core.trie import TrieSettings

DEFAULTS: Dict[str, Any] = {
    "use_partial_search": True,
    "use_consonant_search": True,
    "max_results": 20,
    "log_level": "WARNING",
}


class ConfigError(ValueError):
    """Unreadable config file or unknown/invalid option."""


class Config:
    """
    Defaults overlaid with an optional JSON file.
    Nothing is written unless a path was given and save() is called.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULTS)
        if path and os.path.exists(path):
            self._load()

    def _load(self):
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"cannot read config {self.path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"config {self.path} must hold a JSON object")
        for k, v in raw.items():
            self.set(k, v, persist=False)

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str) -> Any:
        return self.data[key]

    def set(self, key: str, val: Any, persist: bool = True):
        if key not in DEFAULTS:
            raise ConfigError(f"no such option: {key}")
        val = _coerce(DEFAULTS[key], val, key)
        if key == "log_level":
            val = val.upper()
            if not isinstance(logging.getLevelName(val), int):
                raise ConfigError(f"unknown log_level: {val!r}")
        self.data[key] = val
        if persist:
            self.save()

    def settings(self) -> TrieSettings:
        return TrieSettings(
            use_partial_search=self.data["use_partial_search"],
            use_consonant_search=self.data["use_consonant_search"],
        )

    def show(self):
        for k, v in self.data.items():
            print(f"{k:22} = {v}")


def _coerce(default: Any, val: Any, key: str) -> Any:
    # bool("false") is True, so strings need their own path
    if isinstance(default, bool):
        if isinstance(val, bool):
            return val
        if isinstance(val, str) and val.lower() in ("true", "1", "yes", "on"):
            return True
        if isinstance(val, str) and val.lower() in ("false", "0", "no", "off"):
            return False
        raise ConfigError(f"{key} expects a boolean, got {val!r}")
    try:
        return type(default)(val)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key} expects {type(default).__name__}, got {val!r}") from e
