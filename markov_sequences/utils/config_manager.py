# config_manager.py - JSON config manager

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

from typing_extensions import TypedDict

from markov_sequences.context.tokenizer import TOKENIZERS
from markov_sequences.core.errors import ConfigError


class ConfigData(TypedDict):
    order: int
    tokenizer: str
    lowercase: bool
    max_length: int
    count: int
    seed: Optional[int]


DEFAULTS: ConfigData = {
    "order": 2,            # markov order (context length)
    "tokenizer": "words",  # "words" or "chars"
    "lowercase": True,
    "max_length": 50,      # cap on symbols per generated/predicted sequence
    "count": 5,            # sequences printed by `generate`
    "seed": None,          # None -> fresh randomness each run
}


class Config:
    """
    Run settings for the command line tool.

    Values from the JSON file at `path` are merged over DEFAULTS. Unlike the
    model itself, bad config is an error: unknown keys and values of the wrong
    type raise ConfigError.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULTS)
        if path and os.path.exists(path):
            self._load()

    def _load(self):
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{self.path}: invalid JSON ({e})") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"{self.path}: expected a JSON object")
        for k, v in loaded.items():
            self.set(k, v, save=False)

    def save(self):
        if not self.path:
            raise ConfigError("config has no path to save to")
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str) -> Any:
        if key not in self.data:
            raise ConfigError(f"no such option: {key}")
        return self.data[key]

    def set(self, key: str, val: Any, save: bool = False):
        if key not in DEFAULTS:
            raise ConfigError(f"no such option: {key}")
        self.data[key] = _coerce(key, val)
        if save:
            self.save()

    def update(self, **overrides: Any):
        """Apply overrides, skipping ones left as None (e.g. unset CLI flags)."""
        for k, v in overrides.items():
            if v is not None:
                self.set(k, v)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self.data)


def _coerce(key: str, val: Any) -> Any:
    default = DEFAULTS[key]
    if key == "seed":
        if val is None:
            return None
        kind = int
    else:
        kind = type(default)

    if kind is bool:
        if isinstance(val, str):
            lowered = val.strip().lower()
            if lowered in ("1", "true", "yes", "on"):
                return True
            if lowered in ("0", "false", "no", "off"):
                return False
            raise ConfigError(f"{key}: expected a boolean, got {val!r}")
        return bool(val)

    if kind is int and isinstance(val, bool):
        raise ConfigError(f"{key}: expected an int, got {val!r}")
    if kind is int and isinstance(val, float) and not val.is_integer():
        raise ConfigError(f"{key}: expected a whole number, got {val!r}")
    try:
        out = kind(val)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key}: cannot convert {val!r} to {kind.__name__}") from e

    if key in ("order", "max_length", "count") and out < 0:
        raise ConfigError(f"{key}: must be >= 0, got {out}")
    if key == "tokenizer" and out not in TOKENIZERS:
        raise ConfigError(f"tokenizer: expected one of {sorted(TOKENIZERS)}, got {out!r}")
    return out
