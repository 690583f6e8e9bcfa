# config_manager.py - JSON config manager

import json
import os

from markov_writer.core.errors import InvalidConfiguration
from markov_writer.utils.logger_utils import get_logger

log = get_logger()

DEFAULTS = {
    "state_size": 2,          # words per state
    "max_words": 300,         # upper bound on generated words
    "input_path": "input.txt",
    "model_path": "model.json",
    "log_file": "",           # empty = console only
    "verbose": False,
}


class Config:
    def __init__(self, path="markov_writer.json", create=True):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load(create)

    def _load(self, create):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                log.warning(f"Ignoring unreadable config {self.path}: {e}")
                return
            if not isinstance(loaded, dict):
                log.warning(f"Ignoring config {self.path}: expected a JSON object")
                return
            for k, v in loaded.items():
                try:
                    self.set(k, v, persist=False)
                except InvalidConfiguration as e:
                    log.warning(f"Config {self.path}: {e}, keeping default")
        elif create:
            self.save()

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def show(self):
        return "\n".join(f"{k:15} = {v}" for k, v in self.data.items())

    def set(self, key, val, persist=True):
        if key not in self.data:
            raise InvalidConfiguration(f"no such option: {key}")
        kind = type(DEFAULTS[key])
        if kind is int and isinstance(val, (bool, float)):
            # no silent truncation of 2.7 -> 2 or true -> 1
            raise InvalidConfiguration(f"{key} must be a whole number, got {val!r}")
        if kind is bool and isinstance(val, str):
            val = val.strip().lower() in ("1", "true", "yes", "on")
        try:
            self.data[key] = kind(val)
        except (TypeError, ValueError) as e:
            raise InvalidConfiguration(f"bad value for {key}: {val!r}") from e
        if persist:
            self.save()
