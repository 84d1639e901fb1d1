# config_manager.py - JSON config manager for the suggester CLI

import json
import logging
import os
from typing import Any, Dict, List

from affinity_suggester.core.errors import InvalidArgumentError
from affinity_suggester.core.suggestion_engine import SuggesterConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "suggester.json"


def _defaults() -> Dict[str, Any]:
    return {
        "order": 2,  # words per n-gram
        "threshold": 0.65,  # confidence a suggestion must exceed
        "base_suggestions": ["the", "this", "of"],
        "stop_words": [],
        "corpus": "data/messages.txt",
        "skip_lines": 0,
        "log_level": "WARNING",
    }


class Config:
    def __init__(self, path: str = DEFAULT_CONFIG_PATH, autosave: bool = True):
        self.path = path
        self.autosave = autosave
        self.data: Dict[str, Any] = _defaults()
        self._load()

    def _load(self) -> None:
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning("config %s unreadable, using defaults: %s", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("config %s is not a JSON object, using defaults", self.path)
                return
            for key, val in loaded.items():
                if key not in self.data:
                    logger.warning("ignoring unknown config option %r", key)
                    continue
                self.data[key] = val
        elif self.autosave:
            self.save()

    def save(self) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def items(self) -> List[tuple]:
        return list(self.data.items())

    def set(self, key: str, val: Any) -> bool:
        """
        Set an option, coercing `val` to the type of its default.
        Lists accept a comma separated string. Returns False for unknown keys.
        """
        defaults = _defaults()
        if key not in defaults:
            logger.warning("no such config option %r", key)
            return False
        default = defaults[key]
        try:
            if isinstance(default, list):
                if isinstance(val, str):
                    val = [v.strip() for v in val.split(",") if v.strip()]
                else:
                    val = list(val)
            else:
                val = type(default)(val)
        except (TypeError, ValueError) as e:
            logger.warning("bad value %r for config option %r: %s", val, key, e)
            return False
        self.data[key] = val
        if self.autosave:
            self.save()
        return True

    def to_suggester_config(self) -> SuggesterConfig:
        try:
            return SuggesterConfig.create(
                order=int(self.data["order"]),
                threshold=float(self.data["threshold"]),
                base_suggestions=list(self.data["base_suggestions"]),
                stop_words=frozenset(self.data["stop_words"]),
            )
        except InvalidArgumentError:
            raise
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"invalid config in {self.path}: {e}") from e
