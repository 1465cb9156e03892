"""JSON encode/decode over key-value slots.

Decode failures are never surfaced: a corrupt or missing slot reads as the
caller's fallback.
"""

import json
import logging
from typing import Any

from civic.storage.backends import KeyValueStorage

STORAGE_KEYS = {
    "issues": "civic_issues",
    "theme": "theme_preference",
    "notifications": "civic_notifications",
    "session": "civic_session",
    "reporters": "civic_reporters",
}

LOG = logging.getLogger("civic.storage.adapter")


class StoreAdapter:
    """Named JSON slots on top of a KeyValueStorage."""

    def __init__(self, storage: KeyValueStorage) -> None:
        self.storage = storage

    def get(self, key: str, fallback: Any = None) -> Any:
        """Decode slot value. Returns fallback if absent, empty, null or corrupt."""
        raw = self.storage.get_item(key)
        if not raw:
            return fallback
        try:
            value = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            LOG.warning("Slot %s is not valid JSON, using default: %s", key, e)
            return fallback
        return fallback if value is None else value

    def set(self, key: str, value: Any) -> None:
        """Encode value and overwrite slot."""
        self.storage.set_item(key, json.dumps(value, ensure_ascii=False))
