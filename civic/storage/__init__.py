"""Key-value slot storage and its JSON adapter."""

from civic.storage.adapter import STORAGE_KEYS, StoreAdapter
from civic.storage.backends import FileStorage, KeyValueStorage, MemoryStorage, make_storage

__all__ = [
    "STORAGE_KEYS",
    "FileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "StoreAdapter",
    "make_storage",
]
