"""Key-value storage backends holding raw string slots.

MemoryStorage keeps slots in a dict (tests, throwaway runs). FileStorage keeps
one file per slot: {directory}/{key}.json. Writes overwrite the whole slot;
there is no partial-write protection beyond what the filesystem gives.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

LOG = logging.getLogger("civic.storage.backends")


class KeyValueStorage(ABC):
    """Abstract string slot store (the shape of browser local storage)."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return raw slot value, or None if the slot is absent."""
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Overwrite slot with raw value."""
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Drop slot. No-op if absent."""
        ...


class MemoryStorage(KeyValueStorage):
    """In-process dict of slots."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)


class FileStorage(KeyValueStorage):
    """One file per slot under a directory. Directory is created on first write."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def _slot_path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        path = self._slot_path(key)
        if not path.is_file():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            LOG.warning("Failed to read slot %s: %s", path, e)
            return None

    def set_item(self, key: str, value: str) -> None:
        path = self._slot_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(value, encoding="utf-8")
        LOG.debug("Wrote slot %s", path)

    def remove_item(self, key: str) -> None:
        path = self._slot_path(key)
        if path.is_file():
            path.unlink()
            LOG.debug("Removed slot %s", path)


def make_storage(backend: str, path: Path | str) -> KeyValueStorage:
    """Build storage backend by name (file or memory)."""
    name = (backend or "file").strip().lower()
    if name == "memory":
        return MemoryStorage()
    if name == "file":
        return FileStorage(path)
    raise ValueError(f"Unknown storage backend: {backend!r} (expected file or memory)")
