"""Tests for key-value backends and the JSON store adapter."""

from pathlib import Path

import pytest

from civic.storage import (
    STORAGE_KEYS,
    FileStorage,
    MemoryStorage,
    StoreAdapter,
    make_storage,
)


class TestBackends:
    """MemoryStorage and FileStorage keep raw string slots."""

    def test_memory_get_missing_returns_none(self) -> None:
        """Absent slot reads as None."""
        assert MemoryStorage().get_item("nope") is None

    def test_memory_set_get_remove(self) -> None:
        """set_item overwrites, remove_item drops."""
        storage = MemoryStorage()
        storage.set_item("k", "1")
        storage.set_item("k", "2")
        assert storage.get_item("k") == "2"
        storage.remove_item("k")
        assert storage.get_item("k") is None
        storage.remove_item("k")

    def test_file_storage_writes_one_file_per_slot(self, tmp_path: Path) -> None:
        """FileStorage writes {dir}/{key}.json and creates the dir."""
        storage = FileStorage(tmp_path / "slots")
        storage.set_item("civic_issues", "[]")
        path = tmp_path / "slots" / "civic_issues.json"
        assert path.is_file()
        assert path.read_text(encoding="utf-8") == "[]"
        assert storage.get_item("civic_issues") == "[]"

    def test_file_storage_missing_and_remove(self, tmp_path: Path) -> None:
        """Missing slot is None; remove deletes the file."""
        storage = FileStorage(tmp_path)
        assert storage.get_item("x") is None
        storage.set_item("x", "1")
        storage.remove_item("x")
        assert not (tmp_path / "x.json").exists()

    def test_file_storage_undecodable_bytes_read_as_absent(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A slot file that is not UTF-8 reads as None and logs a warning."""
        (tmp_path / "civic_issues.json").write_bytes(b"\xff\xfe[garbage")
        storage = FileStorage(tmp_path)
        with caplog.at_level("WARNING", logger="civic.storage.backends"):
            assert storage.get_item("civic_issues") is None
        assert "Failed to read slot" in caplog.text
        assert StoreAdapter(storage).get("civic_issues", []) == []

    def test_make_storage(self, tmp_path: Path) -> None:
        """make_storage picks backend by name and rejects unknown names."""
        assert isinstance(make_storage("memory", tmp_path), MemoryStorage)
        assert isinstance(make_storage("FILE", tmp_path), FileStorage)
        with pytest.raises(ValueError, match="Unknown storage backend"):
            make_storage("redis", tmp_path)


class TestStoreAdapter:
    """get/set JSON with silent fallback on decode problems."""

    def test_roundtrip(self) -> None:
        """Values written with set come back from get."""
        adapter = StoreAdapter(MemoryStorage())
        adapter.set("k", {"a": [1, 2], "b": "ü"})
        assert adapter.get("k", None) == {"a": [1, 2], "b": "ü"}

    def test_absent_returns_fallback(self) -> None:
        """Missing slot returns fallback."""
        assert StoreAdapter(MemoryStorage()).get("missing", []) == []

    def test_empty_string_returns_fallback(self) -> None:
        """Empty slot returns fallback."""
        adapter = StoreAdapter(MemoryStorage({"k": ""}))
        assert adapter.get("k", "dark") == "dark"

    def test_null_returns_fallback(self) -> None:
        """JSON null reads as fallback."""
        adapter = StoreAdapter(MemoryStorage({"k": "null"}))
        assert adapter.get("k", {}) == {}

    def test_corrupt_returns_fallback(self, caplog: pytest.LogCaptureFixture) -> None:
        """Undecodable slot returns fallback and logs a warning instead of raising."""
        adapter = StoreAdapter(MemoryStorage({"k": "{not json"}))
        with caplog.at_level("WARNING", logger="civic.storage.adapter"):
            assert adapter.get("k", [1]) == [1]
        assert "not valid JSON" in caplog.text

    def test_falsy_json_values_are_kept(self) -> None:
        """0, false and [] are real values, not absence."""
        adapter = StoreAdapter(MemoryStorage())
        adapter.set("zero", 0)
        adapter.set("no", False)
        adapter.set("empty", [])
        assert adapter.get("zero", 5) == 0
        assert adapter.get("no", True) is False
        assert adapter.get("empty", None) == []

    def test_storage_keys_slots(self) -> None:
        """Slot names for every stored collection."""
        assert STORAGE_KEYS == {
            "issues": "civic_issues",
            "theme": "theme_preference",
            "notifications": "civic_notifications",
            "session": "civic_session",
            "reporters": "civic_reporters",
        }
