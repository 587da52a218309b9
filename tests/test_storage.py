"""
Unit Tests for Storage Backends

Tests for InMemoryStorage and JSONFileStorage.
"""

import json

from wordmaster.services.storage import InMemoryStorage, JSONFileStorage


class TestInMemoryStorage:
    """Tests for the dictionary-backed fake."""

    def test_get_missing_key(self):
        assert InMemoryStorage().get("nope") is None

    def test_set_get_delete(self):
        storage = InMemoryStorage()
        storage.set("k", "v")
        assert storage.get("k") == "v"
        assert storage.contains("k")

        storage.delete("k")
        assert storage.get("k") is None
        assert not storage.contains("k")

    def test_delete_missing_key_is_noop(self):
        storage = InMemoryStorage({"a": "1"})
        storage.delete("b")
        assert storage.get("a") == "1"


class TestJSONFileStorage:
    """Tests for the on-disk JSON key-value store."""

    def test_missing_file_reads_empty(self, tmp_path):
        storage = JSONFileStorage(str(tmp_path / "store.json"))
        assert storage.get("key") is None

    def test_values_survive_new_instance(self, tmp_path):
        path = tmp_path / "nested" / "store.json"
        JSONFileStorage(str(path)).set("key", "[1, 2]")

        assert JSONFileStorage(str(path)).get("key") == "[1, 2]"

    def test_delete_removes_only_that_key(self, tmp_path):
        path = tmp_path / "store.json"
        storage = JSONFileStorage(str(path))
        storage.set("a", "1")
        storage.set("b", "2")

        storage.delete("a")

        assert json.loads(path.read_text(encoding="utf-8")) == {"b": "2"}

    def test_corrupt_file_reads_empty_and_is_overwritten(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")
        storage = JSONFileStorage(str(path))

        assert storage.get("key") is None

        storage.set("key", "value")
        assert storage.get("key") == "value"

    def test_non_object_file_reads_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")

        assert JSONFileStorage(str(path)).get("key") is None

    def test_no_temp_files_left_behind(self, tmp_path):
        storage = JSONFileStorage(str(tmp_path / "store.json"))
        storage.set("key", "value")
        storage.set("key", "other")

        assert [p.name for p in tmp_path.iterdir()] == ["store.json"]

    def test_unicode_stored_readably(self, tmp_path):
        path = tmp_path / "store.json"
        JSONFileStorage(str(path)).set("key", "苹果")

        assert "苹果" in path.read_text(encoding="utf-8")
