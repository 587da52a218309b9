"""
Unit Tests for the Word Store

Persistence round-trips, status updates, shuffle, reset and clear.
"""

import json
from collections import Counter

from wordmaster.config import Config
from wordmaster.models import WordRecord, WordStatus
from wordmaster.services import InMemoryStorage, WordStore


class CountingStorage(InMemoryStorage):
    """In-memory storage that counts writes."""

    def __init__(self):
        super().__init__()
        self.writes = 0

    def set(self, key, value):
        self.writes += 1
        super().set(key, value)


# =============================================================================
# Load / Persist Tests
# =============================================================================

class TestLoad:
    """Tests for loading the persisted collection."""

    def test_load_without_data(self, storage):
        store = WordStore(storage)
        assert store.load() == []
        assert store.is_empty

    def test_round_trip(self, storage, sample_records):
        WordStore(storage).replace_all(sample_records)

        reloaded = WordStore(storage)
        assert reloaded.load() == sample_records

    def test_persisted_layout(self, storage, sample_records):
        WordStore(storage).replace_all(sample_records)

        data = json.loads(storage.get(Config.STORAGE_KEY))
        assert data[3] == {
            "id": 4,
            "term": "foo",
            "definition": "bar;baz",
            "status": "unknown",
            "attempts": 0,
            "correct": 0,
        }

    def test_invalid_json_is_discarded(self, storage):
        storage.set(Config.STORAGE_KEY, "{not json")
        assert WordStore(storage).load() == []

    def test_wrong_shape_is_discarded(self, storage):
        storage.set(Config.STORAGE_KEY, json.dumps({"id": 1}))
        assert WordStore(storage).load() == []

    def test_incomplete_record_is_discarded(self, storage):
        storage.set(Config.STORAGE_KEY, json.dumps([{"id": 1, "term": "apple"}]))
        assert WordStore(storage).load() == []

    def test_unknown_status_is_discarded(self, storage):
        storage.set(Config.STORAGE_KEY, json.dumps(
            [{"id": 1, "term": "apple", "definition": "苹果", "status": "mastered"}]
        ))
        assert WordStore(storage).load() == []

    def test_null_term_is_discarded(self, storage):
        storage.set(Config.STORAGE_KEY, json.dumps([{"id": 1, "term": None, "definition": "x"}]))
        assert WordStore(storage).load() == []

    def test_duplicate_ids_are_discarded(self, storage):
        storage.set(Config.STORAGE_KEY, json.dumps([
            {"id": 1, "term": "apple", "definition": "苹果", "status": "unknown"},
            {"id": 1, "term": "cat", "definition": "猫", "status": "familiar"},
        ]))

        store = WordStore(storage)

        assert store.load() == []
        assert store.is_empty

    def test_missing_status_loads_as_unrated(self, storage):
        storage.set(Config.STORAGE_KEY, json.dumps([{"id": 1, "term": "apple", "definition": "苹果"}]))

        words = WordStore(storage).load()

        assert words[0].status == WordStatus.UNRATED
        assert words[0].attempts == 0


# =============================================================================
# Mutation Tests
# =============================================================================

class TestMutations:
    """Every mutation rewrites the whole collection."""

    def test_set_status_changes_only_that_word(self, store, storage):
        before = {w.id: w.status for w in store.records}

        assert store.set_status(3, WordStatus.FAMILIAR)

        after = {w.id: w.status for w in WordStore(storage).load()}
        assert after[3] == WordStatus.FAMILIAR
        assert {k: v for k, v in after.items() if k != 3} == {k: v for k, v in before.items() if k != 3}

    def test_set_status_unknown_id_is_noop(self, sample_records):
        storage = CountingStorage()
        store = WordStore(storage)
        store.replace_all(sample_records)
        writes = storage.writes

        assert not store.set_status(999, WordStatus.FAMILIAR)
        assert storage.writes == writes

    def test_shuffle_preserves_ids(self, store, storage):
        ids_before = Counter(w.id for w in store.records)

        store.shuffle()

        assert Counter(w.id for w in store.records) == ids_before
        assert [w.id for w in WordStore(storage).load()] == [w.id for w in store.records]

    def test_reset_all_statuses(self, store, storage):
        store.reset_all_statuses()

        assert all(w.status == WordStatus.UNKNOWN for w in WordStore(storage).load())

    def test_clear_removes_stored_key(self, store, storage):
        store.clear()

        assert store.is_empty
        assert storage.get(Config.STORAGE_KEY) is None
        assert WordStore(storage).load() == []

    def test_replace_all_discards_old_words(self, store):
        store.replace_all([WordRecord(id=10, term="sun", definition="太阳")])

        assert [w.id for w in store.records] == [10]

    def test_records_is_a_snapshot(self, store):
        snapshot = store.records
        snapshot.clear()
        assert store.count == 4

    def test_get(self, store):
        assert store.get(2).term == "cat"
        assert store.get(42) is None


# =============================================================================
# Statistics & Notification Tests
# =============================================================================

class TestStatistics:
    """Tests for statistics() and change callbacks."""

    def test_statistics(self, store):
        assert store.statistics() == {"total": 4, "familiar": 1, "unknown": 3, "unrated": 0}

    def test_statistics_counts_unrated(self, storage):
        storage.set(Config.STORAGE_KEY, json.dumps([
            {"id": 1, "term": "apple", "definition": "苹果", "status": ""},
            {"id": 2, "term": "cat", "definition": "猫", "status": "familiar"},
        ]))
        store = WordStore(storage)
        store.load()

        assert store.statistics() == {"total": 2, "familiar": 1, "unknown": 0, "unrated": 1}

    def test_on_change_fires_for_mutations(self, store):
        calls = []
        store.on_change(lambda: calls.append(1))

        store.set_status(1, WordStatus.FAMILIAR)
        store.shuffle()
        store.reset_all_statuses()
        store.clear()

        assert len(calls) == 4

    def test_failing_callback_does_not_block_others(self, store):
        calls = []

        def broken():
            raise RuntimeError("boom")

        store.on_change(broken)
        store.on_change(lambda: calls.append(1))

        store.shuffle()

        assert calls == [1]
