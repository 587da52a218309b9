"""
Word Store - The authoritative word collection.

Holds the ordered list of WordRecord and mirrors it to a StoragePort:
every mutation is followed by a full serialize-and-store of the collection.
"""

import json
import random
from typing import Callable, Dict, Iterable, List, Optional

from ..config import Config
from ..models import WordRecord, WordStatus
from ..utils.logger import get_logger
from .storage import StoragePort

logger = get_logger(__name__)


class WordStore:
    """
    In-memory word collection with write-through persistence.

    Usage:
        store = WordStore(JSONFileStorage())
        store.load()
        store.set_status(word_id, WordStatus.FAMILIAR)
    """

    def __init__(
        self,
        storage: StoragePort,
        key: str = Config.STORAGE_KEY,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the store.

        Args:
            storage: Key-value backend
            key: Storage key holding the serialized collection
            rng: Random source for shuffle (injectable for tests)
        """
        self.storage = storage
        self.key = key
        self._rng = rng or random.Random()
        self._words: List[WordRecord] = []
        self._change_callbacks: List[Callable[[], None]] = []

    @property
    def records(self) -> List[WordRecord]:
        """Snapshot of the collection in its current order."""
        return list(self._words)

    @property
    def count(self) -> int:
        """Get total word count."""
        return len(self._words)

    @property
    def is_empty(self) -> bool:
        return not self._words

    def on_change(self, callback: Callable[[], None]) -> None:
        """
        Register a callback for data changes.

        Args:
            callback: Function to call after every mutation
        """
        self._change_callbacks.append(callback)

    def _notify_change(self) -> None:
        """Notify all registered callbacks of data change."""
        for callback in self._change_callbacks:
            try:
                callback()
            except Exception:
                logger.exception("Change callback %r failed", callback)

    def _persist(self) -> None:
        """Serialize the whole collection into storage."""
        payload = json.dumps([w.to_dict() for w in self._words], ensure_ascii=False)
        self.storage.set(self.key, payload)

    def load(self) -> List[WordRecord]:
        """
        Load the collection from storage.

        Absent or malformed data yields an empty collection; it is never
        reported as an error.

        Returns:
            The loaded records
        """
        raw = self.storage.get(self.key)
        self._words = self._deserialize(raw) if raw is not None else []
        logger.debug("Loaded %d words from storage", len(self._words))
        self._notify_change()
        return self.records

    def _deserialize(self, raw: str) -> List[WordRecord]:
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a list, got {type(data).__name__}")
            words = [WordRecord.from_dict(item) for item in data]
            ids = [w.id for w in words]
            if len(set(ids)) != len(ids):
                raise ValueError("duplicate word ids")
            return words
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Discarding malformed stored words: %s", e)
            return []

    def get(self, word_id: int) -> Optional[WordRecord]:
        """Find a record by id."""
        for word in self._words:
            if word.id == word_id:
                return word
        return None

    def replace_all(self, records: Iterable[WordRecord]) -> None:
        """
        Replace the whole collection and persist it.

        Args:
            records: New records, in order
        """
        self._words = list(records)
        self._persist()
        logger.debug("Replaced collection with %d words", len(self._words))
        self._notify_change()

    def set_status(self, word_id: int, status: WordStatus) -> bool:
        """
        Update one record's status.

        Args:
            word_id: Record id
            status: New status

        Returns:
            True if a record was updated, False if the id is unknown
        """
        word = self.get(word_id)
        if word is None:
            return False

        word.status = WordStatus(status)
        self._persist()
        self._notify_change()
        return True

    def shuffle(self) -> None:
        """Randomly permute the entire collection and persist."""
        self._rng.shuffle(self._words)
        self._persist()
        self._notify_change()

    def reset_all_statuses(self) -> None:
        """Mark every word unknown and persist."""
        for word in self._words:
            word.status = WordStatus.UNKNOWN
        self._persist()
        self._notify_change()

    def clear(self) -> None:
        """Empty the collection and delete its stored representation."""
        self._words = []
        self.storage.delete(self.key)
        logger.debug("Cleared collection")
        self._notify_change()

    def statistics(self) -> Dict[str, int]:
        """
        Get study statistics.

        Returns:
            Dictionary with total, familiar, unknown and unrated counts
        """
        stats = {"total": len(self._words), "familiar": 0, "unknown": 0, "unrated": 0}
        for word in self._words:
            stats[word.status.value] += 1
        return stats
