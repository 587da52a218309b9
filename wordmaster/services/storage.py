"""
Storage Port - Local key-value persistence.

The word store never touches files directly; it talks to a StoragePort.
Production uses a JSON file on disk, tests use the in-memory fake.
"""

import json
import os
import uuid
from abc import ABC, abstractmethod
from pathlib import Path
from threading import Lock
from typing import Dict, Optional

from ..config import Config
from ..utils.logger import get_logger

logger = get_logger(__name__)


class StoragePort(ABC):
    """
    Abstract key-value store holding string values.

    Mirrors the semantics of a browser's local storage: values are
    strings, missing keys read as None, delete of a missing key is a no-op.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key if present."""
        pass

    def contains(self, key: str) -> bool:
        """Check whether a key is present."""
        return self.get(key) is not None


class InMemoryStorage(StoragePort):
    """Dictionary-backed storage for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JSONFileStorage(StoragePort):
    """
    Key-value storage persisted as a single JSON object on disk.

    Every write rewrites the whole file atomically (temp file + rename).
    An unreadable file is treated as empty.
    """

    def __init__(self, path: Optional[str] = None):
        """
        Initialize file storage.

        Args:
            path: Path to the JSON file (defaults to Config.STORAGE_FILE)
        """
        self.path = Path(path or Config.STORAGE_FILE)
        self._lock = Lock()

    def _read_all(self) -> Dict[str, str]:
        """Read the whole file; missing or corrupt files read as empty."""
        if not self.path.exists():
            return {}

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning("Storage file %s unreadable, treating as empty: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Storage file %s is not a JSON object, treating as empty", self.path)
            return {}

        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: Dict[str, str]) -> None:
        """Write the whole file atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_file = f"{self.path}.{uuid.uuid4().hex[:8]}.tmp"
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(temp_file, self.path)
        finally:
            if os.path.exists(temp_file):
                os.remove(temp_file)

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read_all()
            data[key] = value
            self._write_all(data)

    def delete(self, key: str) -> None:
        with self._lock:
            data = self._read_all()
            if key in data:
                del data[key]
                self._write_all(data)
