"""
Test Configuration

Pytest configuration and shared fixtures for all tests.
"""

import random
import sys
from pathlib import Path
from typing import List

import pytest

# Project root on sys.path, same as main_ui.py does
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from wordmaster.config import SettingsManager, get_strings
from wordmaster.models import WordRecord, WordStatus
from wordmaster.services import InMemoryStorage, StudySession, WordStore


@pytest.fixture
def storage() -> InMemoryStorage:
    """Empty in-memory key-value store."""
    return InMemoryStorage()


@pytest.fixture
def sample_records() -> List[WordRecord]:
    """Four words, one of them already familiar."""
    return [
        WordRecord(id=1, term="apple", definition="苹果", status=WordStatus.UNKNOWN),
        WordRecord(id=2, term="cat", definition="猫", status=WordStatus.FAMILIAR),
        WordRecord(id=3, term="dog", definition="狗", status=WordStatus.UNKNOWN),
        WordRecord(id=4, term="foo", definition="bar;baz", status=WordStatus.UNKNOWN),
    ]


@pytest.fixture
def store(storage, sample_records) -> WordStore:
    """Store pre-filled with the sample records and a seeded shuffle."""
    word_store = WordStore(storage, rng=random.Random(42))
    word_store.replace_all(sample_records)
    return word_store


@pytest.fixture
def session(store) -> StudySession:
    """Fresh study session over the sample store."""
    return StudySession(store)


@pytest.fixture
def strings():
    """Chinese UI labels (the default interface language)."""
    return get_strings("ZH")


@pytest.fixture
def settings_file(tmp_path):
    """Isolated settings file; the singleton is reset around each test."""
    SettingsManager.reset_instance()
    path = tmp_path / "settings.json"
    yield path
    SettingsManager.reset_instance()
