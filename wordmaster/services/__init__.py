"""Services layer for business logic separation."""

from .storage import StoragePort, InMemoryStorage, JSONFileStorage
from .word_store import WordStore
from .importer import ImportResult, VocabularyImporter, parse_vocabulary
from .session import StudySession

__all__ = [
    "StoragePort",
    "InMemoryStorage",
    "JSONFileStorage",
    "WordStore",
    "ImportResult",
    "VocabularyImporter",
    "parse_vocabulary",
    "StudySession",
]
