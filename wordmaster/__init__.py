"""WordMaster - Vocabulary study with flashcards and dictation"""

__version__ = "1.0.0"
__author__ = "WordMaster Team"

from .config import Config, LANG_CONFIG
from .models import WordRecord, WordStatus
from .services import InMemoryStorage, JSONFileStorage, StudySession, VocabularyImporter, WordStore

__all__ = [
    'Config',
    'LANG_CONFIG',
    'WordRecord',
    'WordStatus',
    'InMemoryStorage',
    'JSONFileStorage',
    'StudySession',
    'VocabularyImporter',
    'WordStore',
]
