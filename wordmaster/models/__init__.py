"""Data models for WordMaster."""

from .word import (
    DictationResult,
    FilterMode,
    FlashcardDirection,
    StudyMode,
    WordRecord,
    WordStatus,
)

__all__ = [
    'DictationResult',
    'FilterMode',
    'FlashcardDirection',
    'StudyMode',
    'WordRecord',
    'WordStatus',
]
