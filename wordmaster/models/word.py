"""Data models for WordMaster."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict


class WordStatus(str, Enum):
    """Familiarity state of a single word."""
    UNRATED = "unrated"  # reserved, never produced by the importer
    UNKNOWN = "unknown"
    FAMILIAR = "familiar"


class StudyMode(str, Enum):
    """Available study modes."""
    FLASHCARD = "flashcard"
    DICTATION = "dictation"
    LIST = "list"


class FilterMode(str, Enum):
    """Which words are eligible for study."""
    ALL = "all"
    UNKNOWN = "unknown"


class FlashcardDirection(str, Enum):
    """Which side of the card is shown before flipping."""
    TERM_FIRST = "term-first"
    DEFINITION_FIRST = "definition-first"


class DictationResult(str, Enum):
    """Outcome of the last dictation check."""
    NONE = "none"
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass
class WordRecord:
    """One vocabulary entry: a term, its definition and study status."""

    id: int
    term: str
    definition: str
    status: WordStatus = WordStatus.UNKNOWN

    # Kept for compatibility with stored data, never incremented
    attempts: int = 0
    correct: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the persisted JSON shape.

        Returns:
            Dictionary with id, term, definition, status, attempts, correct
        """
        data = asdict(self)
        data["status"] = self.status.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WordRecord":
        """
        Build a record from its persisted JSON shape.

        Args:
            data: Dictionary as produced by to_dict()

        Returns:
            WordRecord instance

        Raises:
            KeyError: If id, term or definition is missing
            ValueError: If a field has an invalid value
        """
        term = data["term"]
        definition = data["definition"]
        for name, value in (("term", term), ("definition", definition)):
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{name} must be a non-empty string, got {value!r}")

        raw_status = data.get("status") or WordStatus.UNRATED.value

        return cls(
            id=int(data["id"]),
            term=term,
            definition=definition,
            status=WordStatus(raw_status),
            attempts=int(data.get("attempts", 0)),
            correct=int(data.get("correct", 0)),
        )
