"""
Study Session - Navigation and per-word UI state.

Derives the active (filtered) view from the WordStore and tracks the
current word, flashcard flip state and the dictation drill:

    Idle --check--> Correct | Incorrect
    Incorrect --reveal--> IncorrectRevealed
    any edit --> Idle
    advance / retreat --> Idle (for the new word)
"""

from typing import Callable, List, Optional

from ..models import (
    DictationResult,
    FilterMode,
    FlashcardDirection,
    StudyMode,
    WordRecord,
    WordStatus,
)
from ..utils.logger import get_logger
from ..utils.parsing import TextParser
from .importer import ImportResult
from .word_store import WordStore

logger = get_logger(__name__)


class StudySession:
    """
    Session controller for one study window.

    Session state is never persisted. Every command notifies subscribers
    so the view can re-render.
    """

    def __init__(
        self,
        store: WordStore,
        mode: StudyMode = StudyMode.FLASHCARD,
        direction: FlashcardDirection = FlashcardDirection.TERM_FIRST
    ):
        self.store = store

        self.filter_mode: FilterMode = FilterMode.ALL
        self.study_mode: StudyMode = StudyMode(mode)
        self.direction: FlashcardDirection = FlashcardDirection(direction)
        self.current_index: int = 0

        # Transient per-word state
        self.is_flipped: bool = False
        self.dictation_input: str = ""
        self.dictation_result: DictationResult = DictationResult.NONE
        self.answer_revealed: bool = False

        self._change_callbacks: List[Callable[[], None]] = []

        # Keep the index inside the view when the store changes underneath
        self.store.on_change(self._clamp_index)

    # =========================================================================
    # DERIVED STATE
    # =========================================================================

    @property
    def active_words(self) -> List[WordRecord]:
        """Records eligible for study under the current filter."""
        return self.filter_words(self.store.records, self.filter_mode)

    @staticmethod
    def filter_words(words: List[WordRecord], filter_mode: FilterMode) -> List[WordRecord]:
        if filter_mode == FilterMode.UNKNOWN:
            return [w for w in words if w.status == WordStatus.UNKNOWN]
        return list(words)

    @property
    def view_size(self) -> int:
        return len(self.active_words)

    @property
    def current_word(self) -> Optional[WordRecord]:
        """Word at the current index, or None when the view is empty."""
        words = self.active_words
        if 0 <= self.current_index < len(words):
            return words[self.current_index]
        return None

    @property
    def position(self) -> int:
        """1-based position for the progress indicator."""
        return self.current_index + 1 if self.current_word is not None else 0

    # =========================================================================
    # NOTIFICATIONS
    # =========================================================================

    def on_change(self, callback: Callable[[], None]) -> None:
        self._change_callbacks.append(callback)

    def _notify_change(self) -> None:
        for callback in self._change_callbacks:
            try:
                callback()
            except Exception:
                logger.exception("Change callback %r failed", callback)

    # =========================================================================
    # NAVIGATION
    # =========================================================================

    def _reset_transient(self) -> None:
        self.is_flipped = False
        self.dictation_input = ""
        self.dictation_result = DictationResult.NONE
        self.answer_revealed = False

    def _step(self, size: int, forward: bool) -> None:
        if size <= 0:
            self.current_index = 0
        elif forward:
            self.current_index = self.current_index + 1 if self.current_index < size - 1 else 0
        else:
            self.current_index = self.current_index - 1 if self.current_index > 0 else size - 1

    def _clamp_index(self) -> None:
        if not 0 <= self.current_index < self.view_size:
            self.current_index = 0

    def advance(self) -> None:
        """Move to the next word, wrapping to the first."""
        self._step(self.view_size, forward=True)
        self._reset_transient()
        self._notify_change()

    def retreat(self) -> None:
        """Move to the previous word, wrapping to the last."""
        self._step(self.view_size, forward=False)
        self._reset_transient()
        self._notify_change()

    def rate(self, status: WordStatus) -> bool:
        """
        Rate the current word, then advance.

        Navigation uses the view as it was when the word was rated; if the
        rated word drops out of the view the index is clamped back into it.

        Args:
            status: New status for the current word

        Returns:
            False if there is no current word
        """
        word = self.current_word
        if word is None:
            return False

        size_before, index_before = self.view_size, self.current_index
        self.store.set_status(word.id, status)
        self.current_index = index_before
        self._step(size_before, forward=True)
        self._clamp_index()
        self._reset_transient()
        self._notify_change()
        return True

    def toggle_word_status(self, word_id: int) -> bool:
        """
        Flip one word between familiar and unknown (list mode).

        Does not navigate.
        """
        word = self.store.get(word_id)
        if word is None:
            return False

        new_status = WordStatus.UNKNOWN if word.status == WordStatus.FAMILIAR else WordStatus.FAMILIAR
        self.store.set_status(word_id, new_status)
        self._clamp_index()
        self._notify_change()
        return True

    # =========================================================================
    # MODES & FILTERS
    # =========================================================================

    def set_filter(self, filter_mode: FilterMode) -> None:
        """Change the filter; the index always restarts at 0."""
        self.filter_mode = FilterMode(filter_mode)
        self.current_index = 0
        self._reset_transient()
        self._notify_change()

    def toggle_filter(self) -> None:
        self.set_filter(FilterMode.UNKNOWN if self.filter_mode == FilterMode.ALL else FilterMode.ALL)

    def set_mode(self, mode: StudyMode) -> None:
        self.study_mode = StudyMode(mode)
        self._notify_change()

    def toggle_direction(self) -> None:
        if self.direction == FlashcardDirection.TERM_FIRST:
            self.direction = FlashcardDirection.DEFINITION_FIRST
        else:
            self.direction = FlashcardDirection.TERM_FIRST
        self._notify_change()

    def flip(self) -> None:
        """Toggle the flashcard face."""
        self.is_flipped = not self.is_flipped
        self._notify_change()

    # =========================================================================
    # DICTATION
    # =========================================================================

    def set_dictation_input(self, text: str) -> None:
        """Replace the typed input; any edit returns the drill to Idle."""
        self.dictation_input = text or ""
        self.dictation_result = DictationResult.NONE
        self.answer_revealed = False
        self._notify_change()

    def check_dictation(self) -> DictationResult:
        """
        Compare the typed input with the current term.

        Both sides are trimmed and lowercased. A correct answer stays
        correct until the user navigates away.

        Returns:
            The resulting DictationResult
        """
        word = self.current_word
        if word is None or self.dictation_result == DictationResult.CORRECT:
            return self.dictation_result

        typed = TextParser.normalize_answer(self.dictation_input)
        target = TextParser.normalize_answer(word.term)
        self.dictation_result = DictationResult.CORRECT if typed == target else DictationResult.INCORRECT
        self._notify_change()
        return self.dictation_result

    def submit_dictation(self) -> None:
        """Enter key: advance after a correct answer, otherwise check."""
        if self.dictation_result == DictationResult.CORRECT:
            self.advance()
        else:
            self.check_dictation()

    def reveal_answer(self) -> bool:
        """Show the correct term after an incorrect attempt."""
        if self.dictation_result != DictationResult.INCORRECT:
            return False
        self.answer_revealed = True
        self._notify_change()
        return True

    # =========================================================================
    # COLLECTION COMMANDS
    # =========================================================================

    def apply_import(self, result: ImportResult) -> bool:
        """
        Replace the collection with freshly imported records.

        An import with no records leaves the store and session untouched.

        Returns:
            True if the collection was replaced
        """
        if not result.ok:
            logger.info("Import produced no words, keeping %d existing", self.store.count)
            return False

        self.store.replace_all(result.records)
        self.filter_mode = FilterMode.ALL
        self.current_index = 0
        self._reset_transient()
        self._notify_change()
        return True

    def shuffle(self) -> None:
        self.store.shuffle()
        self.current_index = 0
        self._reset_transient()
        self._notify_change()

    def reset_progress(self) -> None:
        """Mark every word unknown and restart from the first word."""
        self.store.reset_all_statuses()
        self.current_index = 0
        self._reset_transient()
        self._notify_change()

    def clear_all(self) -> None:
        """Drop the collection and its stored copy."""
        self.store.clear()
        self.current_index = 0
        self._reset_transient()
        self._notify_change()
