"""
Presenter - Pure mapping from study state to a displayable view model.

Nothing here touches Flet, so the whole screen logic is testable.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..models import (
    DictationResult,
    FilterMode,
    FlashcardDirection,
    StudyMode,
    WordRecord,
    WordStatus,
)
from ..services.session import StudySession


# Screen kinds
SCREEN_WELCOME = "welcome"
SCREEN_EMPTY = "empty"
SCREEN_FLASHCARD = "flashcard"
SCREEN_DICTATION = "dictation"
SCREEN_LIST = "list"


@dataclass
class FlashcardModel:
    front_label: str
    front_text: str
    back_label: str
    back_text: str
    is_flipped: bool
    direction_label: str


@dataclass
class DictationModel:
    prompt: str
    input_text: str
    result: DictationResult
    answer: Optional[str]  # only set once revealed
    can_reveal: bool
    action_label: str


@dataclass
class ListRowModel:
    word_id: int
    term: str
    definition: str
    is_familiar: bool


@dataclass
class ViewModel:
    """Everything the study screen needs to draw itself."""

    screen: str
    stats: Dict[str, int] = field(default_factory=dict)
    study_mode: StudyMode = StudyMode.FLASHCARD
    filter_mode: FilterMode = FilterMode.ALL
    filter_label: str = ""
    progress_text: str = ""
    current_status: Optional[WordStatus] = None
    flashcard: Optional[FlashcardModel] = None
    dictation: Optional[DictationModel] = None
    rows: List[ListRowModel] = field(default_factory=list)

    # Empty-state affordances
    offer_show_all: bool = False
    offer_reset: bool = False

    @property
    def shows_rating(self) -> bool:
        """Rate buttons and prev/skip appear in flashcard and dictation modes."""
        return self.screen in (SCREEN_FLASHCARD, SCREEN_DICTATION)


def _flashcard_model(word: WordRecord, session: StudySession, strings: Dict[str, str]) -> FlashcardModel:
    term_first = session.direction == FlashcardDirection.TERM_FIRST
    term = (strings["label_term"], word.term)
    definition = (strings["label_definition"], word.definition)
    front, back = (term, definition) if term_first else (definition, term)

    return FlashcardModel(
        front_label=front[0],
        front_text=front[1],
        back_label=back[0],
        back_text=back[1],
        is_flipped=session.is_flipped,
        direction_label=strings["direction_term_first" if term_first else "direction_definition_first"],
    )


def _dictation_model(word: WordRecord, session: StudySession, strings: Dict[str, str]) -> DictationModel:
    result = session.dictation_result
    return DictationModel(
        prompt=word.definition,
        input_text=session.dictation_input,
        result=result,
        answer=word.term if result == DictationResult.INCORRECT and session.answer_revealed else None,
        can_reveal=result == DictationResult.INCORRECT and not session.answer_revealed,
        action_label=strings["next" if result == DictationResult.CORRECT else "check"],
    )


def build_view_model(session: StudySession, strings: Dict[str, str]) -> ViewModel:
    """
    Render session and store state into a ViewModel.

    Args:
        session: Study session (gives access to the store)
        strings: UI label table

    Returns:
        ViewModel for the current screen
    """
    store = session.store
    if store.is_empty:
        return ViewModel(screen=SCREEN_WELCOME)

    model = ViewModel(
        screen=SCREEN_EMPTY,
        stats=store.statistics(),
        study_mode=session.study_mode,
        filter_mode=session.filter_mode,
        filter_label=strings["filter_all" if session.filter_mode == FilterMode.ALL else "filter_unknown"],
    )

    words = session.active_words
    if not words:
        model.offer_show_all = session.filter_mode == FilterMode.UNKNOWN
        model.offer_reset = session.filter_mode == FilterMode.ALL
        return model

    if session.study_mode == StudyMode.LIST:
        model.screen = SCREEN_LIST
        model.rows = [
            ListRowModel(w.id, w.term, w.definition, w.status == WordStatus.FAMILIAR)
            for w in words
        ]
        return model

    word = session.current_word
    model.current_status = word.status
    model.progress_text = strings["progress"].format(position=session.position, total=len(words))

    if session.study_mode == StudyMode.DICTATION:
        model.screen = SCREEN_DICTATION
        model.dictation = _dictation_model(word, session, strings)
    else:
        model.screen = SCREEN_FLASHCARD
        model.flashcard = _flashcard_model(word, session, strings)

    return model
