"""
Unit Tests for the Presenter

The view model is a pure function of the session, so the screen logic is
tested without a running Flet page.
"""

from wordmaster.config import get_strings
from wordmaster.models import DictationResult, FilterMode, StudyMode, WordStatus
from wordmaster.services import InMemoryStorage, StudySession, WordStore
from wordmaster.ui.presenter import (
    SCREEN_DICTATION,
    SCREEN_EMPTY,
    SCREEN_FLASHCARD,
    SCREEN_LIST,
    SCREEN_WELCOME,
    build_view_model,
)


class TestScreens:
    """Which screen is shown for which state."""

    def test_welcome_when_no_words(self, strings):
        session = StudySession(WordStore(InMemoryStorage()))
        model = build_view_model(session, strings)

        assert model.screen == SCREEN_WELCOME
        assert not model.shows_rating

    def test_flashcard_is_default(self, session, strings):
        model = build_view_model(session, strings)

        assert model.screen == SCREEN_FLASHCARD
        assert model.shows_rating
        assert model.stats == {"total": 4, "familiar": 1, "unknown": 3, "unrated": 0}

    def test_empty_view_offers_show_all(self, session, strings):
        for word_id in (1, 3, 4):
            session.store.set_status(word_id, WordStatus.FAMILIAR)
        session.set_filter(FilterMode.UNKNOWN)

        model = build_view_model(session, strings)

        assert model.screen == SCREEN_EMPTY
        assert model.offer_show_all
        assert not model.offer_reset
        assert not model.shows_rating

    def test_filter_label(self, session, strings):
        assert build_view_model(session, strings).filter_label == strings["filter_all"]
        session.toggle_filter()
        assert build_view_model(session, strings).filter_label == strings["filter_unknown"]


class TestFlashcardModel:
    """Card faces and progress text."""

    def test_term_first(self, session, strings):
        card = build_view_model(session, strings).flashcard

        assert (card.front_label, card.front_text) == ("Term", "apple")
        assert (card.back_label, card.back_text) == ("Definition", "苹果")
        assert card.direction_label == strings["direction_term_first"]
        assert not card.is_flipped

    def test_definition_first(self, session, strings):
        session.toggle_direction()
        session.flip()

        card = build_view_model(session, strings).flashcard

        assert card.front_text == "苹果"
        assert card.back_text == "apple"
        assert card.is_flipped

    def test_progress_text(self, session, strings):
        session.advance()
        model = build_view_model(session, strings)

        assert model.progress_text == "单词 2 / 4"
        assert model.current_status == WordStatus.FAMILIAR

    def test_progress_uses_filtered_view(self, session):
        session.set_filter(FilterMode.UNKNOWN)
        model = build_view_model(session, get_strings("EN"))

        assert model.progress_text == "Word 1 / 3"


class TestDictationModel:
    """Prompt, feedback and the reveal flow."""

    def test_idle(self, session, strings):
        session.set_mode(StudyMode.DICTATION)
        drill = build_view_model(session, strings).dictation

        assert build_view_model(session, strings).screen == SCREEN_DICTATION
        assert drill.prompt == "苹果"
        assert drill.result == DictationResult.NONE
        assert drill.answer is None
        assert drill.action_label == strings["check"]

    def test_incorrect_then_reveal(self, session, strings):
        session.set_mode(StudyMode.DICTATION)
        session.set_dictation_input("appel")
        session.check_dictation()

        drill = build_view_model(session, strings).dictation
        assert drill.can_reveal
        assert drill.answer is None
        assert drill.input_text == "appel"

        session.reveal_answer()

        drill = build_view_model(session, strings).dictation
        assert not drill.can_reveal
        assert drill.answer == "apple"

    def test_correct_switches_action(self, session, strings):
        session.set_mode(StudyMode.DICTATION)
        session.set_dictation_input("Apple")
        session.check_dictation()

        drill = build_view_model(session, strings).dictation
        assert drill.result == DictationResult.CORRECT
        assert drill.action_label == strings["next"]


class TestListModel:
    """List rows follow the active filter."""

    def test_rows(self, session, strings):
        session.set_mode(StudyMode.LIST)
        model = build_view_model(session, strings)

        assert model.screen == SCREEN_LIST
        assert [r.term for r in model.rows] == ["apple", "cat", "dog", "foo"]
        assert [r.is_familiar for r in model.rows] == [False, True, False, False]
        assert not model.shows_rating

    def test_rows_filtered(self, session, strings):
        session.set_mode(StudyMode.LIST)
        session.set_filter(FilterMode.UNKNOWN)

        rows = build_view_model(session, strings).rows

        assert [r.word_id for r in rows] == [1, 3, 4]
