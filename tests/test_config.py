"""
Unit Tests for Configuration

SettingsManager persistence, label tables and logger setup.
"""

import json
import logging

import pytest

from wordmaster.config import LANG_CONFIG, SettingsManager, get_strings
from wordmaster.models import FlashcardDirection, StudyMode
from wordmaster.utils.logger import ROOT_LOGGER_NAME, get_logger, setup_logger


class TestSettingsManager:
    """Tests for the JSON-backed preferences singleton."""

    def test_defaults_written_on_first_use(self, settings_file):
        settings = SettingsManager(str(settings_file))

        assert settings.get("FLASHCARD_DIRECTION") == "term-first"
        assert settings.get("DEFAULT_STUDY_MODE") == "flashcard"
        assert settings_file.exists()

    def test_set_persists(self, settings_file):
        SettingsManager(str(settings_file)).set("UI_LANG", "EN")

        assert json.loads(settings_file.read_text(encoding="utf-8"))["UI_LANG"] == "EN"

    def test_values_reloaded_from_file(self, settings_file):
        settings_file.write_text(json.dumps({"DEFAULT_STUDY_MODE": "list"}), encoding="utf-8")

        assert SettingsManager(str(settings_file)).get("DEFAULT_STUDY_MODE") == "list"

    def test_environment_overrides_file(self, settings_file, monkeypatch):
        settings_file.write_text(json.dumps({"UI_LANG": "ZH"}), encoding="utf-8")
        monkeypatch.setenv("WORDMASTER_UI_LANG", "EN")

        assert SettingsManager(str(settings_file)).get("UI_LANG") == "EN"

    def test_corrupt_file_falls_back_to_defaults(self, settings_file):
        settings_file.write_text("{broken", encoding="utf-8")

        assert SettingsManager(str(settings_file)).get("FLASHCARD_DIRECTION") == "term-first"

    def test_singleton(self, settings_file):
        assert SettingsManager(str(settings_file)) is SettingsManager()

    def test_set_normalizes_case(self, settings_file):
        settings = SettingsManager(str(settings_file))
        settings.set("UI_LANG", "en")

        assert settings.get("UI_LANG") == "EN"

    def test_set_rejects_invalid_value(self, settings_file):
        settings = SettingsManager(str(settings_file))

        with pytest.raises(ValueError):
            settings.set("DEFAULT_STUDY_MODE", "cards")
        assert settings.get("DEFAULT_STUDY_MODE") == "flashcard"

    def test_set_rejects_unknown_key(self, settings_file):
        with pytest.raises(KeyError):
            SettingsManager(str(settings_file)).set("THEME", "dark")


class TestInvalidSettings:
    """Bad values fall back to defaults instead of breaking startup."""

    def test_invalid_study_mode_in_file(self, settings_file, caplog, monkeypatch):
        settings_file.write_text(
            json.dumps({"DEFAULT_STUDY_MODE": "cards", "UI_LANG": "EN"}), encoding="utf-8"
        )

        monkeypatch.setattr(logging.getLogger(ROOT_LOGGER_NAME), "propagate", True)
        with caplog.at_level(logging.WARNING, logger=ROOT_LOGGER_NAME):
            settings = SettingsManager(str(settings_file))

        mode = settings.get("DEFAULT_STUDY_MODE")
        assert mode == "flashcard"
        assert StudyMode(mode) == StudyMode.FLASHCARD
        assert settings.get("UI_LANG") == "EN"
        assert "DEFAULT_STUDY_MODE" in caplog.text

    def test_invalid_direction_from_environment(self, settings_file, monkeypatch):
        monkeypatch.setenv("WORDMASTER_FLASHCARD_DIRECTION", "sideways")

        direction = SettingsManager(str(settings_file)).get("FLASHCARD_DIRECTION")

        assert FlashcardDirection(direction) == FlashcardDirection.TERM_FIRST

    def test_non_string_value(self, settings_file):
        settings_file.write_text(json.dumps({"UI_LANG": 42}), encoding="utf-8")

        assert SettingsManager(str(settings_file)).get("UI_LANG") == "ZH"

    def test_fallback_is_written_back(self, settings_file):
        settings_file.write_text(json.dumps({"FLASHCARD_DIRECTION": None}), encoding="utf-8")
        SettingsManager(str(settings_file))

        stored = json.loads(settings_file.read_text(encoding="utf-8"))
        assert stored["FLASHCARD_DIRECTION"] == "term-first"


class TestLanguages:
    """Tests for the two UI label tables."""

    def test_tables_have_same_keys(self):
        assert set(LANG_CONFIG["ZH"]) == set(LANG_CONFIG["EN"])

    def test_lookup_is_case_insensitive(self):
        assert get_strings("en") is LANG_CONFIG["EN"]

    def test_unknown_language_falls_back_to_chinese(self):
        assert get_strings("FR") is LANG_CONFIG["ZH"]


class TestLogger:
    """Tests for setup_logger()."""

    def test_setup_is_idempotent(self):
        setup_logger("DEBUG")
        logger = setup_logger("WARNING")

        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "wordmaster.log"
        setup_logger("INFO", str(log_file))

        get_logger(f"{ROOT_LOGGER_NAME}.tests").info("hello from tests")

        for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
            handler.flush()
        assert "hello from tests" in log_file.read_text(encoding="utf-8")

        setup_logger("INFO")  # release the file handle
