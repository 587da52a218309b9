"""Persistent user preferences with JSON storage and environment overrides."""

import json
import os
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Optional, Tuple

from ..models import FlashcardDirection, StudyMode
from ..utils.logger import get_logger
from .languages import LANG_CONFIG
from .settings import Config

logger = get_logger(__name__)


class SettingsManager:
    """
    Manages user preferences with JSON persistence.

    Values come from the defaults, then the JSON file, then WORDMASTER_*
    environment variables. A value outside its allowed choices is replaced
    by the default and logged, so a hand-edited file never stops startup.

    Usage:
        settings = SettingsManager()
        direction = settings.get("FLASHCARD_DIRECTION")
        settings.set("UI_LANG", "EN")
    """

    _instance: Optional["SettingsManager"] = None
    _lock: Lock = Lock()

    DEFAULT_SETTINGS_FILE: str = Config.SETTINGS_FILE

    DEFAULTS: Dict[str, str] = {
        "UI_LANG": "ZH",
        "DEFAULT_STUDY_MODE": StudyMode.FLASHCARD.value,
        "FLASHCARD_DIRECTION": FlashcardDirection.TERM_FIRST.value,
        "LOG_LEVEL": "INFO",
    }

    CHOICES: Dict[str, Tuple[str, ...]] = {
        "UI_LANG": tuple(LANG_CONFIG),
        "DEFAULT_STUDY_MODE": tuple(m.value for m in StudyMode),
        "FLASHCARD_DIRECTION": tuple(d.value for d in FlashcardDirection),
        "LOG_LEVEL": ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
    }

    # Keys whose choices are upper case
    _UPPER_KEYS = ("UI_LANG", "LOG_LEVEL")

    def __new__(cls, settings_file: Optional[str] = None) -> "SettingsManager":
        """Singleton pattern to ensure only one instance exists."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._initialized = False
                    cls._instance = instance
        return cls._instance

    def __init__(self, settings_file: Optional[str] = None) -> None:
        """
        Initialize the settings manager.

        Args:
            settings_file: Path to the settings JSON file.
                          Defaults to data/settings.json under the project root.
        """
        if getattr(self, "_initialized", False):
            return

        self._settings_file: Path = Path(settings_file or self.DEFAULT_SETTINGS_FILE)
        self._settings: Dict[str, str] = {}
        self._file_lock: Lock = Lock()

        self._load_settings()
        self._initialized = True

    def _load_settings(self) -> None:
        """Load settings from JSON file, then apply environment overrides."""
        raw: Dict[str, Any] = {}

        if self._settings_file.exists():
            try:
                with open(self._settings_file, "r", encoding="utf-8") as f:
                    file_settings = json.load(f)
                if isinstance(file_settings, dict):
                    raw.update(file_settings)
                else:
                    logger.warning("Ignoring settings file %s: not a JSON object", self._settings_file)
            except (json.JSONDecodeError, IOError) as e:
                logger.warning("Could not load settings file: %s", e)

        # Environment variables win, e.g. WORDMASTER_UI_LANG=EN
        for key in self.DEFAULTS:
            env_value = os.environ.get(f"WORDMASTER_{key}")
            if env_value is not None:
                raw[key] = env_value

        self._settings = {}
        for key, default in self.DEFAULTS.items():
            if key not in raw:
                self._settings[key] = default
                continue
            value = self._normalize(key, raw[key])
            if value is None:
                logger.warning("Invalid value %r for %s, using %r", raw[key], key, default)
                value = default
            self._settings[key] = value

        self._save_settings()

    def _normalize(self, key: str, value: Any) -> Optional[str]:
        """
        Coerce a raw value into one of the allowed choices for `key`.

        Returns:
            The normalized value, or None if it is not allowed
        """
        if not isinstance(value, str):
            return None
        value = value.strip()
        value = value.upper() if key in self._UPPER_KEYS else value.lower()
        return value if value in self.CHOICES[key] else None

    def _save_settings(self) -> None:
        """Save current settings to JSON file."""
        with self._file_lock:
            try:
                self._settings_file.parent.mkdir(parents=True, exist_ok=True)

                with open(self._settings_file, "w", encoding="utf-8") as f:
                    json.dump(self._settings, f, indent=2, ensure_ascii=False)
            except IOError as e:
                logger.warning("Could not save settings file: %s", e)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value.

        Args:
            key: The setting key
            default: Returned if key is not a known setting

        Returns:
            The setting value, or default if not found
        """
        return self._settings.get(key, default)

    def set(self, key: str, value: str) -> None:
        """
        Set a setting value and immediately persist to disk.

        Args:
            key: The setting key
            value: The value to set

        Raises:
            KeyError: If key is not a known setting
            ValueError: If value is not one of the allowed choices
        """
        if key not in self.DEFAULTS:
            raise KeyError(key)
        normalized = self._normalize(key, value)
        if normalized is None:
            raise ValueError(f"{value!r} is not a valid {key}; expected one of {self.CHOICES[key]}")
        self._settings[key] = normalized
        self._save_settings()

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance. Useful for testing."""
        with cls._lock:
            cls._instance = None
