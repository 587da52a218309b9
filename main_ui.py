"""
WordMaster: Vocabulary Study App
--------------------------------

A Flet interface for studying term/definition lists with flashcards,
dictation and a word list.
"""

import sys
from pathlib import Path

# Ensure project root is on sys.path for absolute imports
_ROOT = Path(__file__).resolve().parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import flet as ft

from wordmaster.config import Config, SettingsManager, get_strings
from wordmaster.models import FlashcardDirection, StudyMode
from wordmaster.services import (
    ImportResult,
    JSONFileStorage,
    StudySession,
    VocabularyImporter,
    WordStore,
)
from wordmaster.ui import ImportView, StudyView, build_view_model
from wordmaster.ui.feedback import show_error_dialog, show_snackbar
from wordmaster.ui.presenter import SCREEN_WELCOME
from wordmaster.ui.theme import DesignTokens
from wordmaster.utils.logger import get_logger, setup_logger

logger = get_logger("wordmaster.app")


class WordMasterApp:
    """Main application controller."""

    def __init__(self, page: ft.Page) -> None:
        """
        Initialize the application.

        Args:
            page: Flet page instance
        """
        self.page = page
        self.settings = SettingsManager()
        self.strings = get_strings(self.settings.get("UI_LANG"))

        self._setup_page()
        self._init_state()
        self._init_views()
        self._render()

    def _setup_page(self) -> None:
        """Configure page settings and theme."""
        self.page.title = "WordMaster"
        self.page.theme_mode = ft.ThemeMode.LIGHT
        self.page.bgcolor = DesignTokens.BG_PRIMARY
        self.page.theme = ft.Theme(
            color_scheme_seed=DesignTokens.ACCENT_PRIMARY,
            font_family=DesignTokens.FONT_SANS,
        )
        self.page.padding = 0
        self.page.spacing = 0
        self.page.horizontal_alignment = ft.CrossAxisAlignment.CENTER
        self.page.window.min_width = 420
        self.page.window.min_height = 640
        self.page.window.width = 720
        self.page.window.height = 900

    def _init_state(self) -> None:
        """Load the word collection and create the session."""
        self.importer = VocabularyImporter()
        self.store = WordStore(JSONFileStorage(Config.STORAGE_FILE))
        self.store.load()

        self.session = StudySession(
            self.store,
            mode=StudyMode(self.settings.get("DEFAULT_STUDY_MODE")),
            direction=FlashcardDirection(self.settings.get("FLASHCARD_DIRECTION")),
        )
        self.session.on_change(self._on_session_change)

    def _init_views(self) -> None:
        """Create both screens and the content slot that hosts them."""
        self.import_view = ImportView(
            self.page,
            self.strings,
            on_import_path=self._import_file,
            on_import_text=self._import_text,
        )
        self.study_view = StudyView(self.page, self.session, self.strings)

        self.content_area = ft.Container(expand=True, alignment=ft.Alignment(0, -1))
        self.page.add(self.content_area)

        # Drag & drop of vocabulary files
        self.page.on_drop = self._on_file_drop

    # =========================================================================
    # RENDERING
    # =========================================================================

    def _on_session_change(self) -> None:
        # Remember the last direction the user picked
        if self.settings.get("FLASHCARD_DIRECTION") != self.session.direction.value:
            self.settings.set("FLASHCARD_DIRECTION", self.session.direction.value)
        self._render()

    def _render(self) -> None:
        model = build_view_model(self.session, self.strings)
        if model.screen == SCREEN_WELCOME:
            self.content_area.content = self.import_view.container
        else:
            self.study_view.render(model)
            self.content_area.content = self.study_view.container
        self.page.update()

    # =========================================================================
    # IMPORT
    # =========================================================================

    def _on_file_drop(self, e) -> None:
        """Handle file drop events."""
        if e.data:
            self._import_file(e.data)

    def _import_text(self, text: str) -> None:
        self._apply_import(self.importer.parse_text(text))

    def _import_file(self, path: str) -> None:
        if not self.importer.accepts_file(path):
            show_snackbar(self.page, self.strings["drop_txt_only"], error=True)
            return
        self.page.run_task(self._import_file_async, path)

    async def _import_file_async(self, path: str) -> None:
        """Read the file without blocking the UI, then replace the words."""
        try:
            result = await self.importer.import_file_async(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Import of %s failed: %s", path, e)
            show_error_dialog(self.page, self.strings["import_failed"], str(e), self.strings["confirm"])
            return
        self._apply_import(result)

    def _apply_import(self, result: ImportResult) -> None:
        if not self.session.apply_import(result):
            show_snackbar(self.page, self.strings["import_empty"], error=True)
            return

        logger.info("Imported %d words (%d lines skipped)", result.count, result.skipped)
        self.import_view.reset()
        show_snackbar(self.page, self.strings["import_success"].format(count=result.count))


def main(page: ft.Page) -> None:
    """
    Main entry point for Flet application.

    Args:
        page: Flet page instance
    """
    setup_logger(SettingsManager().get("LOG_LEVEL", Config.LOG_LEVEL), Config.LOG_FILE or None)

    try:
        WordMasterApp(page)
    except Exception:
        import traceback
        logger.exception("UI failed to start")
        page.add(
            ft.Container(
                content=ft.Column(
                    controls=[
                        ft.Text("UI failed to start", size=20, weight=ft.FontWeight.BOLD, color=ft.Colors.RED_400),
                        ft.Container(
                            content=ft.Text(traceback.format_exc(), size=11, selectable=True),
                            padding=10,
                            bgcolor=ft.Colors.with_opacity(0.08, ft.Colors.BLACK),
                            border_radius=8,
                        ),
                    ],
                    spacing=10,
                ),
                padding=20,
            )
        )
        page.update()


if __name__ == "__main__":
    ft.run(main)
