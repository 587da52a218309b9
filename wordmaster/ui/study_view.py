"""
Study View - Flashcards, dictation drill and word list.
--------------------------------------------------------

Draws a ViewModel from the presenter and forwards every user action to
the StudySession. The view never mutates words itself.
"""

from typing import Dict, List, Optional

import flet as ft

from ..models import DictationResult, FilterMode, StudyMode, WordStatus
from ..services.session import StudySession
from .feedback import confirm
from .presenter import (
    SCREEN_DICTATION,
    SCREEN_EMPTY,
    SCREEN_FLASHCARD,
    SCREEN_LIST,
    DictationModel,
    FlashcardModel,
    ListRowModel,
    ViewModel,
)
from .theme import DesignTokens


class StudyView:
    """
    Main study screen: header with stats and controls, then the body for
    the active mode.
    """

    MODES = (
        (StudyMode.FLASHCARD, "mode_flashcard"),
        (StudyMode.DICTATION, "mode_dictation"),
        (StudyMode.LIST, "mode_list"),
    )

    def __init__(self, page: ft.Page, session: StudySession, strings: Dict[str, str]) -> None:
        """
        Initialize the study view.

        Args:
            page: Flet page instance for updates
            session: Session controller receiving user actions
            strings: UI label table
        """
        self.page = page
        self.session = session
        self.strings = strings

        # Kept across renders so typing does not lose focus
        self._dictation_input = ft.TextField(
            hint_text=strings["dictation_placeholder"],
            text_align=ft.TextAlign.CENTER,
            text_style=ft.TextStyle(size=18),
            border_radius=DesignTokens.RADIUS_MD,
            autocorrect=False,
            enable_suggestions=False,
            capitalization=ft.TextCapitalization.NONE,
            on_change=lambda e: self.session.set_dictation_input(e.control.value),
            on_submit=lambda e: self._on_dictation_submit(),
        )

        self._header = ft.Container()
        self._body = ft.Container(expand=True)
        self._container = ft.Container(
            content=ft.Column(
                controls=[self._header, self._body],
                spacing=0,
                expand=True,
            ),
            expand=True,
            width=DesignTokens.CONTENT_MAX_WIDTH,
            bgcolor=DesignTokens.BG_PRIMARY,
        )

    @property
    def container(self) -> ft.Container:
        """Get the main container for this view."""
        return self._container

    # =========================================================================
    # RENDER
    # =========================================================================

    def render(self, model: ViewModel) -> None:
        """Rebuild header and body from a view model (no page.update)."""
        self._header.content = self._build_header(model)

        if model.screen == SCREEN_EMPTY:
            body = self._build_empty_state(model)
        elif model.screen == SCREEN_LIST:
            body = self._build_list(model.rows)
        else:
            body = self._build_study_area(model)

        self._body.content = ft.Container(
            content=body,
            padding=DesignTokens.SPACING_MD,
            expand=True,
        )

    def _build_header(self, model: ViewModel) -> ft.Container:
        s = self.strings

        title_row = ft.Row(
            controls=[
                ft.Row(
                    controls=[
                        ft.Icon(ft.Icons.MENU_BOOK_ROUNDED, color=DesignTokens.ACCENT_PRIMARY, size=24),
                        ft.Text("WordMaster", size=20, weight=ft.FontWeight.BOLD,
                                color=DesignTokens.TEXT_PRIMARY),
                    ],
                    spacing=DesignTokens.SPACING_SM,
                ),
                ft.Row(
                    controls=[
                        ft.IconButton(
                            icon=ft.Icons.SHUFFLE_ROUNDED,
                            icon_color=DesignTokens.TEXT_SECONDARY,
                            tooltip=s["shuffle"],
                            on_click=lambda e: self.session.shuffle(),
                        ),
                        ft.IconButton(
                            icon=ft.Icons.RESTART_ALT_ROUNDED,
                            icon_color=DesignTokens.TEXT_SECONDARY,
                            tooltip=s["reset"],
                            on_click=lambda e: self._confirm_reset(),
                        ),
                        ft.IconButton(
                            icon=ft.Icons.DELETE_OUTLINE_ROUNDED,
                            icon_color=DesignTokens.ACCENT_DANGER,
                            tooltip=s["clear"],
                            on_click=lambda e: self._confirm_clear(),
                        ),
                    ],
                    spacing=DesignTokens.SPACING_XS,
                ),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        )

        stats = model.stats
        stats_row = ft.Row(
            controls=[
                self._stat_tile(s["familiar"], stats.get("familiar", 0),
                                DesignTokens.ACCENT_SUCCESS, DesignTokens.ACCENT_SUCCESS_SOFT),
                self._stat_tile(s["unknown"], stats.get("unknown", 0),
                                DesignTokens.ACCENT_DANGER, DesignTokens.ACCENT_DANGER_SOFT),
                self._stat_tile(s["total"], stats.get("total", 0),
                                DesignTokens.ACCENT_INFO, DesignTokens.ACCENT_INFO_SOFT),
            ],
            spacing=DesignTokens.SPACING_SM,
        )

        unknown_only = model.filter_mode == FilterMode.UNKNOWN
        filter_button = ft.OutlinedButton(
            content=ft.Row(
                controls=[
                    ft.Icon(ft.Icons.FILTER_ALT_OUTLINED, size=16),
                    ft.Text(model.filter_label, size=13, weight=ft.FontWeight.W_500),
                ],
                spacing=6,
                tight=True,
            ),
            style=ft.ButtonStyle(
                color=DesignTokens.ACCENT_DANGER if unknown_only else DesignTokens.TEXT_SECONDARY,
                bgcolor=DesignTokens.ACCENT_DANGER_SOFT if unknown_only else DesignTokens.BG_SURFACE,
                shape=ft.RoundedRectangleBorder(radius=DesignTokens.RADIUS_SM),
            ),
            on_click=lambda e: self.session.toggle_filter(),
        )

        controls_row = ft.Row(
            controls=[
                ft.Container(content=self._build_mode_switcher(model.study_mode), expand=True),
                filter_button,
            ],
            spacing=DesignTokens.SPACING_SM,
        )

        return ft.Container(
            content=ft.Column(
                controls=[title_row, stats_row, controls_row],
                spacing=DesignTokens.SPACING_MD,
            ),
            padding=DesignTokens.SPACING_MD,
            bgcolor=DesignTokens.BG_SURFACE,
            shadow=ft.BoxShadow(
                blur_radius=4,
                color=ft.Colors.with_opacity(0.08, ft.Colors.BLACK),
                offset=ft.Offset(0, 1),
            ),
        )

    def _stat_tile(self, label: str, value: int, color: str, bgcolor: str) -> ft.Container:
        return ft.Container(
            content=ft.Column(
                controls=[
                    ft.Text(label, size=11, weight=ft.FontWeight.BOLD, color=color),
                    ft.Text(str(value), size=18, weight=ft.FontWeight.BOLD, color=color),
                ],
                spacing=2,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            padding=DesignTokens.SPACING_SM,
            border_radius=DesignTokens.RADIUS_SM,
            bgcolor=bgcolor,
            expand=True,
        )

    def _build_mode_switcher(self, active: StudyMode) -> ft.Container:
        buttons = []
        for mode, label_key in self.MODES:
            selected = mode == active
            buttons.append(
                ft.Container(
                    content=ft.Text(
                        self.strings[label_key],
                        size=13,
                        weight=ft.FontWeight.W_500,
                        color=DesignTokens.ACCENT_PRIMARY if selected else DesignTokens.TEXT_TERTIARY,
                        text_align=ft.TextAlign.CENTER,
                    ),
                    padding=ft.Padding.symmetric(vertical=6),
                    border_radius=6,
                    bgcolor=DesignTokens.BG_SURFACE if selected else None,
                    alignment=ft.Alignment(0, 0),
                    expand=True,
                    ink=True,
                    on_click=lambda e, m=mode: self.session.set_mode(m),
                )
            )

        return ft.Container(
            content=ft.Row(controls=buttons, spacing=DesignTokens.SPACING_XS),
            padding=DesignTokens.SPACING_XS,
            border_radius=DesignTokens.RADIUS_SM,
            bgcolor=DesignTokens.BG_MUTED,
        )

    # =========================================================================
    # EMPTY STATE & LIST
    # =========================================================================

    def _build_empty_state(self, model: ViewModel) -> ft.Control:
        s = self.strings
        controls: List[ft.Control] = [
            ft.Icon(ft.Icons.EMOJI_EVENTS_OUTLINED, size=64, color=DesignTokens.TEXT_TERTIARY),
            ft.Text(s["empty_view"], size=18, color=DesignTokens.TEXT_SECONDARY),
        ]
        if model.offer_show_all:
            controls.append(ft.TextButton(
                s["show_all"],
                on_click=lambda e: self.session.set_filter(FilterMode.ALL),
            ))
        if model.offer_reset:
            controls.append(ft.TextButton(
                content=ft.Row(
                    controls=[ft.Icon(ft.Icons.RESTART_ALT_ROUNDED, size=16), ft.Text(s["reset"])],
                    spacing=6,
                    tight=True,
                ),
                on_click=lambda e: self._confirm_reset(),
            ))

        return ft.Column(
            controls=controls,
            alignment=ft.MainAxisAlignment.CENTER,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            expand=True,
        )

    def _build_list(self, rows: List[ListRowModel]) -> ft.Control:
        return ft.ListView(
            controls=[self._build_list_row(row) for row in rows],
            spacing=DesignTokens.SPACING_SM,
            expand=True,
        )

    def _build_list_row(self, row: ListRowModel) -> ft.Container:
        return ft.Container(
            content=ft.Row(
                controls=[
                    ft.Column(
                        controls=[
                            ft.Text(row.term, weight=ft.FontWeight.BOLD, color=DesignTokens.TEXT_PRIMARY),
                            ft.Text(row.definition, size=13, color=DesignTokens.TEXT_SECONDARY),
                        ],
                        spacing=2,
                        expand=True,
                    ),
                    ft.IconButton(
                        icon=ft.Icons.CHECK_ROUNDED,
                        icon_color=DesignTokens.ACCENT_SUCCESS if row.is_familiar else DesignTokens.TEXT_TERTIARY,
                        bgcolor=DesignTokens.ACCENT_SUCCESS_SOFT if row.is_familiar else DesignTokens.BG_MUTED,
                        on_click=lambda e, word_id=row.word_id: self.session.toggle_word_status(word_id),
                    ),
                ],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            ),
            padding=DesignTokens.SPACING_MD,
            border_radius=DesignTokens.RADIUS_MD,
            bgcolor=DesignTokens.BG_CARD,
            border=ft.Border.all(1, DesignTokens.BORDER),
        )

    # =========================================================================
    # FLASHCARD & DICTATION
    # =========================================================================

    def _build_study_area(self, model: ViewModel) -> ft.Control:
        if model.screen == SCREEN_FLASHCARD and model.flashcard:
            content = self._build_flashcard(model.flashcard)
        elif model.screen == SCREEN_DICTATION and model.dictation:
            content = self._build_dictation(model.dictation)
        else:
            content = ft.Container()

        return ft.Column(
            controls=[
                ft.Text(model.progress_text, size=13, color=DesignTokens.TEXT_TERTIARY,
                        text_align=ft.TextAlign.CENTER),
                ft.Container(content=content, expand=True, alignment=ft.Alignment(0, 0)),
                self._build_rating_row(model.current_status),
                self._build_navigation_row(),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
            spacing=DesignTokens.SPACING_MD,
            expand=True,
        )

    def _build_flashcard(self, card: FlashcardModel) -> ft.Control:
        label, text, color = (
            (card.back_label, card.back_text, DesignTokens.ACCENT_PRIMARY)
            if card.is_flipped
            else (card.front_label, card.front_text, DesignTokens.TEXT_PRIMARY)
        )

        face_controls: List[ft.Control] = [
            ft.Text(label.upper(), size=13, color=DesignTokens.TEXT_TERTIARY),
            ft.Text(text, size=30, weight=ft.FontWeight.BOLD, color=color, text_align=ft.TextAlign.CENTER),
        ]
        if not card.is_flipped:
            face_controls.append(ft.Row(
                controls=[
                    ft.Icon(ft.Icons.VISIBILITY_OUTLINED, size=16, color=DesignTokens.TEXT_TERTIARY),
                    ft.Text(self.strings["tap_to_flip"], size=13, color=DesignTokens.TEXT_TERTIARY),
                ],
                alignment=ft.MainAxisAlignment.CENTER,
                spacing=4,
            ))

        direction_toggle = ft.Container(
            content=ft.Row(
                controls=[
                    ft.Icon(ft.Icons.SWAP_HORIZ_ROUNDED, size=14, color=DesignTokens.ACCENT_PRIMARY),
                    ft.Text(card.direction_label, size=12, color=DesignTokens.ACCENT_PRIMARY),
                ],
                spacing=4,
                tight=True,
            ),
            padding=ft.Padding.symmetric(horizontal=8, vertical=4),
            border_radius=6,
            bgcolor=DesignTokens.ACCENT_PRIMARY_SOFT,
            on_click=lambda e: self.session.toggle_direction(),
            ink=True,
        )

        card_face = ft.Container(
            content=ft.Column(
                controls=face_controls,
                alignment=ft.MainAxisAlignment.CENTER,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=DesignTokens.SPACING_MD,
            ),
            height=DesignTokens.CARD_HEIGHT,
            padding=DesignTokens.SPACING_XL,
            border_radius=DesignTokens.RADIUS_LG,
            bgcolor=DesignTokens.BG_CARD,
            border=ft.Border.all(2, DesignTokens.ACCENT_PRIMARY_SOFT),
            shadow=ft.BoxShadow(
                blur_radius=16,
                color=ft.Colors.with_opacity(0.1, ft.Colors.BLACK),
                offset=ft.Offset(0, 6),
            ),
            alignment=ft.Alignment(0, 0),
            on_click=lambda e: self.session.flip(),
        )

        return ft.Column(
            controls=[
                ft.Row(controls=[direction_toggle], alignment=ft.MainAxisAlignment.END),
                card_face,
            ],
            horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
            spacing=DesignTokens.SPACING_SM,
        )

    def _build_dictation(self, drill: DictationModel) -> ft.Control:
        s = self.strings
        field = self._dictation_input
        if field.value != drill.input_text:
            field.value = drill.input_text

        if drill.result == DictationResult.CORRECT:
            field.border_color, field.bgcolor = DesignTokens.ACCENT_SUCCESS, DesignTokens.ACCENT_SUCCESS_SOFT
        elif drill.result == DictationResult.INCORRECT:
            field.border_color, field.bgcolor = DesignTokens.ACCENT_DANGER, DesignTokens.ACCENT_DANGER_SOFT
        else:
            field.border_color, field.bgcolor = DesignTokens.BORDER, None

        feedback: List[ft.Control] = []
        if drill.result == DictationResult.INCORRECT:
            feedback.append(ft.Text(s["incorrect"], color=DesignTokens.ACCENT_DANGER, weight=ft.FontWeight.W_500))
            if drill.answer is not None:
                feedback.append(ft.Text(drill.answer, size=20, weight=ft.FontWeight.BOLD,
                                        color=DesignTokens.ACCENT_PRIMARY))
            elif drill.can_reveal:
                feedback.append(ft.TextButton(s["reveal"], on_click=lambda e: self.session.reveal_answer()))
        elif drill.result == DictationResult.CORRECT:
            feedback.append(ft.Text(s["correct"], size=18, weight=ft.FontWeight.BOLD,
                                    color=DesignTokens.ACCENT_SUCCESS))

        correct = drill.result == DictationResult.CORRECT
        action_button = ft.ElevatedButton(
            drill.action_label,
            style=ft.ButtonStyle(
                color=DesignTokens.TEXT_ON_ACCENT,
                bgcolor=DesignTokens.ACCENT_SUCCESS if correct else DesignTokens.ACCENT_PRIMARY,
                padding=ft.Padding.symmetric(vertical=16),
                shape=ft.RoundedRectangleBorder(radius=DesignTokens.RADIUS_MD),
            ),
            on_click=lambda e: self._on_dictation_submit(),
        )

        return ft.Container(
            content=ft.Column(
                controls=[
                    ft.Text(s["label_definition"].upper(), size=13, color=DesignTokens.TEXT_TERTIARY),
                    ft.Text(drill.prompt, size=24, weight=ft.FontWeight.BOLD,
                            color=DesignTokens.TEXT_PRIMARY, text_align=ft.TextAlign.CENTER),
                    ft.Container(height=DesignTokens.SPACING_MD),
                    field,
                    *feedback,
                    ft.Container(content=action_button, width=float("inf")),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=DesignTokens.SPACING_SM,
            ),
            padding=DesignTokens.SPACING_XL,
            border_radius=DesignTokens.RADIUS_LG,
            bgcolor=DesignTokens.BG_CARD,
            border=ft.Border.all(2, DesignTokens.ACCENT_PRIMARY_SOFT),
        )

    def _build_rating_row(self, current: Optional[WordStatus]) -> ft.Row:
        s = self.strings

        def rate_button(status: WordStatus, icon: str, label: str, color: str, soft: str) -> ft.Container:
            active = current == status
            return ft.Container(
                content=ft.Column(
                    controls=[
                        ft.Icon(icon, size=24, color=color if active else DesignTokens.TEXT_TERTIARY),
                        ft.Text(label, size=12, weight=ft.FontWeight.BOLD,
                                color=color if active else DesignTokens.TEXT_TERTIARY),
                    ],
                    spacing=4,
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                ),
                padding=ft.Padding.symmetric(vertical=16),
                border_radius=DesignTokens.RADIUS_MD,
                border=ft.Border.all(2, soft if active else DesignTokens.BORDER),
                bgcolor=soft if active else None,
                expand=True,
                ink=True,
                on_click=lambda e: self.session.rate(status),
            )

        return ft.Row(
            controls=[
                rate_button(WordStatus.UNKNOWN, ft.Icons.CLOSE_ROUNDED, s["rate_unknown"],
                            DesignTokens.ACCENT_DANGER, DesignTokens.ACCENT_DANGER_SOFT),
                rate_button(WordStatus.FAMILIAR, ft.Icons.CHECK_ROUNDED, s["rate_familiar"],
                            DesignTokens.ACCENT_SUCCESS, DesignTokens.ACCENT_SUCCESS_SOFT),
            ],
            spacing=DesignTokens.SPACING_MD,
        )

    def _build_navigation_row(self) -> ft.Row:
        return ft.Row(
            controls=[
                ft.TextButton(self.strings["prev"], on_click=lambda e: self.session.retreat()),
                ft.TextButton(self.strings["skip"], on_click=lambda e: self.session.advance()),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        )

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def _on_dictation_submit(self) -> None:
        # Flet may deliver on_submit before the last on_change
        if self._dictation_input.value != self.session.dictation_input:
            self.session.set_dictation_input(self._dictation_input.value or "")
        self.session.submit_dictation()

    def _confirm_clear(self) -> None:
        confirm(self.page, self.strings["clear_confirm"], self.session.clear_all, self.strings)

    def _confirm_reset(self) -> None:
        confirm(self.page, self.strings["reset_confirm"], self.session.reset_progress, self.strings)
