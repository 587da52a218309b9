"""
Import View - Welcome screen shown while there are no words.
------------------------------------------------------------

Offers three ways in: a file path, drag & drop onto the window, and
pasting the word list directly.
"""

from typing import Callable, Dict, Optional

import flet as ft

from .theme import DesignTokens


class ImportView:
    """Welcome / upload screen."""

    def __init__(
        self,
        page: ft.Page,
        strings: Dict[str, str],
        on_import_path: Callable[[str], None],
        on_import_text: Callable[[str], None],
    ) -> None:
        """
        Initialize the import view.

        Args:
            page: Flet page instance for updates
            strings: UI label table
            on_import_path: Called with a file path to read
            on_import_text: Called with pasted text to parse
        """
        self.page = page
        self.strings = strings
        self._on_import_path = on_import_path
        self._on_import_text = on_import_text

        # UI References
        self._path_input: Optional[ft.TextField] = None
        self._paste_input: Optional[ft.TextField] = None

        self._container = self._build_view()

    @property
    def container(self) -> ft.Container:
        """Get the main container for this view."""
        return self._container

    def _build_view(self) -> ft.Container:
        s = self.strings

        self._path_input = ft.TextField(
            hint_text=s["path_hint"],
            border_radius=DesignTokens.RADIUS_SM,
            border_color=DesignTokens.BORDER,
            focused_border_color=DesignTokens.ACCENT_PRIMARY,
            text_style=ft.TextStyle(size=14),
            on_submit=self._on_upload_click,
            expand=True,
        )

        upload_button = ft.ElevatedButton(
            content=ft.Row(
                controls=[
                    ft.Icon(ft.Icons.UPLOAD_ROUNDED, size=20),
                    ft.Text(s["upload"], size=15, weight=ft.FontWeight.W_500),
                ],
                spacing=8,
                alignment=ft.MainAxisAlignment.CENTER,
            ),
            style=ft.ButtonStyle(
                color=DesignTokens.TEXT_ON_ACCENT,
                bgcolor={
                    ft.ControlState.DEFAULT: DesignTokens.ACCENT_PRIMARY,
                    ft.ControlState.HOVERED: DesignTokens.ACCENT_PRIMARY_HOVER,
                },
                padding=ft.Padding.symmetric(horizontal=24, vertical=16),
                shape=ft.RoundedRectangleBorder(radius=DesignTokens.RADIUS_MD),
            ),
            on_click=self._on_upload_click,
        )

        self._paste_input = ft.TextField(
            hint_text=s["paste_hint"],
            multiline=True,
            min_lines=5,
            max_lines=10,
            border_radius=DesignTokens.RADIUS_SM,
            border_color=DesignTokens.BORDER,
            focused_border_color=DesignTokens.ACCENT_PRIMARY,
            text_style=ft.TextStyle(size=13),
        )

        paste_button = ft.TextButton(
            content=ft.Text(s["import_pasted"], color=DesignTokens.ACCENT_PRIMARY),
            on_click=self._on_paste_click,
        )

        card = ft.Container(
            content=ft.Column(
                controls=[
                    ft.Container(
                        content=ft.Icon(ft.Icons.MENU_BOOK_ROUNDED, color=DesignTokens.ACCENT_PRIMARY, size=32),
                        width=64,
                        height=64,
                        border_radius=32,
                        bgcolor=DesignTokens.ACCENT_PRIMARY_SOFT,
                        alignment=ft.Alignment(0, 0),
                    ),
                    ft.Text(
                        s["app_title"],
                        size=24,
                        weight=ft.FontWeight.BOLD,
                        color=DesignTokens.TEXT_PRIMARY,
                    ),
                    ft.Text(s["welcome_hint"], size=14, color=DesignTokens.TEXT_SECONDARY,
                            text_align=ft.TextAlign.CENTER),
                    ft.Text(s["format_example"], size=12, color=DesignTokens.TEXT_TERTIARY),
                    ft.Container(height=DesignTokens.SPACING_SM),
                    ft.Row(controls=[self._path_input], spacing=DesignTokens.SPACING_SM),
                    ft.Container(content=upload_button, width=float("inf")),
                    ft.Divider(height=DesignTokens.SPACING_LG, color=DesignTokens.BORDER),
                    self._paste_input,
                    ft.Row(controls=[paste_button], alignment=ft.MainAxisAlignment.END),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=DesignTokens.SPACING_SM,
            ),
            padding=DesignTokens.SPACING_XL,
            width=448,
            border_radius=DesignTokens.RADIUS_LG,
            bgcolor=DesignTokens.BG_CARD,
            shadow=ft.BoxShadow(
                spread_radius=0,
                blur_radius=24,
                color=ft.Colors.with_opacity(0.12, ft.Colors.BLACK),
                offset=ft.Offset(0, 8),
            ),
        )

        return ft.Container(
            content=card,
            expand=True,
            alignment=ft.Alignment(0, 0),
            gradient=ft.LinearGradient(
                begin=ft.Alignment(-1, -1),
                end=ft.Alignment(1, 1),
                colors=["#EEF2FF", "#DBEAFE"],
            ),
        )

    def _on_upload_click(self, e) -> None:
        path = (self._path_input.value or "").strip() if self._path_input else ""
        if path:
            self._on_import_path(path)

    def _on_paste_click(self, e) -> None:
        text = self._paste_input.value if self._paste_input else ""
        self._on_import_text(text or "")

    def reset(self) -> None:
        """Clear both inputs after a successful import."""
        if self._path_input:
            self._path_input.value = ""
        if self._paste_input:
            self._paste_input.value = ""
