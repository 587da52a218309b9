"""Snackbars and dialogs shared by the views."""

from typing import Callable, Dict

import flet as ft

from .theme import DesignTokens


def _close_dialog(page: ft.Page, dialog: ft.AlertDialog) -> None:
    dialog.open = False
    page.update()
    if dialog in page.overlay:
        page.overlay.remove(dialog)
    page.update()


def show_snackbar(page: ft.Page, message: str, error: bool = False) -> None:
    """Show a snackbar notification, replacing any previous one."""
    snackbar = ft.SnackBar(
        content=ft.Row(
            controls=[
                ft.Icon(
                    ft.Icons.ERROR_OUTLINE if error else ft.Icons.CHECK_CIRCLE_OUTLINE,
                    color=DesignTokens.TEXT_ON_ACCENT,
                    size=20,
                ),
                ft.Text(message, color=DesignTokens.TEXT_ON_ACCENT, size=14),
            ],
            spacing=12,
        ),
        bgcolor=DesignTokens.ACCENT_DANGER if error else DesignTokens.ACCENT_SUCCESS,
        duration=3500,
    )
    # Clean up old snackbars
    for ctrl in list(page.overlay):
        if isinstance(ctrl, ft.SnackBar):
            page.overlay.remove(ctrl)
    page.overlay.append(snackbar)
    snackbar.open = True
    page.update()


def confirm(
    page: ft.Page,
    message: str,
    on_confirm: Callable[[], None],
    strings: Dict[str, str],
) -> None:
    """
    Ask for confirmation before a destructive action.

    Args:
        page: Flet page
        message: Question shown to the user
        on_confirm: Called only if the user confirms
        strings: UI label table
    """
    def do_confirm(e):
        _close_dialog(page, dialog)
        on_confirm()

    def cancel(e):
        _close_dialog(page, dialog)

    dialog = ft.AlertDialog(
        modal=True,
        content=ft.Text(message, size=14, color=DesignTokens.TEXT_SECONDARY),
        actions=[
            ft.TextButton(strings["cancel"], on_click=cancel),
            ft.ElevatedButton(
                strings["confirm"],
                on_click=do_confirm,
                style=ft.ButtonStyle(
                    bgcolor=DesignTokens.ACCENT_DANGER,
                    color=DesignTokens.TEXT_ON_ACCENT,
                ),
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
    )

    page.overlay.append(dialog)
    dialog.open = True
    page.update()


def show_error_dialog(page: ft.Page, title: str, message: str, button_label: str = "OK") -> None:
    """Show an error dialog with a single close button."""
    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Row(
            controls=[
                ft.Icon(ft.Icons.ERROR_OUTLINE, color=DesignTokens.ACCENT_DANGER, size=28),
                ft.Text(title, weight=ft.FontWeight.W_700, size=18),
            ],
            spacing=12,
        ),
        content=ft.Text(message, size=14, color=DesignTokens.TEXT_SECONDARY),
        actions=[
            ft.ElevatedButton(
                button_label,
                on_click=lambda e: _close_dialog(page, dialog),
                style=ft.ButtonStyle(
                    bgcolor=DesignTokens.ACCENT_DANGER,
                    color=DesignTokens.TEXT_ON_ACCENT,
                ),
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
    )

    page.overlay.append(dialog)
    dialog.open = True
    page.update()
