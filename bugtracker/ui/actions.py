"""
actions.py - UI-side actions and dialogs
Single responsibility: handle modal flows that mutate issues.
"""

import flet as ft

from bugtracker.config import (
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    COLOR_BORDER,
    COLOR_DANGER,
    COLOR_PRIMARY,
    COLOR_TEXT_MUTED,
)
from bugtracker.domain.errors import ValidationError
from bugtracker.domain.models import (
    DEFAULT_SEVERITY,
    DEFAULT_STATUS,
    SEVERITIES,
    STATUSES,
)
from bugtracker.services.issue_store import IssueStore
from bugtracker.ui.helpers import SEVERITY_LABELS, STATUS_LABELS


def _close(dialog: ft.AlertDialog, page: ft.Page) -> None:
    dialog.open = False
    page.update()


def show_new_issue_dialog(page: ft.Page, store: IssueStore, on_created):
    """Open a dialog to create a new bug and refresh the list on success."""

    def text_field(label: str, **kwargs) -> ft.TextField:
        return ft.TextField(
            label=label,
            border_color=COLOR_BORDER,
            focused_border_color=COLOR_PRIMARY,
            border_radius=BORDER_RADIUS_BTN,
            **kwargs,
        )

    title_field = text_field("Titre *")
    description_field = text_field("Description *", multiline=True, min_lines=3, max_lines=6)
    severity_field = ft.Dropdown(
        label="Sévérité",
        options=[ft.dropdown.Option(key=s, text=SEVERITY_LABELS[s]) for s in SEVERITIES],
        value=DEFAULT_SEVERITY,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
    )
    status_field = ft.Dropdown(
        label="Statut",
        options=[ft.dropdown.Option(key=s, text=STATUS_LABELS[s]) for s in STATUSES],
        value=DEFAULT_STATUS,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
    )
    steps_field = text_field(
        "Étapes de reproduction",
        multiline=True,
        min_lines=3,
        max_lines=8,
        hint_text="1. ...\n2. ...\n3. ...",
    )
    error_text = ft.Text("", color=COLOR_DANGER, size=12)

    def on_save(_e=None):
        try:
            store.create(
                title=(title_field.value or "").strip(),
                description=(description_field.value or "").strip(),
                severity=severity_field.value or DEFAULT_SEVERITY,
                status=status_field.value or DEFAULT_STATUS,
                steps=(steps_field.value or "").strip(),
            )
        except ValidationError:
            error_text.value = "⚠  Le titre et la description sont obligatoires"
            page.update()
            return
        dialog.open = False
        on_created()
        page.update()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Signaler un nouveau bug", weight=ft.FontWeight.BOLD),
        content=ft.Container(
            content=ft.Column(
                controls=[
                    title_field,
                    description_field,
                    ft.Row(
                        controls=[
                            ft.Container(content=severity_field, expand=True),
                            ft.Container(content=status_field, expand=True),
                        ],
                        spacing=12,
                    ),
                    steps_field,
                    error_text,
                ],
                spacing=16,
                tight=True,
                scroll=ft.ScrollMode.AUTO,
            ),
            width=600,
        ),
        actions=[
            ft.TextButton("Annuler", on_click=lambda e: _close(dialog, page)),
            ft.FilledButton(
                "Ajouter le bug",
                style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                on_click=on_save,
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()


def confirm_delete_issue(page: ft.Page, store: IssueStore, issue_id: int, on_deleted):
    """Ask before permanently removing a bug."""

    def confirm_delete(_e=None):
        dialog.open = False
        store.delete(issue_id)
        on_deleted()
        page.update()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Supprimer ce bug ?", weight=ft.FontWeight.BOLD),
        content=ft.Text("Cette action est irréversible.", color=COLOR_TEXT_MUTED),
        actions=[
            ft.TextButton("Annuler", on_click=lambda e: _close(dialog, page)),
            ft.FilledButton(
                "Supprimer", bgcolor=COLOR_DANGER, color="white", on_click=confirm_delete
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()
