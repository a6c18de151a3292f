import flet as ft

from bugtracker.config import (
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    COLOR_CARD,
    COLOR_DANGER,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
)
from bugtracker.domain.models import STATUSES, Issue
from bugtracker.ui.helpers import (
    SEVERITY_LABELS,
    STATUS_LABELS,
    format_datetime,
    severity_colors,
    status_color,
)


class IssueListCard(ft.Container):
    def __init__(self, issue: Issue, on_status_change, on_delete):
        super().__init__()
        self.issue = issue
        self.on_status_change = on_status_change
        self.on_delete = on_delete

        self.padding = ft.Padding.all(20)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.border = ft.border.all(1, "transparent")
        self.shadow = ft.BoxShadow(
            blur_radius=4,
            color=ft.Colors.BLACK12,
            offset=ft.Offset(0, 2),
        )
        self.margin = ft.margin.only(bottom=12)

        self.content = self._build_content()

    def _build_severity_badge(self) -> ft.Container:
        bg, fg = severity_colors(self.issue.severity)
        return ft.Container(
            content=ft.Text(
                SEVERITY_LABELS.get(self.issue.severity, self.issue.severity).upper(),
                size=11,
                color=fg,
                weight=ft.FontWeight.BOLD,
            ),
            bgcolor=bg,
            border=ft.border.all(1, fg),
            border_radius=12,
            padding=ft.Padding.symmetric(horizontal=10, vertical=2),
        )

    def _build_status_button(self, status: str) -> ft.Control:
        label = STATUS_LABELS[status]
        if status == self.issue.status:
            return ft.FilledButton(
                label,
                style=ft.ButtonStyle(
                    bgcolor=status_color(status),
                    color="white",
                    shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
                ),
            )
        return ft.OutlinedButton(
            label,
            style=ft.ButtonStyle(
                color=status_color(status),
                shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
            ),
            on_click=lambda e, s=status: self.on_status_change(self.issue.id, s),
        )

    def _build_content(self):
        issue = self.issue

        body = [
            ft.Row(
                controls=[
                    ft.Text(
                        issue.title,
                        weight=ft.FontWeight.BOLD,
                        size=18,
                        color=COLOR_TEXT_MAIN,
                        expand=True,
                    ),
                    self._build_severity_badge(),
                ],
                spacing=12,
                vertical_alignment=ft.CrossAxisAlignment.START,
            ),
            ft.Text(issue.description, size=14, color=COLOR_TEXT_MAIN),
        ]
        if issue.steps:
            body.append(
                ft.Container(
                    content=ft.Column(
                        controls=[
                            ft.Text(
                                "Étapes de reproduction :",
                                size=12,
                                weight=ft.FontWeight.W_600,
                                color=COLOR_TEXT_MUTED,
                            ),
                            ft.Text(issue.steps, size=12, color=COLOR_TEXT_MAIN),
                        ],
                        spacing=4,
                    ),
                    bgcolor="#F9FAFB",
                    border_radius=BORDER_RADIUS_BTN,
                    padding=ft.Padding.all(12),
                )
            )
        body.append(
            ft.Row(
                controls=[
                    ft.Text(
                        f"Créé le {format_datetime(issue.created_at)}",
                        size=12,
                        color=COLOR_TEXT_MUTED,
                    ),
                    ft.Container(expand=True),
                    *[self._build_status_button(s) for s in STATUSES],
                    ft.IconButton(
                        icon=ft.Icons.DELETE_OUTLINE,
                        icon_color=COLOR_DANGER,
                        tooltip="Supprimer",
                        on_click=lambda e: self.on_delete(self.issue.id),
                    ),
                ],
                spacing=8,
                wrap=True,
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
            )
        )
        return ft.Column(controls=body, spacing=10)
