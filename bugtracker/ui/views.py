"""
views.py - UI view builders
Single responsibility: build flet Views using provided callbacks/state.
"""

import asyncio

import flet as ft

from bugtracker.config import (
    APP_SUBTITLE,
    APP_TITLE,
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    COLOR_ACCENT,
    COLOR_BG,
    COLOR_CARD,
    COLOR_PRIMARY,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
    SEARCH_DEBOUNCE_SECONDS,
    STATUS_COLORS,
)
from bugtracker.domain.models import STATUS_FILTER_ALL, STATUSES, IssueStats
from bugtracker.services.issue_store import IssueStore
from bugtracker.ui.components.issue_card import IssueListCard
from bugtracker.ui.helpers import FILTER_LABELS, empty_state_hint


def build_header(on_new_issue) -> ft.Container:
    return ft.Container(
        content=ft.Row(
            controls=[
                ft.Container(
                    content=ft.Icon(ft.Icons.BUG_REPORT, color="white", size=32),
                    gradient=ft.LinearGradient(colors=[COLOR_PRIMARY, COLOR_ACCENT]),
                    border_radius=BORDER_RADIUS_CARD,
                    padding=ft.Padding.all(12),
                ),
                ft.Column(
                    controls=[
                        ft.Text(APP_TITLE, size=28, weight=ft.FontWeight.BOLD, color=COLOR_PRIMARY),
                        ft.Text(APP_SUBTITLE, size=13, color=COLOR_TEXT_MUTED),
                    ],
                    spacing=2,
                    expand=True,
                ),
                ft.FilledButton(
                    "Nouveau bug",
                    icon=ft.Icons.ADD,
                    style=ft.ButtonStyle(
                        bgcolor=COLOR_PRIMARY,
                        color="white",
                        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
                    ),
                    on_click=lambda e: on_new_issue(),
                ),
            ],
            spacing=16,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        padding=ft.Padding.all(24),
        bgcolor=COLOR_CARD,
        border_radius=BORDER_RADIUS_CARD,
        shadow=ft.BoxShadow(blur_radius=8, color=ft.Colors.BLACK12, offset=ft.Offset(0, 2)),
    )


def build_stats_row(stats: IssueStats) -> ft.ResponsiveRow:
    def stat_card(label: str, value: int, color: str) -> ft.Container:
        return ft.Container(
            content=ft.Column(
                controls=[
                    ft.Text(label, size=13, color=COLOR_TEXT_MUTED),
                    ft.Text(str(value), size=28, weight=ft.FontWeight.BOLD, color=color),
                ],
                spacing=4,
            ),
            padding=ft.Padding.all(16),
            bgcolor=COLOR_CARD,
            border_radius=BORDER_RADIUS_CARD,
            shadow=ft.BoxShadow(blur_radius=2, color=ft.Colors.BLACK12, offset=ft.Offset(0, 1)),
            col={"xs": 6, "md": 3},
        )

    return ft.ResponsiveRow(
        controls=[
            stat_card("Total", stats.total, COLOR_TEXT_MAIN),
            stat_card("Ouverts", stats.open, STATUS_COLORS["open"]),
            stat_card("En cours", stats.in_progress, STATUS_COLORS["in-progress"]),
            stat_card("Résolus", stats.resolved, STATUS_COLORS["resolved"]),
        ],
        spacing=12,
        run_spacing=12,
    )


def _build_empty_state(total: int) -> ft.Container:
    return ft.Container(
        content=ft.Column(
            [
                ft.Icon(ft.Icons.BUG_REPORT, size=64, color="#d0d7de"),
                ft.Text("Aucun bug trouvé", color=COLOR_TEXT_MUTED, size=16),
                ft.Text(empty_state_hint(total), color=COLOR_TEXT_MUTED, size=13),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        alignment=ft.Alignment.CENTER,
        padding=60,
        expand=True,
    )


def build_issue_list_view(
    page: ft.Page,
    state,
    store: IssueStore,
    on_new_issue,
    on_status_change,
    on_delete_issue,
    on_filter_change,
):
    search_task: asyncio.Task | None = None

    issues, stats = store.current_view(state.filter.status, state.filter.keyword)

    list_column_ref = ft.Ref[ft.Column]()

    def build_card(issue) -> IssueListCard:
        return IssueListCard(issue, on_status_change=on_status_change, on_delete=on_delete_issue)

    def _list_controls(items, total: int) -> list[ft.Control]:
        if not items:
            return [_build_empty_state(total)]
        return [build_card(issue) for issue in items]

    def _update_list_content_inplace():
        """Update only the issue list controls without rebuilding the whole view."""
        col = list_column_ref.current
        if col is None:
            on_filter_change()
            return
        items, current = store.current_view(state.filter.status, state.filter.keyword)
        col.controls = _list_controls(items, current.total)
        col.update()

    async def _debounced_search(term_snapshot: str):
        # Debounce to avoid rebuilding the list on every keystroke
        try:
            await asyncio.sleep(SEARCH_DEBOUNCE_SECONDS)
        except asyncio.CancelledError:
            return
        if term_snapshot == state.filter.keyword:
            _update_list_content_inplace()

    def on_search(e):
        nonlocal search_task
        state.filter.keyword = e.control.value or ""
        if search_task and not search_task.done():
            search_task.cancel()

        async def runner(term: str):
            await _debounced_search(term)

        search_task = page.run_task(runner, state.filter.keyword)

    def on_filter_click(status: str):
        state.filter.status = status
        state.filter.keyword = search_field.value or ""
        on_filter_change()

    def build_filter_btn(status: str) -> ft.Control:
        label = FILTER_LABELS[status]
        if state.filter.status == status:
            return ft.FilledButton(
                label,
                style=ft.ButtonStyle(
                    bgcolor=COLOR_PRIMARY,
                    color="white",
                    shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
                ),
            )
        return ft.OutlinedButton(
            label,
            style=ft.ButtonStyle(shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN)),
            on_click=lambda e, s=status: on_filter_click(s),
        )

    search_field = ft.TextField(
        prefix_icon=ft.Icons.SEARCH,
        hint_text="Rechercher un bug...",
        value=state.filter.keyword,
        on_change=on_search,
        border_radius=BORDER_RADIUS_BTN,
        border_color="transparent",
        bgcolor=COLOR_CARD,
        content_padding=ft.Padding.symmetric(horizontal=12, vertical=12),
        text_size=14,
    )

    filters_row = ft.ResponsiveRow(
        controls=[
            ft.Container(content=search_field, col={"xs": 12, "md": 6}),
            ft.Container(
                content=ft.Row(
                    controls=[build_filter_btn(s) for s in (STATUS_FILTER_ALL, *STATUSES)],
                    spacing=8,
                    wrap=True,
                ),
                col={"xs": 12, "md": 6},
            ),
        ],
        spacing=12,
        run_spacing=12,
        vertical_alignment=ft.CrossAxisAlignment.CENTER,
    )

    list_content = ft.Column(
        ref=list_column_ref,
        controls=_list_controls(issues, stats.total),
        scroll=ft.ScrollMode.AUTO,
        expand=True,
        spacing=0,
    )

    return ft.View(
        route="/",
        bgcolor=COLOR_BG,
        padding=ft.Padding.symmetric(horizontal=24, vertical=16),
        controls=[
            build_header(on_new_issue),
            ft.Container(height=16),
            build_stats_row(stats),
            ft.Container(height=16),
            filters_row,
            ft.Container(height=16),
            list_content,
        ],
    )
