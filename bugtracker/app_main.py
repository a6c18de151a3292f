"""
app_main.py - Bug Tracker メインアプリケーション
Bug Tracker v1.0
"""

import logging
import sqlite3

import flet as ft

from bugtracker.config import (
    APP_TITLE,
    COLOR_BG,
    COLOR_PRIMARY,
    DB_PATH,
    MEMORY_DB,
    STORAGE_KEY,
)
from bugtracker.services.issue_store import IssueStore
from bugtracker.services.snapshot import MemorySnapshot, SnapshotPort, SqliteSnapshot
from bugtracker.ui import actions, views
from bugtracker.ui.state import AppState

logger = logging.getLogger(__name__)


def build_port(db_path: str = DB_PATH, key: str = STORAGE_KEY) -> SnapshotPort:
    """SQLite slot, or an in-memory one when the database is unusable."""
    if db_path == MEMORY_DB:
        return MemorySnapshot()
    try:
        return SqliteSnapshot(db_path, key)
    except sqlite3.Error:
        logger.exception("Cannot open %s; changes will not survive a restart", db_path)
        return MemorySnapshot()


def build_store(db_path: str = DB_PATH, key: str = STORAGE_KEY) -> IssueStore:
    store = IssueStore(build_port(db_path, key))
    store.initialize()
    return store


# ==========================================================================
# メインアプリ
# ==========================================================================


def main(page: ft.Page):
    page.title = APP_TITLE
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(color_scheme_seed=COLOR_PRIMARY)

    state = AppState()
    store = build_store()

    def handle_status_change(issue_id: int, new_status: str):
        store.update_status(issue_id, new_status)
        refresh_list()

    def handle_delete(issue_id: int):
        actions.confirm_delete_issue(page, store, issue_id, refresh_list)

    def refresh_list():
        try:
            page.views.clear()
            page.views.append(
                views.build_issue_list_view(
                    page=page,
                    state=state,
                    store=store,
                    on_new_issue=lambda: actions.show_new_issue_dialog(page, store, refresh_list),
                    on_status_change=handle_status_change,
                    on_delete_issue=handle_delete,
                    on_filter_change=refresh_list,
                )
            )
            page.update()
        except Exception as exc:
            logger.exception("Error in refresh_list")
            page.overlay.append(
                ft.AlertDialog(
                    title=ft.Text("Une erreur est survenue"),
                    content=ft.Text(f"Détail : {exc}"),
                    open=True,
                )
            )
            page.update()

    def route_change(_e: ft.RouteChangeEvent):
        if page.route == "/":
            refresh_list()

    page.on_route_change = route_change
    refresh_list()
