"""
slots.py - Key/value slot repository
Single responsibility: read and write opaque string values by key.
"""

from bugtracker.database.connection import transaction
from bugtracker.utils.time import now_iso


def get_value(key: str, db_path: str | None = None) -> str | None:
    with transaction(db_path) as conn:
        row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        if not row:
            return None
        return row["value"]


def set_value(key: str, value: str, db_path: str | None = None) -> None:
    with transaction(db_path) as conn:
        conn.execute(
            "INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)"
            " ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at",
            (key, value, now_iso()),
        )
