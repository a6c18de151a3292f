"""
schema.py - Schema creation helpers
Single responsibility: define and apply database schema.
"""
from bugtracker.database.connection import transaction


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key        TEXT PRIMARY KEY,
    value      TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
"""


def initialize_schema(db_path: str | None = None) -> None:
    """Create tables if missing; sqlite3.Error propagates to the caller."""
    with transaction(db_path) as conn:
        conn.executescript(SCHEMA_SQL)
