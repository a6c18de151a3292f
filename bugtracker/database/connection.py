"""
connection.py - DB connection helpers
Single responsibility: manage SQLite connections and pragmas.
"""

import sqlite3
from contextlib import closing, contextmanager

from bugtracker.config import DB_PATH


def get_connection(db_path: str | None = None) -> sqlite3.Connection:
    """Open SQLite connection with shared defaults."""
    conn = sqlite3.connect(db_path or DB_PATH, timeout=10)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode = WAL")
    return conn


@contextmanager
def transaction(db_path: str | None = None):
    """Commit on success, roll back on error, always close."""
    with closing(get_connection(db_path)) as conn:
        with conn:
            yield conn
