"""
snapshot.py - Snapshot persistence
Single responsibility: serialize the issue collection and move it in and out
of a single key/value slot.
"""

import json
import logging
import sqlite3
from typing import Protocol

from bugtracker.database.repositories import slots as slot_repo
from bugtracker.database.schema import initialize_schema
from bugtracker.domain.errors import PersistenceCorruptionError, PersistenceWriteError
from bugtracker.domain.models import SEVERITIES, STATUSES, Issue

logger = logging.getLogger(__name__)

_STR_FIELDS = ("title", "description", "severity", "status", "steps", "createdAt")


class SnapshotPort(Protocol):
    def load(self) -> list[Issue] | None: ...

    def save(self, issues: list[Issue]) -> None: ...


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------


def encode_snapshot(issues: list[Issue]) -> str:
    return json.dumps([i.to_dict() for i in issues], ensure_ascii=False)


def _check_record(idx: int, raw) -> Issue:
    if not isinstance(raw, dict):
        raise PersistenceCorruptionError(f"record {idx} is not an object")
    # bool is an int subclass; reject it explicitly
    if not isinstance(raw.get("id"), int) or isinstance(raw.get("id"), bool):
        raise PersistenceCorruptionError(f"record {idx} has no integer id")
    for name in _STR_FIELDS:
        if not isinstance(raw.get(name), str):
            raise PersistenceCorruptionError(f"record {idx} field {name!r} is missing or not a string")
    if raw["severity"] not in SEVERITIES:
        raise PersistenceCorruptionError(f"record {idx} has unknown severity {raw['severity']!r}")
    if raw["status"] not in STATUSES:
        raise PersistenceCorruptionError(f"record {idx} has unknown status {raw['status']!r}")
    return Issue.from_dict(raw)


def decode_snapshot(raw: str) -> list[Issue]:
    """Parse a stored snapshot; raise PersistenceCorruptionError if malformed."""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise PersistenceCorruptionError(f"snapshot is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise PersistenceCorruptionError("snapshot is not a list")

    issues = [_check_record(idx, item) for idx, item in enumerate(data)]
    seen: set[int] = set()
    for issue in issues:
        if issue.id in seen:
            raise PersistenceCorruptionError(f"duplicate issue id {issue.id}")
        seen.add(issue.id)
    return issues


# ---------------------------------------------------------------------------
# Adapters
# ---------------------------------------------------------------------------


class SqliteSnapshot:
    """Slot backed by the kv_store table of a SQLite file."""

    def __init__(self, db_path: str, key: str):
        self.db_path = db_path
        self.key = key
        initialize_schema(db_path)

    def load(self) -> list[Issue] | None:
        try:
            raw = slot_repo.get_value(self.key, self.db_path)
        except sqlite3.Error as e:
            raise PersistenceCorruptionError(f"could not read slot {self.key!r}: {e}") from e
        if raw is None:
            return None
        return decode_snapshot(raw)

    def save(self, issues: list[Issue]) -> None:
        try:
            slot_repo.set_value(self.key, encode_snapshot(issues), self.db_path)
        except sqlite3.Error as e:
            raise PersistenceWriteError(f"could not write slot {self.key!r}: {e}") from e
        logger.debug("Saved %d issues to %s[%s]", len(issues), self.db_path, self.key)


class MemorySnapshot:
    """In-process slot holding the encoded string; nothing survives the process."""

    def __init__(self, raw: str | None = None):
        self.raw = raw
        self.writes = 0

    def load(self) -> list[Issue] | None:
        if self.raw is None:
            return None
        return decode_snapshot(self.raw)

    def save(self, issues: list[Issue]) -> None:
        self.raw = encode_snapshot(issues)
        self.writes += 1
