"""
Tests for snapshot encoding and the persistence slots
"""

import json
from dataclasses import replace

import pytest

from bugtracker.database.connection import transaction
from bugtracker.database.repositories import slots as slot_repo
from bugtracker.domain.errors import PersistenceCorruptionError, PersistenceWriteError
from bugtracker.domain.seed import sample_issues
from bugtracker.services.issue_store import IssueStore
from bugtracker.services.snapshot import (
    MemorySnapshot,
    decode_snapshot,
    encode_snapshot,
)


class TestCodec:
    """Tests for the JSON snapshot format."""

    def test_stored_keys(self):
        data = json.loads(encode_snapshot(sample_issues()))
        assert set(data[0]) == {"id", "title", "description", "severity", "status", "steps", "createdAt"}
        assert data[0]["title"] == "Bouton de connexion ne répond pas"

    def test_non_ascii_kept_readable(self):
        assert "répond" in encode_snapshot(sample_issues())

    def test_decode_preserves_order_and_fields(self):
        issues = sample_issues()
        assert decode_snapshot(encode_snapshot(issues)) == issues

    def test_empty_steps_kept(self):
        raw = json.dumps([{"id": 1, "title": "t", "description": "d", "severity": "low",
                           "status": "open", "steps": "", "createdAt": "2024-01-01T00:00:00.000Z"}])
        assert decode_snapshot(raw)[0].steps == ""

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "not json",
            '{"id": 1}',
            "[1, 2]",
            '[{"id": "1", "title": "t", "description": "d", "severity": "low", "status": "open", "steps": "", "createdAt": "x"}]',
            '[{"id": true, "title": "t", "description": "d", "severity": "low", "status": "open", "steps": "", "createdAt": "x"}]',
            '[{"id": 1, "title": "t", "description": "d", "severity": "blocker", "status": "open", "steps": "", "createdAt": "x"}]',
            '[{"id": 1, "title": "t", "description": "d", "severity": "low", "status": "closed", "steps": "", "createdAt": "x"}]',
            '[{"id": 1, "title": "t", "description": "d", "severity": "low", "status": "open", "steps": ""}]',
        ],
    )
    def test_malformed_raises(self, raw):
        with pytest.raises(PersistenceCorruptionError):
            decode_snapshot(raw)

    def test_duplicate_ids_raise(self):
        issues = sample_issues()
        issues[1] = replace(issues[1], id=issues[0].id)
        with pytest.raises(PersistenceCorruptionError):
            decode_snapshot(encode_snapshot(issues))


class TestMemorySnapshot:
    """Tests for the in-process slot."""

    def test_empty_slot_loads_none(self):
        assert MemorySnapshot().load() is None

    def test_save_then_load(self):
        issues = sample_issues()
        slot = MemorySnapshot()
        slot.save(issues)
        assert slot.load() == issues
        assert slot.writes == 1


class TestSqliteSnapshot:
    """Tests for the SQLite-backed slot."""

    def test_empty_slot_loads_none(self, sqlite_port):
        assert sqlite_port.load() is None

    def test_save_then_load(self, sqlite_port):
        issues = sample_issues()
        sqlite_port.save(issues)
        assert sqlite_port.load() == issues

    def test_save_overwrites_previous_value(self, sqlite_port):
        issues = sample_issues()
        sqlite_port.save(issues)
        sqlite_port.save(issues[:1])
        assert sqlite_port.load() == issues[:1]

    def test_keys_are_independent(self, sqlite_port):
        sqlite_port.save(sample_issues())
        assert slot_repo.get_value("other", sqlite_port.db_path) is None

    def test_corrupt_value_raises(self, sqlite_port):
        slot_repo.set_value(sqlite_port.key, "{broken", sqlite_port.db_path)
        with pytest.raises(PersistenceCorruptionError):
            sqlite_port.load()

    def test_write_fault_raises_write_error(self, sqlite_port):
        with transaction(sqlite_port.db_path) as conn:
            conn.execute("DROP TABLE kv_store")
        with pytest.raises(PersistenceWriteError):
            sqlite_port.save(sample_issues())

    def test_read_fault_raises_corruption_error(self, sqlite_port):
        with transaction(sqlite_port.db_path) as conn:
            conn.execute("DROP TABLE kv_store")
        with pytest.raises(PersistenceCorruptionError):
            sqlite_port.load()

    def test_store_survives_restart(self, sqlite_port, clock):
        store = IssueStore(sqlite_port, clock=clock)
        store.initialize()
        created = store.create("Panne", "L'écran reste noir", severity="critical")
        store.update_status(1, "in-progress")

        restarted = IssueStore(sqlite_port, clock=clock)
        restarted.initialize()

        assert restarted.issues == store.issues
        assert restarted.issues[0] == created
