"""
Shared fixtures for the bug tracker tests.
"""

from datetime import datetime, timedelta, timezone

import pytest

from bugtracker.services.issue_store import IssueStore
from bugtracker.services.snapshot import MemorySnapshot, SqliteSnapshot


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    return FixedClock(datetime(2024, 5, 1, 10, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def port():
    return MemorySnapshot()


@pytest.fixture
def store(port, clock):
    """Store seeded with the two example issues."""
    s = IssueStore(port, clock=clock)
    s.initialize()
    return s


@pytest.fixture
def sqlite_port(tmp_path):
    return SqliteSnapshot(str(tmp_path / "data.db"), "bugs")
