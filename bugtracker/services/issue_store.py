"""
issue_store.py - Issue store
Single responsibility: own the issue collection, enforce its invariants and
persist a snapshot after every mutation.
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from bugtracker.domain.errors import (
    NotFoundError,
    PersistenceCorruptionError,
    PersistenceWriteError,
    ValidationError,
)
from bugtracker.domain.models import (
    DEFAULT_SEVERITY,
    DEFAULT_STATUS,
    SEVERITIES,
    STATUS_FILTER_ALL,
    STATUSES,
    Issue,
    IssueStats,
)
from bugtracker.domain.seed import sample_issues
from bugtracker.services import view_projector
from bugtracker.services.snapshot import SnapshotPort
from bugtracker.utils.time import to_iso, to_millis, utc_now

logger = logging.getLogger(__name__)


class IssueStore:
    """
    Sole writer of the issue collection (newest first).

    Example:
        store = IssueStore(SqliteSnapshot("data.db", "bugs"))
        store.initialize()
        bug = store.create("Crash", "App crashes on start", severity="high")
        store.update_status(bug.id, "resolved")
        items, stats = store.current_view("all", "crash")
    """

    def __init__(self, port: SnapshotPort, clock: Callable[[], datetime] | None = None):
        self._port = port
        self._clock = clock or utc_now
        self._issues: list[Issue] = []

    # ------------------------------------------------------------------
    # 読み出し
    # ------------------------------------------------------------------

    @property
    def issues(self) -> tuple[Issue, ...]:
        return tuple(self._issues)

    def __len__(self) -> int:
        return len(self._issues)

    def get(self, issue_id: int) -> Issue | None:
        try:
            return self._issues[self._index_of(issue_id)]
        except NotFoundError:
            return None

    def current_view(
        self, status_filter: str = STATUS_FILTER_ALL, search_term: str = ""
    ) -> tuple[list[Issue], IssueStats]:
        snapshot = self.issues
        return (
            view_projector.filter_and_search(snapshot, status_filter, search_term),
            view_projector.compute_stats(snapshot),
        )

    # ------------------------------------------------------------------
    # 初期化・変更
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Restore the saved collection, or fall back to the example issues."""
        try:
            saved = self._port.load()
        except PersistenceCorruptionError as e:
            logger.warning("Discarding unreadable snapshot: %s", e)
            saved = None
        if saved is not None:
            self._issues = list(saved)
            logger.info("Restored %d issues from snapshot", len(self._issues))
            return
        self._issues = sample_issues(self._clock())
        logger.info("No snapshot found; seeded %d example issues", len(self._issues))
        self.persist()

    def create(
        self,
        title: str,
        description: str,
        severity: str | None = DEFAULT_SEVERITY,
        status: str | None = DEFAULT_STATUS,
        steps: str | None = "",
    ) -> Issue:
        if not title or not title.strip():
            raise ValidationError("title is required")
        if not description or not description.strip():
            raise ValidationError("description is required")
        severity = severity or DEFAULT_SEVERITY
        status = status or DEFAULT_STATUS
        if severity not in SEVERITIES:
            raise ValidationError(f"Unsupported severity: {severity}")
        if status not in STATUSES:
            raise ValidationError(f"Unsupported status: {status}")

        now = self._clock()
        issue = Issue(
            id=self._next_id(now),
            title=title,
            description=description,
            severity=severity,
            status=status,
            steps=steps or "",
            created_at=to_iso(now),
        )
        self._issues.insert(0, issue)
        self.persist()
        return issue

    def update_status(self, issue_id: int, new_status: str) -> Issue | None:
        # unknown id wins over an unknown status: silent no-op
        try:
            idx = self._index_of(issue_id)
        except NotFoundError:
            logger.debug("update_status ignored: issue %s not found", issue_id)
            return None
        # any status may follow any other; no workflow ordering
        if new_status not in STATUSES:
            raise ValidationError(f"Unsupported status: {new_status}")
        updated = replace(self._issues[idx], status=new_status)
        self._issues[idx] = updated
        self.persist()
        return updated

    def delete(self, issue_id: int) -> bool:
        try:
            idx = self._index_of(issue_id)
        except NotFoundError:
            logger.debug("delete ignored: issue %s not found", issue_id)
            return False
        del self._issues[idx]
        self.persist()
        return True

    def persist(self) -> None:
        """Best-effort write; the in-memory collection stays authoritative."""
        try:
            self._port.save(list(self._issues))
        except PersistenceWriteError as e:
            logger.warning("Snapshot not saved, changes kept in memory only: %s", e)

    # ------------------------------------------------------------------
    # 内部ヘルパー
    # ------------------------------------------------------------------

    def _index_of(self, issue_id: int) -> int:
        for idx, issue in enumerate(self._issues):
            if issue.id == issue_id:
                return idx
        raise NotFoundError(f"Issue {issue_id} not found")

    def _next_id(self, now: datetime) -> int:
        last = max((i.id for i in self._issues), default=0)
        return max(to_millis(now), last + 1)
