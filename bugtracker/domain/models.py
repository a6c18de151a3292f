"""
models.py - Domain models
Single responsibility: typed containers for core entities.
"""
from dataclasses import dataclass

SEVERITIES: tuple[str, ...] = ("low", "medium", "high", "critical")
STATUSES: tuple[str, ...] = ("open", "in-progress", "resolved")
STATUS_FILTER_ALL = "all"

DEFAULT_SEVERITY = "medium"
DEFAULT_STATUS = "open"


@dataclass(frozen=True)
class Issue:
    id: int
    title: str
    description: str
    created_at: str
    severity: str = DEFAULT_SEVERITY
    status: str = DEFAULT_STATUS
    steps: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "severity": self.severity,
            "status": self.status,
            "steps": self.steps,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Issue":
        return cls(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            severity=data["severity"],
            status=data["status"],
            steps=data["steps"],
            created_at=data["createdAt"],
        )


@dataclass(frozen=True)
class IssueStats:
    total: int = 0
    open: int = 0
    in_progress: int = 0
    resolved: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "open": self.open,
            "inProgress": self.in_progress,
            "resolved": self.resolved,
        }
