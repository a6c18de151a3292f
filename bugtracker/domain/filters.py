"""
filters.py - Filter DTOs
Single responsibility: carry filter inputs for list projections.
"""
from dataclasses import dataclass

from bugtracker.domain.models import STATUS_FILTER_ALL


@dataclass
class IssueFilter:
    status: str = STATUS_FILTER_ALL
    keyword: str = ""
