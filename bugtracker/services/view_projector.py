"""
view_projector.py - List projection and counters
Single responsibility: derive what to display from a collection snapshot.
Pure functions; the input collection is never mutated.
"""
from collections.abc import Iterable

from bugtracker.domain.models import STATUS_FILTER_ALL, Issue, IssueStats


def _matches_status(issue: Issue, status_filter: str) -> bool:
    return status_filter == STATUS_FILTER_ALL or issue.status == status_filter


def _matches_search(issue: Issue, term: str) -> bool:
    # steps and severity are not searched
    if not term:
        return True
    return term in issue.title.lower() or term in issue.description.lower()


def filter_and_search(
    collection: Iterable[Issue],
    status_filter: str = STATUS_FILTER_ALL,
    search_term: str = "",
) -> list[Issue]:
    """Issues passing both the status gate and the search gate, in input order."""
    term = (search_term or "").lower()
    status_filter = status_filter or STATUS_FILTER_ALL
    return [
        issue
        for issue in collection
        if _matches_status(issue, status_filter) and _matches_search(issue, term)
    ]


def compute_stats(collection: Iterable[Issue]) -> IssueStats:
    total = opened = in_progress = resolved = 0
    for issue in collection:
        total += 1
        if issue.status == "open":
            opened += 1
        elif issue.status == "in-progress":
            in_progress += 1
        elif issue.status == "resolved":
            resolved += 1
    return IssueStats(total=total, open=opened, in_progress=in_progress, resolved=resolved)
