"""
Tests for list projection and counters
"""

import copy

import pytest

from bugtracker.domain.models import Issue
from bugtracker.services.view_projector import compute_stats, filter_and_search


def make_issue(issue_id, title, description, status="open", severity="medium", steps=""):
    return Issue(
        id=issue_id,
        title=title,
        description=description,
        status=status,
        severity=severity,
        steps=steps,
        created_at="2024-05-01T10:00:00.000Z",
    )


@pytest.fixture
def collection():
    return [
        make_issue(5, "Login button broken", "Nothing happens on click", status="open"),
        make_issue(4, "Profile 404", "Profile page returns NOT FOUND", status="in-progress", severity="critical"),
        make_issue(3, "Typo on footer", "Copyright year is wrong", status="resolved", steps="scroll to login"),
        make_issue(2, "Slow search", "Search takes ten seconds", status="open", severity="high"),
    ]


class TestFilterAndSearch:
    """Tests for filter_and_search."""

    def test_all_and_empty_term_returns_everything_in_order(self, collection):
        assert filter_and_search(collection, "all", "") == collection

    @pytest.mark.parametrize(
        "status,expected",
        [("open", [5, 2]), ("in-progress", [4]), ("resolved", [3])],
    )
    def test_status_gate(self, collection, status, expected):
        assert [i.id for i in filter_and_search(collection, status, "")] == expected

    def test_search_is_case_insensitive_on_title(self, collection):
        assert [i.id for i in filter_and_search(collection, "all", "LOGIN")] == [5]

    def test_search_matches_description_substring(self, collection):
        assert [i.id for i in filter_and_search(collection, "all", "not found")] == [4]

    def test_search_ignores_steps_and_severity(self, collection):
        # "login" also appears in issue 3's steps
        assert [i.id for i in filter_and_search(collection, "all", "login")] == [5]
        assert filter_and_search(collection, "all", "critical") == []

    def test_both_gates_must_pass(self, collection):
        assert [i.id for i in filter_and_search(collection, "open", "search")] == [2]
        assert filter_and_search(collection, "resolved", "search") == []

    def test_no_match_returns_empty_list(self, collection):
        assert filter_and_search(collection, "all", "zzz") == []
        assert filter_and_search([], "open", "x") == []

    def test_unknown_status_filter_matches_nothing(self, collection):
        assert filter_and_search(collection, "closed", "") == []

    def test_input_not_mutated(self, collection):
        before = copy.deepcopy(collection)
        filter_and_search(collection, "open", "login")
        assert collection == before


class TestComputeStats:
    """Tests for compute_stats."""

    def test_counts(self, collection):
        stats = compute_stats(collection)
        assert stats.total == 4
        assert stats.open == 2
        assert stats.in_progress == 1
        assert stats.resolved == 1

    def test_partitions_sum_to_total(self, collection):
        stats = compute_stats(collection)
        assert stats.open + stats.in_progress + stats.resolved == stats.total

    def test_empty(self):
        assert compute_stats([]).to_dict() == {"total": 0, "open": 0, "inProgress": 0, "resolved": 0}

    def test_accepts_tuple(self, collection):
        assert compute_stats(tuple(collection)) == compute_stats(collection)
