"""
state.py - UI state container
"""
from bugtracker.domain.filters import IssueFilter


class AppState:
    def __init__(self):
        self.filter: IssueFilter = IssueFilter()  # status: "all" | "open" | "in-progress" | "resolved"
