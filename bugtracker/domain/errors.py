"""
errors.py - Domain exceptions
Single responsibility: error taxonomy shared by the store and its adapters.
"""


class BugTrackerError(Exception):
    pass


class ValidationError(BugTrackerError, ValueError):
    """Rejected input: nothing was mutated or persisted."""


class NotFoundError(BugTrackerError, LookupError):
    pass


class PersistenceError(BugTrackerError):
    pass


class PersistenceCorruptionError(PersistenceError):
    """Stored snapshot could not be read or parsed."""


class PersistenceWriteError(PersistenceError):
    pass
