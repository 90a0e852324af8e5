"""Error handling utilities."""


class TaskTrackerError(Exception):
    """Base exception for the task tracker core."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TaskTrackerError):
    """Missing or malformed input."""
    pass


class NotFoundError(TaskTrackerError):
    """Identifier does not resolve to a record, or a view is empty."""
    pass


class AuthorizationError(TaskTrackerError):
    """Caller is not the creator of the record."""
    pass


class CreationError(TaskTrackerError):
    """Record store write failed."""
    pass
