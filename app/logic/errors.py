"""Domain errors raised by the logic layer."""

from typing import Optional


class TrackerError(Exception):
    """Base class for issue tracker domain errors."""

    message = "tracker error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class InvalidProjectError(TrackerError):
    message = "invalid project"


class ProjectKeyExistsError(TrackerError):
    message = "project key already exists"


class InvalidIssueError(TrackerError):
    message = "invalid issue"


class ProjectNotFoundError(TrackerError):
    message = "project not found"


class InvalidTransitionError(TrackerError):
    message = "invalid transition"


class IssueNotFoundError(TrackerError):
    message = "issue not found"


class InvalidIDError(TrackerError):
    message = "invalid id"
