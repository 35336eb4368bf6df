"""Domain models, errors, store capabilities and issue tracker operations."""

from app.logic.errors import (
    InvalidIDError,
    InvalidIssueError,
    InvalidProjectError,
    InvalidTransitionError,
    IssueNotFoundError,
    ProjectKeyExistsError,
    ProjectNotFoundError,
    TrackerError,
)
from app.logic.models import Issue, IssueStatus, Project
from app.logic.ports import IssueStore, ProjectIssueStore, ProjectStore
from app.logic.service import (
    create_issue,
    create_project,
    get_issue,
    is_allowed,
    list_issues,
    list_projects,
    transition_issue,
)

__all__ = [
    "Issue",
    "IssueStatus",
    "Project",
    "IssueStore",
    "ProjectIssueStore",
    "ProjectStore",
    "TrackerError",
    "InvalidIDError",
    "InvalidIssueError",
    "InvalidProjectError",
    "InvalidTransitionError",
    "IssueNotFoundError",
    "ProjectKeyExistsError",
    "ProjectNotFoundError",
    "create_issue",
    "create_project",
    "get_issue",
    "is_allowed",
    "list_issues",
    "list_projects",
    "transition_issue",
]
