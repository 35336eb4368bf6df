"""Project and issue operations, including the issue status state machine."""

import logging

from app.logic.errors import (
    InvalidIDError,
    InvalidIssueError,
    InvalidProjectError,
    InvalidTransitionError,
    IssueNotFoundError,
    ProjectKeyExistsError,
    ProjectNotFoundError,
)
from app.logic.models import Issue, IssueStatus, Project
from app.logic.ports import IssueStore, ProjectIssueStore, ProjectStore

logger = logging.getLogger(__name__)

# Exhaustive: any (from, to) pair not listed here is rejected.
ALLOWED_TRANSITIONS = (
    (IssueStatus.OPEN, IssueStatus.IN_PROGRESS),
    (IssueStatus.IN_PROGRESS, IssueStatus.DONE),
)


def is_allowed(status: str, to_status: str) -> bool:
    """Return True if an issue in ``status`` may move to ``to_status``."""
    return any(status == src and to_status == dst for src, dst in ALLOWED_TRANSITIONS)


def create_project(store: ProjectStore, key: str, name: str) -> Project:
    """
    Create a project with a unique key.

    Args:
        store: Store providing project lookup and creation
        key: Project key, surrounding whitespace is ignored
        name: Project name, surrounding whitespace is ignored

    Returns:
        The stored project with its assigned id

    Raises:
        InvalidProjectError: If key or name is blank
        ProjectKeyExistsError: If a project already uses the key
    """
    key = key.strip()
    name = name.strip()

    if not key or not name:
        raise InvalidProjectError()

    # Key check and insert are a single store call.
    created = store.create_project_if_absent(Project(key=key, name=name))
    if created is None:
        logger.warning(f"Project key {key} already exists", extra={"project_key": key})
        raise ProjectKeyExistsError()

    logger.info(
        f"Created project {created.key}",
        extra={"project_id": created.id, "project_key": created.key},
    )
    return created


def list_projects(store: ProjectStore) -> list[Project]:
    return store.list_projects()


def create_issue(store: ProjectIssueStore, project_key: str, title: str) -> Issue:
    """
    Create an OPEN issue in an existing project.

    Raises:
        InvalidIssueError: If project key or title is blank
        ProjectNotFoundError: If no project has the given key
    """
    project_key = project_key.strip()
    title = title.strip()

    if not project_key or not title:
        raise InvalidIssueError()

    if store.get_project_by_key(project_key) is None:
        logger.warning(
            f"Cannot create issue, project {project_key} not found",
            extra={"project_key": project_key},
        )
        raise ProjectNotFoundError()

    created = store.create_issue(
        Issue(project_key=project_key, title=title, status=IssueStatus.OPEN)
    )
    logger.info(
        f"Created issue {created.id} in project {project_key}",
        extra={"issue_id": created.id, "project_key": project_key},
    )
    return created


def list_issues(store: IssueStore, project_key: str) -> list[Issue]:
    """List the issues of a project; unknown keys give an empty list."""
    project_key = project_key.strip()
    if not project_key:
        raise InvalidProjectError()

    return store.list_issues_by_project_key(project_key)


def transition_issue(store: IssueStore, issue_id: int, to_status: str) -> Issue:
    """
    Move an issue to a new status.

    Only OPEN -> IN_PROGRESS and IN_PROGRESS -> DONE are permitted. The
    status check and the update are separate store calls; if the issue is
    gone by the time of the update, the update result wins and the call
    fails with IssueNotFoundError.

    Args:
        store: Store providing issue lookup and status updates
        issue_id: Id of the issue to transition
        to_status: Target status name, e.g. "IN_PROGRESS"

    Returns:
        The updated issue

    Raises:
        InvalidIssueError: If the target status is blank or the id is not positive
        IssueNotFoundError: If the issue does not exist
        InvalidTransitionError: If the move is not in the transition table
    """
    to_status = to_status.strip()
    if not to_status or issue_id <= 0:
        raise InvalidIssueError()

    issue = store.get_issue_by_id(issue_id)
    if issue is None:
        raise IssueNotFoundError()

    if not is_allowed(issue.status, to_status):
        logger.warning(
            f"Rejected transition of issue {issue_id} from {issue.status.value} to {to_status}",
            extra={"issue_id": issue_id, "from_status": issue.status.value, "to_status": to_status},
        )
        raise InvalidTransitionError()

    updated = store.update_issue_status(issue.id, IssueStatus(to_status))
    if updated is None:
        raise IssueNotFoundError()

    logger.info(
        f"Issue {issue_id} moved to {updated.status.value}",
        extra={"issue_id": issue_id, "status": updated.status.value},
    )
    return updated


def get_issue(store: IssueStore, issue_id: int) -> Issue:
    """Get issue by ID"""
    if issue_id <= 0:
        raise InvalidIDError()

    issue = store.get_issue_by_id(issue_id)
    if issue is None:
        raise IssueNotFoundError()

    return issue
