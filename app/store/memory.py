"""In-memory project and issue storage.

Records live for the lifetime of the process. Every method takes the
store lock (shared for reads, exclusive for writes) and hands back copies,
so callers can never modify stored records directly.
"""

import logging
from dataclasses import replace
from typing import Optional

from app.logic.models import Issue, IssueStatus, Project
from app.store.locks import ReadWriteLock

logger = logging.getLogger(__name__)


class MemoryStore:
    """Thread-safe store satisfying the ProjectStore and IssueStore capabilities."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._projects: list[Project] = []
        self._issues: list[Issue] = []
        self._next_project_id = 1
        self._next_issue_id = 1

    # Projects

    def create_project(self, project: Project) -> Project:
        """Assign the next project id and append. Input is not validated."""
        with self._lock.write():
            return self._append_project(project)

    def create_project_if_absent(self, project: Project) -> Optional[Project]:
        """Store the project unless its key is taken; returns None on a duplicate key."""
        with self._lock.write():
            if self._find_project(project.key) is not None:
                return None
            return self._append_project(project)

    def list_projects(self) -> list[Project]:
        with self._lock.read():
            return [replace(p) for p in self._projects]

    def get_project_by_key(self, key: str) -> Optional[Project]:
        with self._lock.read():
            project = self._find_project(key)
            return replace(project) if project is not None else None

    # Issues

    def create_issue(self, issue: Issue) -> Issue:
        """Assign the next issue id and append. Input is not validated."""
        with self._lock.write():
            stored = replace(issue, id=self._next_issue_id)
            self._next_issue_id += 1
            self._issues.append(stored)
            logger.debug(f"Stored issue {stored.id}", extra={"project_key": stored.project_key})
            return replace(stored)

    def get_issue_by_id(self, issue_id: int) -> Optional[Issue]:
        with self._lock.read():
            issue = self._find_issue(issue_id)
            return replace(issue) if issue is not None else None

    def update_issue_status(self, issue_id: int, new_status: IssueStatus) -> Optional[Issue]:
        """Overwrite the status of an issue; returns None if the issue does not exist."""
        with self._lock.write():
            issue = self._find_issue(issue_id)
            if issue is None:
                return None
            issue.status = new_status
            return replace(issue)

    def list_issues_by_project_key(self, key: str) -> list[Issue]:
        with self._lock.read():
            return [replace(i) for i in self._issues if i.project_key == key]

    # Helpers. Callers must hold the lock (the write lock for _append_project).

    def _append_project(self, project: Project) -> Project:
        stored = replace(project, id=self._next_project_id)
        self._next_project_id += 1
        self._projects.append(stored)
        logger.debug(f"Stored project {stored.id}", extra={"project_key": stored.key})
        return replace(stored)

    def _find_project(self, key: str) -> Optional[Project]:
        for project in self._projects:
            if project.key == key:
                return project
        return None

    def _find_issue(self, issue_id: int) -> Optional[Issue]:
        for issue in self._issues:
            if issue.id == issue_id:
                return issue
        return None
