"""Store capabilities the logic layer depends on.

Any object with matching methods satisfies these protocols, so the logic
functions run against the in-memory store or a test fake alike.
"""

from typing import Optional, Protocol

from app.logic.models import Issue, IssueStatus, Project


class ProjectStore(Protocol):
    def get_project_by_key(self, key: str) -> Optional[Project]: ...

    def create_project(self, project: Project) -> Project: ...

    def create_project_if_absent(self, project: Project) -> Optional[Project]: ...

    def list_projects(self) -> list[Project]: ...


class IssueStore(Protocol):
    def create_issue(self, issue: Issue) -> Issue: ...

    def get_issue_by_id(self, issue_id: int) -> Optional[Issue]: ...

    def update_issue_status(self, issue_id: int, new_status: IssueStatus) -> Optional[Issue]: ...

    def list_issues_by_project_key(self, key: str) -> list[Issue]: ...


class ProjectIssueStore(ProjectStore, IssueStore, Protocol):
    """Both capabilities; issue creation checks the project before inserting."""
