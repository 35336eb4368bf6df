import threading
import time
from dataclasses import replace
from typing import Optional

import pytest

from app import logic
from app.logic import (
    InvalidIDError,
    InvalidIssueError,
    InvalidProjectError,
    InvalidTransitionError,
    Issue,
    IssueNotFoundError,
    IssueStatus,
    Project,
    ProjectKeyExistsError,
    ProjectNotFoundError,
)
from app.store import MemoryStore


class FakeStore:
    """Minimal dict-backed store satisfying the store capabilities."""

    def __init__(self):
        self.projects: dict[str, Project] = {}
        self.issues: dict[int, Issue] = {}
        self.vanish_on_update = False

    def get_project_by_key(self, key: str) -> Optional[Project]:
        return self.projects.get(key)

    def create_project(self, project: Project) -> Project:
        stored = replace(project, id=len(self.projects) + 1)
        self.projects[stored.key] = stored
        return stored

    def create_project_if_absent(self, project: Project) -> Optional[Project]:
        if project.key in self.projects:
            return None
        return self.create_project(project)

    def list_projects(self) -> list[Project]:
        return list(self.projects.values())

    def create_issue(self, issue: Issue) -> Issue:
        stored = replace(issue, id=len(self.issues) + 1)
        self.issues[stored.id] = stored
        return stored

    def get_issue_by_id(self, issue_id: int) -> Optional[Issue]:
        return self.issues.get(issue_id)

    def update_issue_status(self, issue_id: int, new_status: IssueStatus) -> Optional[Issue]:
        # Simulates another caller removing the issue between lookup and update
        if self.vanish_on_update:
            return None
        if issue_id not in self.issues:
            return None
        self.issues[issue_id] = replace(self.issues[issue_id], status=new_status)
        return self.issues[issue_id]

    def list_issues_by_project_key(self, key: str) -> list[Issue]:
        return [i for i in self.issues.values() if i.project_key == key]


class SlowLookupStore(MemoryStore):
    """Widens the gap between a key lookup and whatever the caller does next."""

    def get_project_by_key(self, key: str) -> Optional[Project]:
        project = super().get_project_by_key(key)
        time.sleep(0.05)
        return project


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def issue_in_progress(store):
    logic.create_project(store, "PAY", "Payments")
    logic.create_issue(store, "PAY", "Fix checkout")
    return logic.transition_issue(store, 1, "IN_PROGRESS")


#--------------------------- create_project --------------------------

def test_create_project_trims_whitespace(store):
    project = logic.create_project(store, "  PAY ", "  Payments ")

    assert project == Project(key="PAY", name="Payments", id=1)
    assert store.get_project_by_key("PAY").name == "Payments"


@pytest.mark.parametrize("key,name", [("", "Payments"), ("PAY", ""), ("   ", "Payments"), ("PAY", "\t\n")])
def test_create_project_rejects_blank_input(store, key, name):
    with pytest.raises(InvalidProjectError):
        logic.create_project(store, key, name)

    assert store.list_projects() == []


def test_duplicate_project_key_is_rejected(store):
    logic.create_project(store, "PAY", "Payments")

    with pytest.raises(ProjectKeyExistsError):
        logic.create_project(store, " PAY ", "Other payments")

    assert len(store.list_projects()) == 1


def test_project_keys_are_case_sensitive(store):
    logic.create_project(store, "PAY", "Payments")
    other = logic.create_project(store, "pay", "Lowercase payments")

    assert other.id == 2


def test_concurrent_creates_with_same_key_store_one_project():
    store = SlowLookupStore()
    n = 16
    barrier = threading.Barrier(n)
    outcomes = []
    outcomes_lock = threading.Lock()

    def create():
        barrier.wait()
        try:
            logic.create_project(store, "PAY", "Payments")
            result = "created"
        except ProjectKeyExistsError:
            result = "exists"
        with outcomes_lock:
            outcomes.append(result)

    threads = [threading.Thread(target=create) for _ in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outcomes.count("created") == 1
    assert outcomes.count("exists") == n - 1
    assert [p.key for p in store.list_projects()] == ["PAY"]


def test_concurrent_creates_with_distinct_keys_get_sequential_ids(store):
    n = 32
    barrier = threading.Barrier(n)
    ids = []
    ids_lock = threading.Lock()

    def create(i):
        barrier.wait()
        created = logic.create_project(store, f"K{i}", f"Project {i}")
        with ids_lock:
            ids.append(created.id)

    threads = [threading.Thread(target=create, args=(i,)) for i in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(ids) == list(range(1, n + 1))
    assert len(store.list_projects()) == n


def test_create_project_against_fake_store(fake_store):
    project = logic.create_project(fake_store, "OPS", "Operations")

    assert project.id == 1
    assert logic.list_projects(fake_store) == [project]


#--------------------------- create_issue --------------------------

def test_create_issue_starts_open(store):
    logic.create_project(store, "PAY", "Payments")

    issue = logic.create_issue(store, " PAY ", "  Fix checkout ")

    assert issue == Issue(project_key="PAY", title="Fix checkout", status=IssueStatus.OPEN, id=1)


@pytest.mark.parametrize("project_key,title", [("", "Title"), ("PAY", " "), ("  ", "")])
def test_create_issue_rejects_blank_input(store, project_key, title):
    logic.create_project(store, "PAY", "Payments")

    with pytest.raises(InvalidIssueError):
        logic.create_issue(store, project_key, title)


def test_create_issue_for_missing_project(store):
    with pytest.raises(ProjectNotFoundError):
        logic.create_issue(store, "NOPE", "Title")

    assert store.get_issue_by_id(1) is None


#--------------------------- transition_issue --------------------------

def test_happy_path(store):
    project = logic.create_project(store, "PAY", "Payments")
    issue = logic.create_issue(store, "PAY", "Fix checkout")

    assert project.id == 1
    assert issue.id == 1
    assert issue.status == IssueStatus.OPEN

    assert logic.transition_issue(store, 1, "IN_PROGRESS").status == IssueStatus.IN_PROGRESS
    assert logic.transition_issue(store, 1, "DONE").status == IssueStatus.DONE


def test_revert_after_done_is_rejected(store, issue_in_progress):
    logic.transition_issue(store, 1, "DONE")

    with pytest.raises(InvalidTransitionError):
        logic.transition_issue(store, 1, "OPEN")

    assert logic.get_issue(store, 1).status == IssueStatus.DONE


def test_transition_trims_target_status(store):
    logic.create_project(store, "PAY", "Payments")
    logic.create_issue(store, "PAY", "Fix checkout")

    assert logic.transition_issue(store, 1, "  IN_PROGRESS ").status == IssueStatus.IN_PROGRESS


@pytest.mark.parametrize(
    "path,target,allowed",
    [
        ([], "IN_PROGRESS", True),
        ([], "OPEN", False),
        ([], "DONE", False),
        ([], "in_progress", False),
        ([], "CLOSED", False),
        (["IN_PROGRESS"], "DONE", True),
        (["IN_PROGRESS"], "IN_PROGRESS", False),
        (["IN_PROGRESS"], "OPEN", False),
        (["IN_PROGRESS", "DONE"], "DONE", False),
        (["IN_PROGRESS", "DONE"], "IN_PROGRESS", False),
        (["IN_PROGRESS", "DONE"], "OPEN", False),
    ],
)
def test_transition_table(store, path, target, allowed):
    logic.create_project(store, "PAY", "Payments")
    logic.create_issue(store, "PAY", "Fix checkout")
    for step in path:
        logic.transition_issue(store, 1, step)
    before = logic.get_issue(store, 1).status

    if allowed:
        assert logic.transition_issue(store, 1, target).status == target
    else:
        with pytest.raises(InvalidTransitionError):
            logic.transition_issue(store, 1, target)
        assert logic.get_issue(store, 1).status == before


@pytest.mark.parametrize("issue_id,to_status", [(0, "DONE"), (-1, "DONE"), (1, ""), (1, "   ")])
def test_transition_rejects_invalid_input(store, issue_id, to_status):
    with pytest.raises(InvalidIssueError):
        logic.transition_issue(store, issue_id, to_status)


def test_transition_missing_issue(store):
    with pytest.raises(IssueNotFoundError):
        logic.transition_issue(store, 42, "IN_PROGRESS")


def test_transition_when_issue_vanishes_before_update(fake_store):
    logic.create_project(fake_store, "PAY", "Payments")
    logic.create_issue(fake_store, "PAY", "Fix checkout")
    fake_store.vanish_on_update = True

    with pytest.raises(IssueNotFoundError):
        logic.transition_issue(fake_store, 1, "IN_PROGRESS")


def test_concurrent_transitions_end_in_progress(store):
    logic.create_project(store, "PAY", "Payments")
    logic.create_issue(store, "PAY", "Fix checkout")
    outcomes = []
    outcomes_lock = threading.Lock()
    barrier = threading.Barrier(8)

    def move():
        barrier.wait()
        try:
            logic.transition_issue(store, 1, "IN_PROGRESS")
            result = "ok"
        except InvalidTransitionError:
            result = "rejected"
        with outcomes_lock:
            outcomes.append(result)

    threads = [threading.Thread(target=move) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert "ok" in outcomes
    assert len(outcomes) == 8
    assert logic.get_issue(store, 1).status == IssueStatus.IN_PROGRESS


def test_is_allowed():
    assert logic.is_allowed(IssueStatus.OPEN, "IN_PROGRESS")
    assert logic.is_allowed("IN_PROGRESS", IssueStatus.DONE)
    assert not logic.is_allowed(IssueStatus.OPEN, IssueStatus.DONE)
    assert not logic.is_allowed(IssueStatus.DONE, IssueStatus.DONE)


#--------------------------- get_issue / list_issues --------------------------

@pytest.mark.parametrize("issue_id", [0, -5])
def test_get_issue_rejects_non_positive_id(store, issue_id):
    with pytest.raises(InvalidIDError):
        logic.get_issue(store, issue_id)


def test_get_missing_issue(store):
    with pytest.raises(IssueNotFoundError):
        logic.get_issue(store, 1)


def test_list_issues(store):
    logic.create_project(store, "PAY", "Payments")
    logic.create_issue(store, "PAY", "Fix checkout")

    assert [i.title for i in logic.list_issues(store, " PAY ")] == ["Fix checkout"]
    assert logic.list_issues(store, "OPS") == []


def test_list_issues_requires_key(store):
    with pytest.raises(InvalidProjectError):
        logic.list_issues(store, "  ")
