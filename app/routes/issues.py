from fastapi import APIRouter, Depends, Query, status

from app import logic
from app.dependencies import get_store
from app.routes.errors import to_http_exception
from app.schemas import CreateIssueRequest, IssueResponse, TransitionIssueRequest
from app.store import MemoryStore

router = APIRouter(tags=["issues"])


@router.post("/issues", response_model=IssueResponse, status_code=status.HTTP_201_CREATED)
def create_issue(payload: CreateIssueRequest, store: MemoryStore = Depends(get_store)):
    """Create an issue in an existing project"""
    try:
        return logic.create_issue(store, payload.project_key, payload.title)
    except logic.TrackerError as exc:
        raise to_http_exception(exc)


@router.get("/issues", response_model=list[IssueResponse])
def list_issues(
    project_key: str = Query(..., description="Project key"),
    store: MemoryStore = Depends(get_store),
):
    """List the issues of a project (filter is required)."""
    try:
        return logic.list_issues(store, project_key)
    except logic.TrackerError as exc:
        raise to_http_exception(exc)


@router.post("/issues/transition", response_model=IssueResponse, status_code=status.HTTP_200_OK)
def transition_issue(payload: TransitionIssueRequest, store: MemoryStore = Depends(get_store)):
    """Change issue status following the allowed transitions"""
    try:
        return logic.transition_issue(store, payload.issue_id, payload.to_status)
    except logic.TrackerError as exc:
        raise to_http_exception(exc)


@router.get("/issue", response_model=IssueResponse, status_code=status.HTTP_200_OK)
def get_issue(
    issue_id: int = Query(..., alias="id", description="Issue ID"),
    store: MemoryStore = Depends(get_store),
):
    """Get issue by ID"""
    try:
        return logic.get_issue(store, issue_id)
    except logic.TrackerError as exc:
        raise to_http_exception(exc)
