from fastapi import APIRouter, Depends, status

from app import logic
from app.dependencies import get_store
from app.routes.errors import to_http_exception
from app.schemas import CreateProjectRequest, ProjectResponse
from app.store import MemoryStore

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=list[ProjectResponse])
def list_projects(store: MemoryStore = Depends(get_store)):
    """List all projects in creation order."""
    return logic.list_projects(store)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(payload: CreateProjectRequest, store: MemoryStore = Depends(get_store)):
    """Create a new project with a unique key"""
    try:
        return logic.create_project(store, payload.key, payload.name)
    except logic.TrackerError as exc:
        raise to_http_exception(exc)
