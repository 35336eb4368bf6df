"""API route modules for FastAPI endpoints."""

from app.routes.health import router as health_router
from app.routes.issues import router as issues_router
from app.routes.projects import router as projects_router

__all__ = ["health_router", "issues_router", "projects_router"]
