from fastapi import APIRouter, status

from app.schemas import HealthResponse

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK)
def health():
    """Check service availability"""
    return HealthResponse(status="ok")
