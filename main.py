import logging
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import Settings, load_settings
from app.middleware import MAX_BODY_BYTES, BodyLimitMiddleware, timing_middleware
from app.routes import health_router, issues_router, projects_router
from app.store import MemoryStore

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed request", extra={"errors": exc.errors()})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "invalid request"},
    )


def create_app(settings: Optional[Settings] = None, store: Optional[MemoryStore] = None) -> FastAPI:
    """Build the API with its own store; nothing is shared between apps."""
    settings = settings or load_settings()

    app = FastAPI(title="Mini Jira")
    app.state.settings = settings
    app.state.store = store or MemoryStore()

    app.add_middleware(BodyLimitMiddleware, max_bytes=MAX_BODY_BYTES)
    app.middleware("http")(timing_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(health_router)
    app.include_router(projects_router)
    app.include_router(issues_router)
    return app


settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(levelname)s | %(name)s | %(message)s",
)

app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.http_host, port=settings.http_port)
