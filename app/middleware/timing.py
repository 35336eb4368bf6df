import logging
import time

from fastapi import Request

logger = logging.getLogger(__name__)


async def timing_middleware(request: Request, call_next):
    """Log status, duration, method and path of every request."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000

    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"

    logger.info(
        f"HTTP {response.status_code} {duration_ms:.0f}ms {request.method} {target}",
        extra={"status_code": response.status_code, "duration_ms": duration_ms},
    )
    return response

