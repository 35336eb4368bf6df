"""HTTP middleware for request logging and body size limits."""

from app.middleware.body_limit import MAX_BODY_BYTES, BodyLimitMiddleware
from app.middleware.timing import timing_middleware

__all__ = ["MAX_BODY_BYTES", "BodyLimitMiddleware", "timing_middleware"]
