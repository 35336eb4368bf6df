import os
from dataclasses import dataclass, field

DEFAULT_HTTP_PORT = 8080
DEFAULT_HTTP_HOST = "0.0.0.0"
DEFAULT_CORS_ORIGINS = "http://localhost:3000"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    http_host: str = DEFAULT_HTTP_HOST
    http_port: int = DEFAULT_HTTP_PORT
    cors_origins: list[str] = field(default_factory=lambda: [DEFAULT_CORS_ORIGINS])
    log_level: str = DEFAULT_LOG_LEVEL


def _getenv(name: str, default: str) -> str:
    # Blank values fall back to the default
    value = os.getenv(name, "").strip()
    return value or default


def load_settings() -> Settings:
    """
    Build settings from environment variables.

    Reads:
    - HTTP_HOST: bind address (default 0.0.0.0)
    - HTTP_PORT: listen port (default 8080)
    - CORS_ORIGINS: comma separated allowed origins
    - LOG_LEVEL: root logging level (default INFO)
    """
    port = _getenv("HTTP_PORT", str(DEFAULT_HTTP_PORT))
    try:
        http_port = int(port)
    except ValueError:
        raise ValueError(f"HTTP_PORT must be an integer, got {port!r}")

    origins = _getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)

    return Settings(
        http_host=_getenv("HTTP_HOST", DEFAULT_HTTP_HOST),
        http_port=http_port,
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        log_level=_getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
