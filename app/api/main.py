"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Configure middleware (CORS, request context)
  - Mount user and auth routers under /api
  - Expose the /health liveness endpoint

Collaborators:
  - FastAPI: ASGI web framework
  - CORSMiddleware: Cross-Origin Resource Sharing handler
  - RequestContextMiddleware: Request ID and logging context
  - interfaces.api.http.routers: users/auth endpoints
  - infrastructure.db.pool: PostgreSQL pool lifecycle

Notes:
  - Settings are validated in the lifespan: a missing JWT_SECRET stops startup
  - The DB pool is only opened when the Postgres repository is selected
  - /health follows the liveness convention and never touches the DB
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from ..crosscutting.config import get_settings
from ..crosscutting.logger import logger
from ..crosscutting.middleware import REQUEST_ID_HEADER, RequestContextMiddleware
from ..infrastructure.db.pool import close_pool, init_pool
from ..interfaces.api.http.routers import auth_router, users_router
from .exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Validates settings and initializes pool."""
    settings = get_settings()

    use_postgres = not settings.uses_in_memory_repository()
    if use_postgres:
        init_pool(
            database_url=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
        )

    try:
        logger.info(
            "Users API starting up",
            extra={
                "app_env": settings.app_env,
                "user_repository": "postgres" if use_postgres else "memory",
                "db_pool_min": settings.db_pool_min_size,
                "db_pool_max": settings.db_pool_max_size,
            },
        )
        yield
    finally:
        if use_postgres:
            close_pool()
        logger.info("Users API shutting down")


def _get_allowed_origins() -> list[str]:
    """CORS origins from settings; invalid settings surface later in the lifespan."""
    try:
        return get_settings().get_allowed_origins_list()
    except ValidationError:
        return []


app = FastAPI(
    title="Users API",
    version="1.0.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "users", "description": "User registration, listing and avatar"},
        {"name": "auth", "description": "User authentication (JWT)"},
    ],
)

# R: Middleware order (bottom = first to execute):
# 1. CORSMiddleware - handles preflight
# 2. RequestContextMiddleware - sets request_id
app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_allowed_origins(),
    allow_credentials=False,
    allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", REQUEST_ID_HEADER],
)

app.include_router(users_router)
app.include_router(auth_router)

register_exception_handlers(app)


@app.get("/health", tags=["health"])
def health():
    """R: Liveness check: {status: "ok", timestamp}."""
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
