"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health and readiness probes remain unversioned at /health and /ready.

Run with:
    uvicorn userhub.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from userhub import __version__
from userhub.infrastructure.cache import RedisCache
from userhub.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_session_maker,
    create_tables,
)
from userhub.presentation.api.exception_handlers import setup_exception_handlers
from userhub.presentation.api.middleware import RequestLoggingMiddleware
from userhub.presentation.api.routers import (
    admin_router,
    auth_router,
    health_router,
    users_router,
)
from userhub_auth import JWTService, PasswordHashingService
from userhub_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration and login.

- Passwords are hashed with bcrypt
- Login returns a JWT bearer token (HS256)
- Send it as `Authorization: Bearer <token>`
""",
    },
    {
        "name": "Users",
        "description": """User resource. Requires a bearer token.

List endpoints accept `page` and `limit` (max 100) and return
pagination metadata in `meta`.
""",
    },
    {
        "name": "Admin",
        "description": "User administration. Requires the `admin` role.",
    },
    {
        "name": "Health",
        "description": "Liveness and readiness probes.",
    },
]


def _configure_logging(settings: Settings) -> None:
    """Configure application logging.

    Sets up logging for the userhub application with:
    - Console output with timestamps and module names
    - Configurable log level for userhub modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    # Define log format
    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    # Configure root logger
    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    # Set levels for our application
    logging.getLogger("userhub").setLevel(log_level)
    logging.getLogger("userhub_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Builds the shared engine and optional cache on startup and releases
    them on shutdown.
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)
    engine = create_engine(settings)
    app.state.engine = engine
    app.state.session_maker = create_session_maker(engine)

    if settings.db_auto_migrate:
        await _init_database_schema(engine)

    app.state.cache = await _connect_cache(settings)

    yield

    # Shutdown - release the cache and dispose the engine's connection pool
    logger.info("Shutting down %s API...", settings.app_name)
    if app.state.cache is not None:
        await app.state.cache.close()
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    try:
        await create_tables(engine)
    except OSError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None


async def _connect_cache(settings: Settings) -> RedisCache | None:
    """Connect to Redis when enabled. Failure never blocks startup."""
    if not settings.redis_enabled:
        logger.info("Redis disabled (REDIS_ENABLED=false)")
        return None

    cache = RedisCache.from_settings(settings)
    await cache.connect()
    return cache


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints.

    Returns
    -------
    APIRouter with all v1 endpoints mounted.
    """
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])
    v1_router.include_router(admin_router, tags=["Admin"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)

    docs_enabled = settings.api_docs_enabled
    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "User registration, JWT authentication and user management "
            "with role-gated administration."
        ),
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    # Shared, stateless services; request-time code reads them from app.state
    app.state.settings = settings
    app.state.jwt_service = JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        expire_hours=settings.jwt_expire_hours,
    )
    app.state.password_service = PasswordHashingService(
        rounds=settings.bcrypt_rounds,
    )
    app.state.cache = None

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers for consistent error responses
    setup_exception_handlers(app)

    # Include versioned API router
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Health checks (unversioned - always accessible)
    app.include_router(health_router, tags=["Health"])

    return app
