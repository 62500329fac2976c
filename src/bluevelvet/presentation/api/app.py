"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from bluevelvet.infrastructure.persistence.sqlalchemy.models import Base
from bluevelvet.presentation.api.dependencies import get_engine
from bluevelvet.presentation.api.exception_handlers import setup_exception_handlers
from bluevelvet.presentation.api.routers import (
    auth_router,
    categories_router,
    pages_router,
)
from bluevelvet.presentation.api.schemas import HealthResponse
from bluevelvet_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names, the bluevelvet
    packages at the configured level and noisy libraries at WARNING.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("bluevelvet").setLevel(log_level)
    logging.getLogger("bluevelvet_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """User registration and login.

**Roles:**
- `administrator`: manages the catalog
- `shopper`: browses enabled categories (default)

**Security:**
- Passwords are hashed with bcrypt (minimum 8 characters)
- Successful registration and login return a JWT bearer token
""",
    },
    {
        "name": "Categories",
        "description": """Music store category catalog.

Categories form a two-level tree: a category may reference one parent.

**Listings:**
- `/` - all categories, paged, by name
- `/top-level`, `/hierarchy` - root categories (with children)
- `/search`, `/sorted`, `/enabled` - filtered and sorted pages
- `/public`, `/public/hierarchy` - shopper view (enabled only)

**Export:**
- `/export/csv` and `/export/xlsx` download the whole catalog
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Blue Velvet API v%s...", API_VERSION)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down Blue Velvet API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Create missing tables and verify connectivity."""
    logger.info("Initializing database schema...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


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
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User accounts and the **category catalog** of a music store.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    app.include_router(auth_router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(
        categories_router,
        prefix="/api/categories",
        tags=["Categories"],
    )
    app.include_router(pages_router)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers and monitoring."""
        return HealthResponse(status="healthy", version=API_VERSION)

    return app
