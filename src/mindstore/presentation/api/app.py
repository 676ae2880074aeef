"""FastAPI application factory.

All API endpoints are versioned under the /api/v1/ prefix. The health
check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mindstore import __version__
from mindstore.infrastructure.persistence.sqlalchemy.init_db import init_database
from mindstore.presentation.api.dependencies import get_engine
from mindstore.presentation.api.exception_handlers import setup_exception_handlers
from mindstore.presentation.api.routers import admin_router
from mindstore_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names, the configured level
    for mindstore modules and WARNING for noisy third-party libraries.
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

    logging.getLogger("mindstore").setLevel(log_level)
    logging.getLogger("mindstore_config").setLevel(log_level)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_V1_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("Starting MindStore API v%s...", __version__)
    engine = get_engine()
    try:
        await init_database(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    logger.info("Shutting down MindStore API...")
    await engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    v1_router = APIRouter()
    v1_router.include_router(admin_router)
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.
    """
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Back-office API for the MindStore catalog and accounts.",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Unversioned health check for load balancers and monitoring."""
        return {
            "status": "healthy",
            "version": __version__,
            "api_versions": ["v1"],
        }

    return app


# Application instance for uvicorn
app = create_app()
