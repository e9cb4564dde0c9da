"""FastAPI application factory and configuration."""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from subrip.api.v1 import api_router
from subrip.core.config import get_settings
from subrip.core.logging import setup_logging
from subrip.core.middleware import setup_middleware

# Setup logging
setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logger.info(
        "Application startup: %s %s (%s)",
        settings.app_name,
        settings.app_version,
        settings.environment,
    )
    if not settings.api_key:
        logger.warning("API_KEY is not set - authentication is disabled")

    yield

    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description=settings.app_description,
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Setup middleware (CORS, auth, request logging)
    setup_middleware(app)

    # Include API routes with versioning
    app.include_router(api_router, prefix="/api/v1")

    return app


# Create app instance
app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "subrip.main:app", host=settings.host, port=settings.port, proxy_headers=True, reload=False
    )


if __name__ == "__main__":
    run()
