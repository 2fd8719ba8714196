"""
Main FastAPI application entry point.

Initializes the FastAPI app with middleware, routers, and the
lifespan handler that builds the search index.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from actus_docs.api.v1.router import api_router
from actus_docs.core.config import settings
from actus_docs.core.logging import get_logger, setup_logging
from actus_docs.middleware.error_handler import ErrorHandlerMiddleware
from actus_docs.schemas.common import HealthCheckResponse
from actus_docs.services.document_service import DocumentService
from actus_docs.services.search_service import build_search_index

# Setup logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Builds the search index at startup and stores it on the app,
    which owns it from then on.
    """
    # Startup
    logger.info("Starting application...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Docs directory: {settings.DOCS_DIRECTORY}")

    app.state.search_index = build_search_index(DocumentService(settings.DOCS_DIRECTORY))
    logger.info("Application startup complete")

    yield

    # Shutdown
    app.state.search_index = None
    logger.info("Application shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Documentation engine for the ACTUS financial-contract standard",
    docs_url="/api-docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)

app.add_middleware(ErrorHandlerMiddleware)

# Include API router
app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """
    Root endpoint - API information.

    Returns:
        Basic API information and links
    """
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "docs": "/api-docs" if settings.DEBUG else "disabled",
        "health": "/health",
    }


@app.get("/health", tags=["Health"])
async def health_check() -> JSONResponse:
    """
    Health check endpoint.

    Reports whether the docs directory is readable and whether the
    search index has been built.

    Returns:
        JSON response with health status
    """
    services: dict[str, str] = {}
    status = "healthy"

    if Path(settings.DOCS_DIRECTORY).is_dir():
        services["docs_directory"] = "healthy"
    else:
        logger.error(f"Docs directory missing: {settings.DOCS_DIRECTORY}")
        services["docs_directory"] = "unhealthy"
        status = "degraded"

    index = getattr(app.state, "search_index", None)
    services["search_index"] = f"{len(index)} documents" if index is not None else "not built"

    health = HealthCheckResponse(
        status=status,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        timestamp=datetime.now(UTC).isoformat(),
        services=services,
    )

    return JSONResponse(
        status_code=200 if status == "healthy" else 503,
        content=health.model_dump(),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "actus_docs.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
