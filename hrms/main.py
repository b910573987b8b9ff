"""
FastAPI Application
===================

Main FastAPI app setup with routes, error handlers and lifecycle hooks.
Startup: settings → logging → MongoDB connection (fatal on failure) → routes.
"""
import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hrms import __version__
from hrms.api.v1 import employee_router
from hrms.core.config import get_settings
from hrms.core.logging_config import setup_logging
from hrms.di.container import DIContainer, build_container

logger = logging.getLogger(__name__)

SERVICE_NAME = "HRMS Employee API"


def create_application(
    container_factory: Optional[Callable[[], DIContainer]] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - Request body validation mapped to 400
    - API route registration under /employee
    - A lifespan handler owning the MongoDB connection

    Args:
        container_factory: Builds the DI container at startup. Defaults to
            a container connected with the configured settings.

    Returns:
        Configured FastAPI application instance
    """
    setup_logging()
    factory = container_factory or build_container

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Connect to MongoDB and build the DI container before serving.

        A StoreConnectionError propagates out of startup so the server exits
        before accepting any request. The connection is closed on shutdown.
        """
        app.state.container = factory()
        logger.info(f"{SERVICE_NAME} ready")
        try:
            yield
        finally:
            app.state.container.shutdown()
            logger.info(f"{SERVICE_NAME} stopped")

    application = FastAPI(
        title=SERVICE_NAME,
        description="CRUD API for employee records stored in MongoDB",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Malformed request bodies are client errors (400), not 422."""
        logger.info(f"Rejected malformed request to {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc)},
        )

    # Register API routers
    application.include_router(employee_router, prefix="/employee")

    @application.get("/")
    async def root():
        """Root endpoint - service info."""
        return {
            "status": "running",
            "service": SERVICE_NAME,
            "version": __version__,
            "docs": "/docs",
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "hrms.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
