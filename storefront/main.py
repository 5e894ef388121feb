"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
"""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront import __version__
from storefront.api.v1 import product_router, user_router
from storefront.core.config import Settings, get_settings
from storefront.core.logging_config import setup_logging
from storefront.di.container import get_container, init_container

logger = logging.getLogger(__name__)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - API route registration
    - Shutdown handler closing the MongoDB client when one was opened

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    application = FastAPI(
        title="Storefront API",
        description="Product catalog and user accounts with business-rule validation",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(product_router, prefix=f"{settings.api_prefix}/products")
    application.include_router(user_router, prefix=f"{settings.api_prefix}/users")

    @application.on_event("startup")
    async def startup_event():
        """Build the DI container from this application's settings so wiring errors surface at boot."""
        init_container(settings)
        logger.info(f"Storefront API started with '{settings.storage_backend}' storage")

    @application.on_event("shutdown")
    async def shutdown_event():
        container = get_container()
        if container.has("mongo_client"):
            container.get("mongo_client").close()
        logger.info("Storefront API stopped")

    @application.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "status": "running",
            "service": "Storefront API",
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
