"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
Startup: connect to MongoDB → serve requests → close the connection.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from job_tracker.api.v1 import company_router, register_error_handlers
from job_tracker.api.v1.dependencies import get_company_service
from job_tracker.application.dto.company_dto import HealthResponse, MessageResponse
from job_tracker.application.services.company_service import CompanyService
from job_tracker.core.config import Settings, get_settings
from job_tracker.core.logging_config import setup_logging
from job_tracker.di.container import DIContainer
from job_tracker.infrastructure.db.mongo_connection import MongoConnection

logger = logging.getLogger(__name__)


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[DIContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - Dependency container (MongoDB connection, repository, service)
    - CORS middleware configuration
    - API route registration and error handlers
    - Lifespan handler opening and closing the MongoDB connection

    Args:
        settings: Settings to use (defaults to environment settings)
        container: Pre-wired container (defaults to a new DIContainer)

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    container = container or DIContainer(settings)

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        connection: MongoConnection = container.get(MongoConnection)
        # A failed connection is logged and the API keeps serving
        await connection.connect()
        logger.info("Server is running at http://localhost:%s", settings.port)
        try:
            yield
        finally:
            await connection.close()
            logger.info("MongoDB connection closed")

    application = FastAPI(
        title="Job Tracker API",
        description="Record companies and query them by name, country and open position",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.container = container

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)
    application.include_router(company_router)

    @application.get("/", response_model=MessageResponse)
    async def root() -> MessageResponse:
        """Root endpoint - liveness check, independent of the database."""
        return MessageResponse(message="API server is running!")

    @application.get("/health", response_model=HealthResponse)
    async def health(service: CompanyService = Depends(get_company_service)) -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            database="connected" if service.is_store_available() else "disconnected",
        )

    return application


# Create application instance
app = create_application()
