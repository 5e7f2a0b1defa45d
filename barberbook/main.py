"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from barberbook.api.errors import register_error_handlers
from barberbook.api.v1 import (
    booking_router,
    operator_router,
    service_router,
    shop_router,
    slot_router,
)
from barberbook.application.dto.common_dto import HealthResponse
from barberbook.core.config import get_settings
from barberbook.core.logging_config import setup_logging
from barberbook.di.container import shutdown_container


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - Error envelope handlers and catch-all middleware
    - CORS middleware configuration
    - API route registration
    - Shutdown handler closing the MongoDB client

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    setup_logging(settings.log_level)

    application = FastAPI(
        title=settings.project_name,
        description="Booking backend for shops, operators, services and appointments",
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Catch-all is registered before CORS so error responses still get CORS headers
    register_error_handlers(application)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    application.include_router(shop_router)
    application.include_router(operator_router)
    application.include_router(service_router)
    application.include_router(booking_router)
    application.include_router(slot_router)

    @application.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="ok")

    @application.on_event("shutdown")
    async def shutdown_event() -> None:
        """Close the MongoDB client when FastAPI shuts down."""
        await shutdown_container()

    return application


# Create application instance
app = create_application()
