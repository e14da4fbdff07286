"""
FastAPI main application.
"""

from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trimsheet import __version__
from trimsheet.config import configure_logging

from .routers import aircraft, load_plans


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging()

    application = FastAPI(
        title="Load & Trim Sheet API",
        description="""
        Aircraft Load & Trim Sheet ingestion service.

        Reads weight-and-balance workbooks produced by the load-planning
        process and returns a normalized, aircraft-aware load plan.

        ## Features

        - **Load plans**: Upload a workbook, get the load plan, summary and cargo grid
        - **Manifest**: Cargo manifest as CSV
        - **Aircraft**: Supported aircraft profiles (A320, B737, B777)
        """,
        version=__version__,
    )

    # CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    application.include_router(
        load_plans.router,
        prefix="/api/v1/load-plans",
        tags=["Load Plans"],
    )
    application.include_router(
        aircraft.router,
        prefix="/api/v1/aircraft",
        tags=["Aircraft"],
    )

    @application.get("/", tags=["Health"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Load & Trim Sheet API",
            "version": __version__,
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @application.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "services": {
                "load_plans": "available",
                "aircraft": "available",
            },
        }

    return application


# Create default app instance
app = create_app()
