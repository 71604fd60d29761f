"""
FitLog Backend - FastAPI Application
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fitlog.core.config import settings
from fitlog.core.database import init_db
from fitlog.core.logging import setup_logging, get_logger
from fitlog.api import dashboard, goals, workouts
from fitlog.services.store import DatabaseStorage, create_storage
from fitlog.services.tracker import TrackerSession

logger = get_logger(__name__)


def create_app(tracker: Optional[TrackerSession] = None) -> FastAPI:
    """
    Build the application.

    When no tracker is given one is created at startup from STORAGE_BACKEND.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        setup_logging()
        logger.info("Starting FitLog Backend", version="1.0.0")

        session = tracker
        if session is None:
            storage = create_storage(settings)
            if isinstance(storage, DatabaseStorage):
                init_db()
                logger.info("Database initialized")
            session = TrackerSession(storage, settings)

        session.load()
        app.state.tracker = session

        yield

        # Shutdown
        logger.info("Shutting down FitLog Backend")

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Personal workout log with weekly goals, charts and CSV export",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(workouts.router, prefix="/api/workouts", tags=["workouts"])
    app.include_router(goals.router, prefix="/api/goals", tags=["goals"])
    app.include_router(dashboard.router, prefix="/api", tags=["dashboard"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "fitlog-backend"}

    return app


app = create_app()
