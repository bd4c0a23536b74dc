"""Main FastAPI application."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from gymlog.config.settings import get_settings
from gymlog.core.error_handlers import domain_error_handler
from gymlog.core.exceptions import DomainError
from gymlog.core.logging import configure_logging, get_logger
from gymlog.db.database import close_engine, init_db
from gymlog.middleware.request_id import RequestIDMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: Initialize database
    await init_db()
    logger.info("startup_complete")

    yield

    # Shutdown: Close database connections
    await close_engine()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging()

    app = FastAPI(
        title=settings.app_name,
        description="Workout tracker: exercise library, workouts and training logs",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(RequestIDMiddleware)
    app.add_exception_handler(DomainError, domain_error_handler)

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    # Import and include routers
    from gymlog.api.routes import (
        exercises_router,
        log_groups_router,
        workouts_router,
    )

    app.include_router(exercises_router, prefix="/exercises", tags=["Exercises"])
    app.include_router(workouts_router, prefix="/workouts", tags=["Workouts"])
    app.include_router(log_groups_router, prefix="/log-groups", tags=["Training Log"])

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("gymlog.main:app", host="0.0.0.0", port=8000, reload=True)
