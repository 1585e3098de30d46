"""
Movies CRUD API - FastAPI Application

Main entry point for the API server.
Configuration reads from settings (APP_* environment variables or .env file).
"""

import logging
from fastapi import FastAPI

from movie_store.settings import get_settings
from movie_store.logging_setup import setup_logging
from api.dependencies import lifespan_handler
from api.routers import movies, health

# Get settings
cfg = get_settings()

# Configure logging
setup_logging(cfg)
logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


def create_app() -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Movies CRUD API",
        description="In-memory CRUD API over a collection of movies",
        version=API_VERSION,
        lifespan=lifespan_handler  # Seeds the collection on startup
    )

    # Mount routers
    app.include_router(movies.router, tags=["movies"])
    app.include_router(health.router, prefix="/health", tags=["health"])

    @app.get("/")
    async def root():
        """Root endpoint - API info"""
        return {
            "name": "Movies CRUD API",
            "version": API_VERSION,
            "environment": cfg.env,
            "status": "running",
            "docs": "/docs",
            "health": "/health/ready"
        }

    logger.info(f"FastAPI application created (env={cfg.env})")

    return app


# Create app instance
app = create_app()


def run() -> None:
    """Serve the app with uvicorn; exits non-zero if the port cannot be bound."""
    import uvicorn

    logger.info(f"Starting API server on {cfg.api_host}:{cfg.api_port}")
    logger.info(f"Environment: {cfg.env}")

    uvicorn.run(
        "api.main:app",
        host=cfg.api_host,
        port=cfg.api_port,
        reload=cfg.api_reload,
        log_level=cfg.log_level.lower()
    )


if __name__ == "__main__":
    run()
