"""
API Dependencies - Application state and FastAPI dependency injection

The movie collection lives in a single AppState instance for the lifetime of
the process. It is shared by every request without synchronization.
"""

import logging
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import Depends

from movie_store.domain.schemas import seed_movies
from movie_store.settings import Settings, get_settings
from movie_store.utils.ids import MovieIdGenerator
from api.repositories.base import BaseRepository
from api.repositories.memory import InMemoryRepository

logger = logging.getLogger(__name__)


class AppState:
    """
    Global application state - holds the movie repository and id generator.

    Singleton pattern: one instance shared across all requests.
    """

    def __init__(self):
        self.repository: Optional[BaseRepository] = None
        self.id_generator: Optional[MovieIdGenerator] = None
        self.seeded = False
        self._initialized = False

    def initialize(self, settings: Optional[Settings] = None) -> None:
        """
        Create the repository (seeded unless disabled) and the id generator.

        Calling it again on an initialized state does nothing.
        """
        if self._initialized:
            logger.debug("AppState already initialized")
            return

        cfg = settings or get_settings()
        logger.info("Initializing AppState...")

        movies = seed_movies() if cfg.seed_movies else []
        self.repository = InMemoryRepository(movies)
        self.seeded = cfg.seed_movies
        self.id_generator = MovieIdGenerator(upper_bound=cfg.id_upper_bound, seed=cfg.random_seed)

        self._initialized = True
        logger.info(f"AppState initialization complete ({len(movies)} seed movies)")

    def is_ready(self) -> bool:
        """Check if app is ready to serve requests"""
        return self._initialized and self.repository is not None and self.id_generator is not None


# Global singleton instance
app_state = AppState()


def get_app_state() -> AppState:
    """
    FastAPI dependency to access app state.

    Usage in routers:
        @router.get("/example")
        async def example(state: AppState = Depends(get_app_state)):
            repo = state.repository
            ...
    """
    if not app_state._initialized:
        logger.warning("AppState not initialized, initializing now...")
        app_state.initialize()

    return app_state


def get_repository(state: AppState = Depends(get_app_state)) -> BaseRepository:
    """FastAPI dependency to access the movie repository."""
    if state.repository is None:
        raise RuntimeError("Repository not initialized")
    return state.repository


def get_id_generator(state: AppState = Depends(get_app_state)) -> MovieIdGenerator:
    """FastAPI dependency to access the movie id generator."""
    if state.id_generator is None:
        raise RuntimeError("Id generator not initialized")
    return state.id_generator


@asynccontextmanager
async def lifespan_handler(app):
    """
    FastAPI lifespan context manager for startup/shutdown.

    Usage in main.py:
        app = FastAPI(lifespan=lifespan_handler)
    """
    cfg = get_settings()
    app_state.initialize(cfg)
    logger.info(f"Starting server at port {cfg.api_port}")

    yield  # App is now running

    logger.info("Shutdown complete")
