"""
In-Memory Repository - Process-lifetime movie collection

Holds the movies in a plain Python list. Nothing is persisted and there is no
locking: callers sharing one instance across threads or workers race on it.
"""

import logging
from typing import Iterable, List, Optional

from movie_store.domain.schemas import Movie
from api.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class InMemoryRepository(BaseRepository):
    """Repository implementation backed by a list"""

    def __init__(self, movies: Optional[Iterable[Movie]] = None):
        self._movies: List[Movie] = list(movies) if movies is not None else []
        logger.info(f"InMemoryRepository initialized with {len(self._movies)} movies")

    def list_movies(self) -> List[Movie]:
        return list(self._movies)

    def index_of(self, movie_id: str) -> Optional[int]:
        for index, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return index
        return None

    def get_at(self, index: int) -> Movie:
        return self._movies[index]

    def append(self, movie: Movie) -> None:
        self._movies.append(movie)

    def remove_at(self, index: int) -> Movie:
        return self._movies.pop(index)

    def count(self) -> int:
        return len(self._movies)
