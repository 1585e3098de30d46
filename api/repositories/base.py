"""
Base Repository - Abstract interface for movie collection access

Defines the sequence operations the movie service is written against.
The collection is ordered; positions are plain list indices.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from movie_store.domain.schemas import Movie


class BaseRepository(ABC):
    """Abstract base class for movie repositories"""

    @abstractmethod
    def list_movies(self) -> List[Movie]:
        """
        Get every movie in collection order.

        Returns:
            Snapshot list; mutating it does not change the collection
        """
        pass

    @abstractmethod
    def index_of(self, movie_id: str) -> Optional[int]:
        """
        Linear scan for the first movie whose id equals movie_id.

        Returns:
            Position of the first match, or None
        """
        pass

    @abstractmethod
    def get_at(self, index: int) -> Movie:
        """Movie stored at position index"""
        pass

    @abstractmethod
    def append(self, movie: Movie) -> None:
        """Add a movie at the end of the collection"""
        pass

    @abstractmethod
    def remove_at(self, index: int) -> Movie:
        """
        Remove the movie at position index, shifting later movies down by one.

        Returns:
            The removed movie
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of movies in the collection"""
        pass
