from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from movie_store.movie_constants import SEED_MOVIES


@dataclass
class Director:
    """Director embedded in a movie; has no identity of its own"""
    firstname: str = ""
    lastname: str = ""


@dataclass
class Movie:
    """A movie record of the collection"""
    id: str = ""
    isbn: str = ""
    title: str = ""
    director: Optional[Director] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Movie":
        director = data.get("director")
        return cls(
            id=data.get("id", ""),
            isbn=data.get("isbn", ""),
            title=data.get("title", ""),
            director=Director(**director) if director is not None else None,
        )


def empty_movie() -> Movie:
    """Zero-valued movie: empty strings and no director."""
    return Movie()


def seed_movies() -> List[Movie]:
    """Fresh copies of the sample records, in collection order."""
    return [Movie.from_dict(data) for data in SEED_MOVIES]
