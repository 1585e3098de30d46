"""
Movie Service - Read and mutation logic over the movie collection

Lookups are linear scans returning the first match. A missing id is answered
with the empty movie rather than an error.

Request bodies are decoded leniently: only the first JSON value is read, keys
match field names case-insensitively, fields holding a value of the wrong type
are skipped and the rest kept. A body that is not a JSON object at all
(empty, malformed, array, scalar) decodes to the empty movie.
"""

import json
import logging
from typing import Any, Callable, Dict, List, Optional

from movie_store.domain.schemas import Director, Movie, empty_movie
from api.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

_MOVIE_STRING_FIELDS = ("id", "isbn", "title")
_DIRECTOR_STRING_FIELDS = ("firstname", "lastname")


def _match_field(key: str, fields) -> Optional[str]:
    folded = key.casefold()
    for field in fields:
        if field.casefold() == folded:
            return field
    return None


def _decode_strings(target: Any, data: Dict[str, Any], fields) -> None:
    # null leaves the field as it is; any other non-string is skipped
    for key, value in data.items():
        field = _match_field(key, fields)
        if field is None:
            continue
        if isinstance(value, str):
            setattr(target, field, value)
        elif value is not None:
            logger.debug(f"Skipping {key!r}: expected a string, got {type(value).__name__}")


def _decode_director(current: Optional[Director], value: Any) -> Optional[Director]:
    if value is None:
        return None
    director = current if current is not None else Director()
    if isinstance(value, dict):
        _decode_strings(director, value, _DIRECTOR_STRING_FIELDS)
    else:
        logger.debug(f"Skipping director: expected an object, got {type(value).__name__}")
    return director


def decode_movie(body: bytes) -> Movie:
    """
    Decode a JSON request body into a movie.

    Args:
        body: Raw request body

    Returns:
        The decoded movie, or the empty movie when the body does not start
        with a JSON object
    """
    text = body.decode("utf-8", errors="replace").lstrip()
    try:
        data, _ = json.JSONDecoder().raw_decode(text)
    except json.JSONDecodeError as e:
        logger.debug(f"Undecodable movie body, using empty movie: {e.msg}")
        return empty_movie()

    if not isinstance(data, dict):
        if data is not None:
            logger.debug(f"Movie body is a JSON {type(data).__name__}, using empty movie")
        return empty_movie()

    movie = empty_movie()
    _decode_strings(movie, data, _MOVIE_STRING_FIELDS)
    for key, value in data.items():
        if _match_field(key, ("director",)) is not None:
            movie.director = _decode_director(movie.director, value)
    return movie


def list_movies(repo: BaseRepository) -> List[Movie]:
    return repo.list_movies()


def get_movie(repo: BaseRepository, movie_id: str) -> Movie:
    """First movie with this id, or the empty movie."""
    index = repo.index_of(movie_id)
    if index is None:
        logger.debug(f"Movie {movie_id!r} not found")
        return empty_movie()
    return repo.get_at(index)


def create_movie(repo: BaseRepository, body: bytes, new_id: Callable[[], str]) -> Movie:
    """
    Append a movie decoded from body under a freshly generated id.

    Any id present in the body is discarded. The generated id is not checked
    against ids already in the collection.
    """
    movie = decode_movie(body)
    movie.id = new_id()
    repo.append(movie)
    logger.info(f"Created movie {movie.id!r} ({repo.count()} movies)")
    return movie


def update_movie(repo: BaseRepository, movie_id: str, body: bytes) -> Movie:
    """
    Replace the first movie with this id by one decoded from body.

    The old record is removed from its position and the replacement is
    appended at the end, keeping movie_id whatever id the body carries.

    Returns:
        The replacement, or the empty movie if no movie has this id
        (the collection is then left unchanged)
    """
    index = repo.index_of(movie_id)
    if index is None:
        logger.debug(f"Movie {movie_id!r} not found, nothing to update")
        return empty_movie()

    repo.remove_at(index)
    movie = decode_movie(body)
    movie.id = movie_id
    repo.append(movie)
    logger.info(f"Updated movie {movie_id!r}, moved from position {index} to the end")
    return movie


def delete_movie(repo: BaseRepository, movie_id: str) -> List[Movie]:
    """
    Remove the first movie with this id, if any.

    Returns:
        The collection after the removal
    """
    index = repo.index_of(movie_id)
    if index is not None:
        repo.remove_at(index)
        logger.info(f"Deleted movie {movie_id!r} ({repo.count()} movies left)")
    else:
        logger.debug(f"Movie {movie_id!r} not found, nothing to delete")
    return repo.list_movies()
