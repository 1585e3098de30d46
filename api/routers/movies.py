"""
Movies Router - CRUD endpoints over the movie collection

Every endpoint answers 200. Unknown ids yield the empty movie and request
bodies are decoded leniently, so no 404 or 400 is ever produced here.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, Request

from api.schemas.movies import MovieSchema
from api.services import movie_service
from api.dependencies import get_repository, get_id_generator
from api.repositories.base import BaseRepository
from movie_store.utils.ids import MovieIdGenerator

router = APIRouter()
logger = logging.getLogger(__name__)

# Bodies are read raw; this only documents their shape in OpenAPI
_MOVIE_BODY = {
    "requestBody": {
        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/MovieSchema"}}}
    }
}


@router.get("/movies", response_model=List[MovieSchema])
async def list_movies(repo: BaseRepository = Depends(get_repository)) -> List[MovieSchema]:
    """List every movie in collection order."""
    return [MovieSchema.from_domain(m) for m in movie_service.list_movies(repo)]


@router.get("/movies/{id}", response_model=MovieSchema)
async def get_movie(id: str, repo: BaseRepository = Depends(get_repository)) -> MovieSchema:
    """Get a movie by id; the empty movie if there is none."""
    return MovieSchema.from_domain(movie_service.get_movie(repo, id))


@router.post("/movies", response_model=MovieSchema, openapi_extra=_MOVIE_BODY)
async def create_movie(
    request: Request,
    repo: BaseRepository = Depends(get_repository),
    id_generator: MovieIdGenerator = Depends(get_id_generator)
) -> MovieSchema:
    """
    Create a movie under a generated id.

    An id given in the body is ignored. An undecodable body creates a movie
    with empty fields.
    """
    body = await request.body()
    return MovieSchema.from_domain(movie_service.create_movie(repo, body, id_generator))


@router.put("/movies/{id}", response_model=MovieSchema, openapi_extra=_MOVIE_BODY)
async def update_movie(
    id: str,
    request: Request,
    repo: BaseRepository = Depends(get_repository)
) -> MovieSchema:
    """
    Replace a movie; the replacement moves to the end of the collection.

    Returns the empty movie if the id is unknown.
    """
    body = await request.body()
    return MovieSchema.from_domain(movie_service.update_movie(repo, id, body))


@router.delete("/movies/{id}", response_model=List[MovieSchema])
async def delete_movie(id: str, repo: BaseRepository = Depends(get_repository)) -> List[MovieSchema]:
    """Delete the first movie with this id and return the remaining collection."""
    return [MovieSchema.from_domain(m) for m in movie_service.delete_movie(repo, id)]
