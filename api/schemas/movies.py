"""
Movie API Schemas - JSON shape of movies and directors in responses

Request bodies are not validated against these models; see
movie_service.decode_movie for how they are read.
"""

from typing import Optional
from pydantic import BaseModel, Field

from movie_store.domain.schemas import Movie


class DirectorSchema(BaseModel):
    """Director embedded in a movie"""

    firstname: str = Field("", description="Director first name")
    lastname: str = Field("", description="Director last name")


class MovieSchema(BaseModel):
    """
    A movie record.

    An all-empty instance (empty strings, null director) is what the API
    returns for an id that is not in the collection.
    """

    id: str = Field("", description="Server-generated identifier")
    isbn: str = Field("", description="ISBN")
    title: str = Field("", description="Movie title")
    director: Optional[DirectorSchema] = Field(None, description="Director (nullable)")

    @classmethod
    def from_domain(cls, movie: Movie) -> "MovieSchema":
        director = None
        if movie.director is not None:
            director = DirectorSchema(
                firstname=movie.director.firstname,
                lastname=movie.director.lastname,
            )
        return cls(id=movie.id, isbn=movie.isbn, title=movie.title, director=director)
