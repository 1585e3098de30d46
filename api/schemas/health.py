"""
Health API Schemas - Response model for the readiness check
"""

from pydantic import BaseModel, Field


class ReadinessResponse(BaseModel):
    """Readiness of the movie collection"""

    ready: bool = Field(..., description="True once the collection and id generator exist")
    movie_count: int = Field(..., description="Movies currently in the collection")
    seeded: bool = Field(..., description="Whether the sample movies were loaded at startup")
