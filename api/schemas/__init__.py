"""
API Schemas - Pydantic models for request/response bodies

These schemas define the JSON contract between the API and clients.
Separate from the domain dataclasses in movie_store.domain.
"""
