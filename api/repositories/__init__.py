"""
API Repositories - Data access abstraction layer

Provides a clean interface to the movie collection so the service layer
does not depend on how the movies are held.

Pattern: Repository Pattern
"""
