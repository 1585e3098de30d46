"""
API Routers - HTTP endpoint handlers

Each router handles a specific domain of functionality:
- movies: CRUD over the movie collection
- health: Health checks and system info
"""
