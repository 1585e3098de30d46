"""
Health Router - Readiness of the movie collection
"""

from fastapi import APIRouter, Depends

from api.schemas.health import ReadinessResponse
from api.dependencies import get_app_state, AppState

router = APIRouter()


@router.get("/ready", response_model=ReadinessResponse)
async def health_check_ready(state: AppState = Depends(get_app_state)) -> ReadinessResponse:
    return ReadinessResponse(
        ready=state.is_ready(),
        movie_count=state.repository.count() if state.repository is not None else 0,
        seeded=state.seeded,
    )
