"""Health Probe - liveness endpoint for container orchestration and the frontend.

Invariants:
    - GET /api/health always returns 200 with status "UP" if the process is up
    - namesCount reflects the store at the time of the call

Design Decisions:
    - Service id read from settings, not hardcoded in the route
"""

from fastapi import APIRouter, Depends, status

from pickstream.api.dependencies import get_name_store
from pickstream.config import get_settings
from pickstream.core.name_store import NameStore
from pickstream.schemas.names import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get(
    "/health", response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
)
async def health_check(store: NameStore = Depends(get_name_store)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse(
        service=get_settings().service_name,
        names_count=store.count(),
    )
