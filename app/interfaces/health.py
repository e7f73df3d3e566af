"""
Liveness probe.

`GET /api/health` answers without touching the database, the brokerage
or the LLM, so it stays green while an upstream is down.
"""

from fastapi import APIRouter

from app.core.config import settings
from app.interfaces.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Liveness probe")
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=settings.version)
