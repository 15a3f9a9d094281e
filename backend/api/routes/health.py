"""
Health check endpoints.

Provides endpoints for monitoring application health.
"""

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    ok: bool = True


@router.get("/healthz", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Liveness probe.

    Returns 200 if the API is running; does not touch the database.
    """
    return HealthResponse()
