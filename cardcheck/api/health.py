"""
Health check endpoint.

Liveness probe only; the service has no dependencies worth probing.
"""

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not contact Scryfall.
    """
    return HealthResponse(status="healthy")
