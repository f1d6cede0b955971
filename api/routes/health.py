"""
Module 09D - Health Check Route

Liveness checks.
"""

from fastapi import APIRouter, Depends

from api.deps import get_service
from api.models.responses import HealthResponse, RootResponse
from orchestrator.relay import RelayService


router = APIRouter(tags=["health"])


@router.get("/api/health", response_model=HealthResponse)
def health_check(service: RelayService = Depends(get_service)) -> HealthResponse:
    """
    Health check endpoint.

    Returns service status and whether the record store answers.
    """
    return HealthResponse(**service.health())


@router.get("/", response_model=RootResponse)
async def root() -> RootResponse:
    """
    Root endpoint - bare liveness check.
    """
    return RootResponse(activeStatus=True, error=False)
