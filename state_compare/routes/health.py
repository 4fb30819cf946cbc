"""
Health check route for the State Compare backend.

This endpoint is PUBLIC and provides a simple status check for
load balancers, monitoring and deployment verification.
"""

from fastapi import APIRouter

from state_compare.schemas.health import HealthResponse
from state_compare.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description=(
        "Public health check endpoint. "
        "Returns a simple status indicator for monitoring and load balancing."
    ),
    status_code=200,
    tags=["system"],
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Returns:
        HealthResponse: Simple status object with "ok" status
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
